from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "local"
    API_VERSION: str = "dev"
    LOG_LEVEL: str = "INFO"
    ALLOW_ORIGINS: str = "*"

    # Timers
    TICK_INTERVAL_SECONDS: float = 1.0

    # "raise" fails fast on a bad exercise position, "ignore" logs and no-ops
    OUT_OF_RANGE: Literal["raise", "ignore"] = "raise"

    # Plan delivered once at startup; set before first render, immutable afterward
    PLAN_FILE: str | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def strict_positions(self) -> bool:
        return self.OUT_OF_RANGE == "raise"

    @property
    def allow_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOW_ORIGINS.split(",") if o.strip()]

@lru_cache
def get_settings() -> Settings:
    return Settings()
