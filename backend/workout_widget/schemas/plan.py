from typing import Any

from pydantic import BaseModel, Field, field_validator

# Optional fields with an unusable value are treated as absent, never rejected.

class Exercise(BaseModel):
    name: str
    sets: int | None = None
    reps: str | int | None = None
    weight: str | None = None
    rest_seconds: int = Field(default=0, alias="restSeconds")
    notes: str | None = None

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}

    @field_validator("sets", mode="before")
    @classmethod
    def count_or_absent(cls, v: Any) -> int | None:
        if isinstance(v, bool) or not isinstance(v, int) or v < 0:
            return None
        return v

    @field_validator("rest_seconds", mode="before")
    @classmethod
    def rest_or_zero(cls, v: Any) -> int:
        if isinstance(v, bool) or not isinstance(v, int) or v < 0:
            return 0
        return v

    @field_validator("reps", mode="before")
    @classmethod
    def reps_or_absent(cls, v: Any) -> str | int | None:
        if isinstance(v, bool) or not isinstance(v, (str, int)):
            return None
        return v

    @field_validator("weight", "notes", mode="before")
    @classmethod
    def text_or_absent(cls, v: Any) -> str | None:
        if not isinstance(v, str) or not v.strip():
            return None
        return v

    @property
    def set_count(self) -> int:
        return self.sets or 0

    @property
    def sets_reps_label(self) -> str | None:
        """Sets × reps label, e.g. "4 × 6-8"; a missing half is left out."""
        if self.sets is None and self.reps is None:
            return None
        if self.reps is None:
            return f"{self.sets} sets"
        if self.sets is None:
            return f"{self.reps} reps"
        return f"{self.sets} × {self.reps}"


class Plan(BaseModel):
    name: str
    exercises: list[Exercise] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "ignore"}

    def key_for(self, position: int) -> str:
        return f"{self.exercises[position].name}-{position}"
