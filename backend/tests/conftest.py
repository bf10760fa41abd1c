"""
Shared fixtures. Controller tests drive ticks by hand through ManualTickSource
so no test has to wait on the wall clock.
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient

from workout_widget.core.controller import PlanViewController
from workout_widget.core.ticker import TickSource
from workout_widget.main import app
from workout_widget.schemas.plan import Plan
from workout_widget.settings import get_settings

SESSION_DAY = date(2026, 10, 19)


class ManualTickSource(TickSource):
    """Same tick rules as TickSource, but never schedules itself."""

    def start(self) -> None:
        pass

    def advance(self, seconds: int) -> None:
        for _ in range(seconds):
            if not self.fire():
                break


@pytest.fixture
def sources():
    return []

@pytest.fixture
def controller(sources):
    def factory(timer, **kwargs):
        src = ManualTickSource(timer, **kwargs)
        sources.append(src)
        return src
    return PlanViewController(source_factory=factory, today=lambda: SESSION_DAY)

@pytest.fixture
def bench_curl():
    return Plan.model_validate({
        "name": "Push Pull",
        "exercises": [
            {"name": "Bench", "sets": 4, "restSeconds": 180},
            {"name": "Curl", "sets": 3, "restSeconds": 60},
        ],
    })

@pytest.fixture
def client():
    get_settings.cache_clear()
    with TestClient(app) as c:
        yield c
    get_settings.cache_clear()
