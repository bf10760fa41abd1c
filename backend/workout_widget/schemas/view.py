from datetime import date
from typing import Literal
from pydantic import BaseModel, Field

from workout_widget.core.timer import TimerPhase

FrameStatus = Literal["waiting", "empty", "ready"]

class TimerView(BaseModel):
    position: int
    initial_seconds: int
    time_left: int
    is_running: bool
    phase: TimerPhase
    display: str

class ProgressView(BaseModel):
    completed_count: int
    total_count: int
    percent: int
    fraction: float
    total_sets: int
    # Estimate: one rest after every set, the last one included
    total_rest_seconds: int
    total_rest_display: str

class ExerciseView(BaseModel):
    position: int
    key: str
    label: str
    name: str
    sets: int | None = None
    reps: str | int | None = None
    sets_reps: str | None = None
    weight: str | None = None
    notes: str | None = None
    rest_seconds: int
    rest_display: str
    completed: bool
    expanded: bool
    timer: TimerView

class PlanFrame(BaseModel):
    status: FrameStatus
    name: str | None = None
    session_date: date | None = None
    expanded: int | None = None
    progress: ProgressView | None = None
    exercises: list[ExerciseView] = Field(default_factory=list)
