from __future__ import annotations
import math
from dataclasses import dataclass

from workout_widget.core.plan_state import PlanState
from workout_widget.schemas.plan import Plan

@dataclass(slots=True, frozen=True)
class ProgressSummary:
    completed_count: int
    total_count: int
    fraction: float
    percent: int
    total_sets: int
    total_rest_seconds: int


def progress_fraction(completed_count: int, total_count: int) -> float:
    if total_count == 0:
        return 0.0
    return completed_count / total_count

def progress_percent(completed_count: int, total_count: int) -> int:
    # Half rounds up (12.5 -> 13), same as the widget has always shown it.
    return math.floor(100 * progress_fraction(completed_count, total_count) + 0.5)

def total_sets(plan: Plan) -> int:
    return sum(ex.set_count for ex in plan.exercises)

def total_rest_seconds(plan: Plan) -> int:
    """
    Estimated rest time for the whole plan.

    Assumes a rest period after every set of every exercise, the final set of
    the final exercise included, so it overestimates on purpose. It is shown
    as an estimate, not a measured duration.
    """
    return sum(ex.rest_seconds * ex.set_count for ex in plan.exercises)

def summarize(plan: Plan, state: PlanState) -> ProgressSummary:
    done, total = state.completed_count, len(plan.exercises)
    return ProgressSummary(
        completed_count=done,
        total_count=total,
        fraction=progress_fraction(done, total),
        percent=progress_percent(done, total),
        total_sets=total_sets(plan),
        total_rest_seconds=total_rest_seconds(plan),
    )
