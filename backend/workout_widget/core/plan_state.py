from __future__ import annotations
from typing import Optional

from workout_widget.errors import OutOfRange

class PlanState:
    """
    Completed set plus the accordion selector for one session.

    Keyed by position in the plan: stable only as long as the exercise list
    is never reordered within a session.
    """

    def __init__(self, total: int):
        self.total = total
        self.completed: set[int] = set()
        self.expanded: Optional[int] = None

    def _check(self, position: int) -> None:
        if not 0 <= position < self.total:
            raise OutOfRange(position, self.total)

    def toggle_completed(self, position: int) -> bool:
        """Flip completion; returns the new state for that position."""
        self._check(position)
        if position in self.completed:
            self.completed.discard(position)
            return False
        self.completed.add(position)
        return True

    def toggle_expanded(self, position: int) -> Optional[int]:
        self._check(position)
        self.expanded = None if self.expanded == position else position
        return self.expanded

    def is_completed(self, position: int) -> bool:
        return position in self.completed

    def is_expanded(self, position: int) -> bool:
        return self.expanded == position

    @property
    def completed_count(self) -> int:
        return len(self.completed)
