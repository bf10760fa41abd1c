from __future__ import annotations
import logging
from enum import Enum

log = logging.getLogger(__name__)

class TimerPhase(str, Enum):
    idle = "idle"
    running = "running"
    paused = "paused"
    expired = "expired"


class RestTimer:
    """
    Countdown for the rest period of one exercise.

    The phase is derived from (time_left, initial, is_running) so it can never
    disagree with the counters:
      - running:  is_running
      - expired:  not running, time_left == 0 (also a fresh timer with initial 0)
      - idle:     not running, time_left == initial
      - paused:   not running, 0 < time_left < initial

    Every operation is total; calls that make no sense in the current phase
    are no-ops.
    """

    def __init__(self, initial: int = 0):
        self.initial = max(0, initial)
        self.time_left = self.initial
        self.is_running = False
        # Bumped on every new Running period; tick sources compare against it.
        self.generation = 0

    @property
    def phase(self) -> TimerPhase:
        if self.is_running:
            return TimerPhase.running
        if self.time_left == 0:
            return TimerPhase.expired
        if self.time_left == self.initial:
            return TimerPhase.idle
        return TimerPhase.paused

    def start(self) -> bool:
        if self.is_running or self.time_left <= 0:
            return False
        self.is_running = True
        self.generation += 1
        log.debug("timer started at %ss (generation %d)", self.time_left, self.generation)
        return True

    def pause(self) -> bool:
        if not self.is_running:
            return False
        self.is_running = False
        log.debug("timer paused at %ss", self.time_left)
        return True

    def toggle(self) -> bool:
        return self.pause() if self.is_running else self.start()

    def tick(self) -> bool:
        if not self.is_running:
            return False
        self.time_left -= 1
        if self.time_left <= 0:
            self.time_left = 0
            self.is_running = False
            log.debug("timer expired")
        return True

    def reset(self) -> None:
        self.is_running = False
        self.time_left = self.initial

    def reinitialize(self, initial: int) -> bool:
        """
        Adopt a new rest length, dropping any countdown in progress.

        The controller never calls this: a changed restSeconds only arrives with
        a different plan, which rebuilds every timer as a new session.
        """
        initial = max(0, initial)
        if initial == self.initial:
            return False
        self.initial = initial
        self.reset()
        return True

    def __repr__(self) -> str:
        return f"RestTimer({self.time_left}/{self.initial}, {self.phase.value})"
