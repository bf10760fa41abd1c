from __future__ import annotations
import asyncio
import logging
from typing import Callable, Optional

from workout_widget.core.timer import RestTimer

log = logging.getLogger(__name__)

class TickSource:
    """
    Periodic driver for exactly one Running period of one rest timer.

    Acquired when the timer starts and released when it stops for any reason.
    A tick is only applied while the source is live and the timer is still in
    the Running period the source was created for (same generation), so a
    stale source can never decrement a timer that was paused, restarted,
    reset or replaced.
    """

    def __init__(
        self,
        timer: RestTimer,
        *,
        interval: float = 1.0,
        on_tick: Optional[Callable[[], None]] = None,
        on_release: Optional[Callable[["TickSource"], None]] = None,
        name: str = "tick",
    ):
        self.timer = timer
        self.interval = interval
        self.name = name
        self._on_tick = on_tick
        self._on_release = on_release
        self._generation = timer.generation
        self._cancelled = False
        self._released = False
        self._task: Optional[asyncio.Task] = None

    @property
    def active(self) -> bool:
        return not self._cancelled and not self._released

    def start(self) -> None:
        # Must be called from the event loop that owns the widget state.
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run(), name=self.name)

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._release()

    def fire(self) -> bool:
        """Apply one tick; returns False once the source should stop."""
        if not self.active:
            return False
        if self.timer.generation != self._generation:
            log.debug("%s is stale, dropping tick", self.name)
            self._release()
            return False
        applied = self.timer.tick()
        if applied and self._on_tick is not None:
            self._on_tick()
        if not self.timer.is_running:
            self._release()
            return False
        return applied

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time()
        try:
            while self.active:
                deadline += self.interval
                await asyncio.sleep(max(0.0, deadline - loop.time()))
                if not self.fire():
                    break
        except asyncio.CancelledError:
            log.debug("%s cancelled", self.name)
            raise
        finally:
            self._release()

    def _release(self) -> None:
        if self._released:
            return
        self._released = True
        if self._on_release is not None:
            self._on_release(self)
