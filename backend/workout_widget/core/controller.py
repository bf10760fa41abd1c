from __future__ import annotations
import logging
from datetime import date
from functools import partial
from typing import Callable, Optional

from workout_widget.core.clock import format_clock
from workout_widget.core.plan_state import PlanState
from workout_widget.core.progress import summarize
from workout_widget.core.ticker import TickSource
from workout_widget.core.timer import RestTimer
from workout_widget.errors import OutOfRange, PlanNotLoaded
from workout_widget.schemas.plan import Plan
from workout_widget.schemas.view import ExerciseView, PlanFrame, ProgressView, TimerView

log = logging.getLogger(__name__)

Listener = Callable[[str], None]

class PlanViewController:
    """
    Owns one widget session: the delivered plan, its PlanState, one RestTimer
    per exercise and the tick source of every running timer.

    Not thread-safe. Every call (user actions and ticks alike) has to come
    from the single event loop that owns the controller.
    """

    def __init__(
        self,
        *,
        tick_interval: float = 1.0,
        strict_positions: bool = True,
        source_factory: Callable[..., TickSource] = TickSource,
        today: Callable[[], date] = date.today,
    ):
        self.tick_interval = tick_interval
        self.strict_positions = strict_positions
        self._source_factory = source_factory
        self._today = today

        self._plan: Optional[Plan] = None
        self._state: Optional[PlanState] = None
        self._timers: list[RestTimer] = []
        self._sources: dict[int, TickSource] = {}
        self._listeners: list[Listener] = []
        self.session_date: Optional[date] = None
        self.session = 0

    # ---- host delivery ----
    @property
    def is_loaded(self) -> bool:
        return self._plan is not None

    @property
    def plan(self) -> Optional[Plan]:
        return self._plan

    @property
    def state(self) -> PlanState:
        self._require_plan()
        return self._state

    def load_plan(self, plan: Plan) -> bool:
        """
        Deliver the plan. The first delivery moves the widget from waiting to
        loaded; an equal plan delivered again changes nothing; a different plan
        starts a new session with fresh completion, accordion and timer state.
        """
        if self._plan is not None:
            if plan == self._plan:
                return False
            log.info("different plan delivered, starting new session")
            self._cancel_all()

        self._plan = plan
        self._state = PlanState(len(plan.exercises))
        self._timers = [RestTimer(ex.rest_seconds) for ex in plan.exercises]
        self.session_date = self._today()
        self.session += 1
        log.info("plan %r loaded with %d exercises (session %d)",
                 plan.name, len(plan.exercises), self.session)
        self._notify("plan_loaded")
        return True

    # ---- plan state ----
    def toggle_completed(self, position: int) -> None:
        if self._guard(position):
            done = self._state.toggle_completed(position)
            log.debug("exercise %d completed=%s", position, done)
            self._notify("completed")

    def toggle_expanded(self, position: int) -> None:
        if self._guard(position):
            self._state.toggle_expanded(position)
            self._notify("expanded")

    # ---- rest timers ----
    def timer(self, position: int) -> Optional[RestTimer]:
        return self._timers[position] if self._guard(position) else None

    def start_timer(self, position: int) -> Optional[RestTimer]:
        timer = self.timer(position)
        if timer is not None and timer.start():
            self._acquire_source(position, timer)
            self._notify("timer_started")
        return timer

    def pause_timer(self, position: int) -> Optional[RestTimer]:
        timer = self.timer(position)
        if timer is not None and timer.pause():
            self._release_source(position)
            self._notify("timer_paused")
        return timer

    def toggle_timer(self, position: int) -> Optional[RestTimer]:
        timer = self.timer(position)
        if timer is None:
            return None
        was_running = timer.is_running
        if timer.toggle():
            if was_running:
                self._release_source(position)
                self._notify("timer_paused")
            else:
                self._acquire_source(position, timer)
                self._notify("timer_started")
        return timer

    def reset_timer(self, position: int) -> Optional[RestTimer]:
        timer = self.timer(position)
        if timer is not None:
            self._release_source(position)
            timer.reset()
            self._notify("timer_reset")
        return timer

    def teardown(self, position: int) -> None:
        """Card is going away: stop its countdown where it stands."""
        if self._guard(position):
            self._release_source(position)
            if self._timers[position].pause():
                self._notify("timer_paused")

    @property
    def active_sources(self) -> int:
        return len(self._sources)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def close(self) -> None:
        self._cancel_all()

    # ---- subscriptions ----
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def _notify(self, event: str) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                log.exception("listener failed on %s", event)

    # ---- frames ----
    def timer_view(self, position: int) -> Optional[TimerView]:
        timer = self.timer(position)
        return self._timer_view(position, timer) if timer is not None else None

    def snapshot(self) -> PlanFrame:
        if self._plan is None:
            return PlanFrame(status="waiting")

        plan, state = self._plan, self._state
        if not plan.exercises:
            return PlanFrame(status="empty", name=plan.name, session_date=self.session_date)

        summary = summarize(plan, state)
        total = summary.total_count
        exercises = [
            ExerciseView(
                position=i,
                key=plan.key_for(i),
                label=f"Exercise {i + 1}/{total}",
                name=ex.name,
                sets=ex.sets,
                reps=ex.reps,
                sets_reps=ex.sets_reps_label,
                weight=ex.weight,
                notes=ex.notes,
                rest_seconds=ex.rest_seconds,
                rest_display=format_clock(ex.rest_seconds),
                completed=state.is_completed(i),
                expanded=state.is_expanded(i),
                timer=self._timer_view(i, self._timers[i]),
            )
            for i, ex in enumerate(plan.exercises)
        ]
        return PlanFrame(
            status="ready",
            name=plan.name,
            session_date=self.session_date,
            expanded=state.expanded,
            progress=ProgressView(
                completed_count=summary.completed_count,
                total_count=total,
                percent=summary.percent,
                fraction=summary.fraction,
                total_sets=summary.total_sets,
                total_rest_seconds=summary.total_rest_seconds,
                total_rest_display=format_clock(summary.total_rest_seconds),
            ),
            exercises=exercises,
        )

    @staticmethod
    def _timer_view(position: int, timer: RestTimer) -> TimerView:
        return TimerView(
            position=position,
            initial_seconds=timer.initial,
            time_left=timer.time_left,
            is_running=timer.is_running,
            phase=timer.phase,
            display=format_clock(timer.time_left),
        )

    # ---- internals ----
    def _require_plan(self) -> None:
        if self._plan is None:
            raise PlanNotLoaded()

    def _guard(self, position: int) -> bool:
        self._require_plan()
        if 0 <= position < len(self._timers):
            return True
        if self.strict_positions:
            raise OutOfRange(position, len(self._timers))
        log.warning("ignoring action on out-of-range exercise position %d", position)
        return False

    def _acquire_source(self, position: int, timer: RestTimer) -> None:
        self._release_source(position)
        source = self._source_factory(
            timer,
            interval=self.tick_interval,
            on_tick=partial(self._notify, "tick"),
            on_release=partial(self._forget_source, position),
            name=f"rest-timer-{self.session}-{position}",
        )
        self._sources[position] = source
        try:
            source.start()
        except Exception:
            # no live task: roll the timer back so it is not left running
            self._release_source(position)
            timer.pause()
            raise

    def _release_source(self, position: int) -> None:
        source = self._sources.pop(position, None)
        if source is not None:
            source.cancel()

    def _forget_source(self, position: int, source: TickSource) -> None:
        if self._sources.get(position) is source:
            del self._sources[position]

    def _cancel_all(self) -> None:
        for position in list(self._sources):
            self._release_source(position)
        for timer in self._timers:
            timer.pause()
