from enum import Enum
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException, status

from workout_widget.core.controller import PlanViewController
from workout_widget.deps.widget import get_controller, run_action
from workout_widget.schemas.view import TimerView

router = APIRouter(prefix="/exercises", tags=["timers"])

class TimerAction(str, Enum):
    start = "start"
    pause = "pause"
    toggle = "toggle"
    reset = "reset"

def _actions(controller: PlanViewController) -> dict[TimerAction, Callable]:
    return {
        TimerAction.start: controller.start_timer,
        TimerAction.pause: controller.pause_timer,
        TimerAction.toggle: controller.toggle_timer,
        TimerAction.reset: controller.reset_timer,
    }

def _view(controller: PlanViewController, position: int) -> TimerView:
    view = run_action(controller.timer_view, position)
    if view is None:
        # out-of-range position under the "ignore" policy
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return view

@router.get("/{position}/timer", response_model=TimerView)
async def read_timer(position: int, controller: PlanViewController = Depends(get_controller)):
    return _view(controller, position)

@router.post("/{position}/timer/{action}", response_model=TimerView)
async def timer_action(
    position: int,
    action: TimerAction,
    controller: PlanViewController = Depends(get_controller),
):
    run_action(_actions(controller)[action], position)
    return _view(controller, position)
