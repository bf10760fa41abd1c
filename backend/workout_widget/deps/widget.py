# workout_widget/deps/widget.py
from typing import Callable, TypeVar

from fastapi import HTTPException, Request, status

from workout_widget.core.controller import PlanViewController
from workout_widget.errors import OutOfRange, PlanNotLoaded

T = TypeVar("T")

def get_controller(request: Request) -> PlanViewController:
    controller = getattr(request.app.state, "controller", None)
    if controller is None:
        # lifespan has not run (app used without startup)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Widget not started")
    return controller

def run_action(action: Callable[[int], T], position: int) -> T:
    """Apply a controller action, mapping widget errors onto HTTP statuses."""
    try:
        return action(position)
    except OutOfRange:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    except PlanNotLoaded:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Plan not delivered yet")
