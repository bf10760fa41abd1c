from fastapi import APIRouter, Depends

from workout_widget.core.controller import PlanViewController
from workout_widget.deps.widget import get_controller, run_action
from workout_widget.schemas.view import PlanFrame

router = APIRouter(prefix="/exercises", tags=["exercises"])

# async so every mutation runs on the event loop that owns the tick sources

@router.post("/{position}/complete", response_model=PlanFrame)
async def toggle_complete(position: int, controller: PlanViewController = Depends(get_controller)):
    run_action(controller.toggle_completed, position)
    return controller.snapshot()

@router.post("/{position}/expand", response_model=PlanFrame)
async def toggle_expand(position: int, controller: PlanViewController = Depends(get_controller)):
    run_action(controller.toggle_expanded, position)
    return controller.snapshot()
