import asyncio
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import StreamingResponse

from workout_widget.core.controller import PlanViewController
from workout_widget.deps.widget import get_controller
from workout_widget.schemas.plan import Plan
from workout_widget.schemas.view import PlanFrame

log = logging.getLogger(__name__)

router = APIRouter(prefix="/plan", tags=["plan"])

def format_sse_event(event_type: str, data: str) -> str:
    return f"event: {event_type}\ndata: {data}\n\n"

@router.post("", response_model=PlanFrame, status_code=status.HTTP_200_OK)
async def deliver_plan(payload: Plan, controller: PlanViewController = Depends(get_controller)):
    controller.load_plan(payload)
    return controller.snapshot()

@router.get("", response_model=PlanFrame)
async def read_frame(controller: PlanViewController = Depends(get_controller)):
    return controller.snapshot()

@router.get("/stream")
async def stream_frames(request: Request, controller: PlanViewController = Depends(get_controller)):
    """One `frame` event on connect, then one after every state change."""
    async def event_stream():
        # Subscribe on first iteration so a response that is never read leaves no listener
        changes: asyncio.Queue[str] = asyncio.Queue()
        unsubscribe = controller.subscribe(changes.put_nowait)
        try:
            yield format_sse_event("frame", controller.snapshot().model_dump_json())
            while not await request.is_disconnected():
                try:
                    await asyncio.wait_for(changes.get(), timeout=15)
                except asyncio.TimeoutError:
                    yield ": keep-alive\n\n"
                    continue
                # Coalesce a burst of changes into one frame
                while not changes.empty():
                    changes.get_nowait()
                yield format_sse_event("frame", controller.snapshot().model_dump_json())
        finally:
            unsubscribe()
            log.debug("frame stream closed")

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
