# workout_widget/main.py
import logging
import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from workout_widget.core.controller import PlanViewController
from workout_widget.routers.exercises import router as exercises_router
from workout_widget.routers.plan import router as plan_router
from workout_widget.routers.timers import router as timers_router
from workout_widget.schemas.plan import Plan
from workout_widget.settings import get_settings

log = logging.getLogger("uvicorn")

def read_plan_file(path: str) -> Plan:
    return Plan.model_validate_json(Path(path).read_text(encoding="utf-8"))

def build_controller() -> PlanViewController:
    s = get_settings()
    return PlanViewController(
        tick_interval=s.TICK_INTERVAL_SECONDS,
        strict_positions=s.strict_positions,
    )

@asynccontextmanager
async def lifespan(app: FastAPI):
    s = get_settings()
    logging.getLogger("workout_widget").setLevel(s.LOG_LEVEL.upper())
    controller = build_controller()
    app.state.controller = controller
    log.info("widget starting env=%s out_of_range=%s tick=%.2fs",
             s.ENV, s.OUT_OF_RANGE, s.TICK_INTERVAL_SECONDS)
    if s.PLAN_FILE:
        controller.load_plan(read_plan_file(s.PLAN_FILE))
    try:
        yield
    finally:
        controller.close()
        app.state.controller = None
        log.info("widget stopped")

app = FastAPI(
    title="Workout Plan Widget API",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "plan", "description": "Plan delivery & frames"},
        {"name": "exercises", "description": "Completion & accordion"},
        {"name": "timers", "description": "Per-exercise rest timers"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
def root():
    return {"ok": True, "name": "Workout Plan Widget API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
async def healthz(request: Request):
    controller = getattr(request.app.state, "controller", None)
    if controller is None:
        return {"status": "degraded", "error": "widget not started"}
    return {
        "status": "ok",
        "plan": "loaded" if controller.is_loaded else "waiting",
        "running_timers": controller.active_sources,
    }

@app.get("/version")
def version():
    return {"version": get_settings().API_VERSION}

# Routers
app.include_router(plan_router)
app.include_router(exercises_router)
app.include_router(timers_router)
