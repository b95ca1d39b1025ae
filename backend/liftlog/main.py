# liftlog/main.py
import time
import logging
import uuid
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from liftlog.routers.groups import router as groups_router
from liftlog.routers.exercises import router as exercises_router
from liftlog.routers.entries import router as entries_router
from liftlog.routers.analytics import router as analytics_router
from liftlog.db import SessionLocal  # for healthz DB check
from liftlog.settings import get_settings

log = logging.getLogger("uvicorn")
settings = get_settings()

app = FastAPI(
    title="LiftLog API",
    openapi_tags=[
        {"name": "groups", "description": "Exercise groups"},
        {"name": "exercises", "description": "Exercises per group"},
        {"name": "entries", "description": "Logged sets (weight x reps)"},
        {"name": "analytics", "description": "Effort charts over time"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
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
    return {"ok": True, "name": "LiftLog API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": get_settings().API_VERSION}

# Routers
app.include_router(groups_router)
app.include_router(exercises_router)
app.include_router(entries_router)
app.include_router(analytics_router)
