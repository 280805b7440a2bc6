"""FastAPI server for the Mission Control REST API and live board socket."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager

# Configure Rich logging early so all modules get proper handlers
from mission_control.logging import configure_logging, get_logger

configure_logging()

import logfire
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import activity, agents, cron, health, memory, realtime, status, tasks
from api.websocket_manager import ConnectionManager
from mission_control import MissionControl, settings
from mission_control.exceptions import MissionControlError, NotFoundError, ValidationError
from mission_control.seed import seed_all

# Configure Logfire early, before any instrumentation
logfire.configure(
    send_to_logfire="if-token-present",
    service_name="mission-control",
    token=settings.logfire_token,
    environment=settings.environment,
)

logger = get_logger(__name__)

DESCRIPTION = """
# Mission Control API

Personal operations dashboard for coordinating an assistant and its sub-agents.

## Features

- **Task Board**: four-column kanban (backlog, in progress, review, done) with drag-and-drop drops
- **Agent Roster**: status and run counters for every agent
- **Cron Jobs**: scheduled jobs with pause/resume
- **Memory Browser**: long-term notes, daily logs and documents with substring search
- **Activity Feed**: append-only event log, newest first
- **Live Board**: `/ws` pushes a refreshed board after every task write
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed when configured and fan task changes out to WebSocket clients."""
    mc: MissionControl = app.state.mission_control
    manager: ConnectionManager = app.state.ws_manager

    if settings.seed_on_startup:
        counts = await seed_all(mc)
        logger.info(f"[STORE] Seeded on startup: {counts}")

    subscription = mc.views.subscribe(manager.broadcast_board)
    try:
        yield
    finally:
        subscription.unsubscribe()


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.error(f"[VALIDATION ERROR] {request.method} {request.url.path}")
        for error in exc.errors():
            logger.error(f"  {error['loc']}: {error['msg']} (type={error['type']})")
        first = exc.errors()[0] if exc.errors() else {"msg": "Invalid request"}
        return JSONResponse(status_code=400, content={"error": first["msg"]})

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        logger.warning(f"[API] {request.method} {request.url.path} rejected: {exc}")
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.warning(f"[API] {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(MissionControlError)
    async def mission_control_handler(request: Request, exc: MissionControlError):
        logger.error(f"[API] {request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[UNHANDLED ERROR] {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": str(exc)})


def create_app(mission_control: MissionControl | None = None) -> FastAPI:
    """Build the API around one MissionControl handle (a fresh one from settings by default)."""
    app = FastAPI(
        title="Mission Control API",
        description=DESCRIPTION,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {"name": "Health", "description": "Health check and monitoring endpoints"},
            {"name": "Tasks", "description": "Task board CRUD, status transitions and drops"},
            {"name": "Agents", "description": "Agent roster"},
            {"name": "Memory", "description": "Memory browser with substring search"},
            {"name": "Activity", "description": "Append-only activity feed"},
            {"name": "Cron", "description": "Scheduled job registry"},
            {"name": "Status", "description": "Aggregate snapshot for external agents"},
            {"name": "Realtime", "description": "Live board WebSocket"},
        ],
    )
    app.state.mission_control = mission_control or MissionControl.from_settings()
    app.state.ws_manager = ConnectionManager()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(tasks.router)
    app.include_router(agents.router)
    app.include_router(memory.router)
    app.include_router(activity.router)
    app.include_router(cron.router)
    app.include_router(status.router)
    app.include_router(realtime.router)

    register_exception_handlers(app)
    logfire.instrument_fastapi(app)
    return app


app = create_app()


async def main_http() -> None:
    """Run the HTTP server."""
    port = settings.port
    logger.info(f"Starting Mission Control API on http://0.0.0.0:{port}")

    config = uvicorn.Config(app, host="0.0.0.0", port=port, log_level="info")
    server = uvicorn.Server(config)
    await server.serve()


def run_http() -> None:
    """Entry point for HTTP server command."""
    asyncio.run(main_http())


def run_dev() -> None:
    """Entry point for local development with hot reload."""
    port = settings.port
    logger.info(f"Starting dev server on http://0.0.0.0:{port} (reload enabled)")
    uvicorn.run(
        "api.server:app",
        host="0.0.0.0",
        port=port,
        reload=True,
        log_level="info",
    )


if __name__ == "__main__":
    asyncio.run(main_http())
