"""Admin Console API — FastAPI application factory."""


import asyncio
import logging
import sys
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from admin_console.core.config import settings
from admin_console.core.exceptions import register_exception_handlers
from admin_console.middleware.audit import AuditMiddleware
from admin_console.repositories.directory import DirectoryRepository
from admin_console.repositories.upload import UploadRepository
from admin_console.schemas.common import HealthResponse
from admin_console.services.seed import load_seed
from admin_console.services.session import SessionRegistry

# Console views (/login, /dashboard, /users, /uploads)
from admin_console.routers.views import router as views_router

# v1 routers
from admin_console.routers.v1.auth import router as auth_v1_router
from admin_console.routers.v1.uploads import router as uploads_v1_router
from admin_console.routers.v1.users import router as users_v1_router

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.is_development else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)


def _report_seed_failure(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Seed task failed", exc_info=exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    seed_task: asyncio.Task | None = None
    if settings.seed_enabled:
        # Fire-and-forget: requests are served while the seed is in flight
        seed_task = asyncio.create_task(
            load_seed(app.state.directory, settings.seed_url, timeout=settings.seed_timeout)
        )
        seed_task.add_done_callback(_report_seed_failure)
    app.state.seed_task = seed_task
    try:
        yield
    finally:
        if seed_task is not None and not seed_task.done():
            logger.info("Discarding unfinished seed fetch")
            seed_task.cancel()
            with suppress(asyncio.CancelledError):
                await seed_task


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    # --- In-memory state (discarded on restart) ---
    app.state.sessions = SessionRegistry(settings.max_sessions)
    app.state.directory = DirectoryRepository()
    app.state.uploads = UploadRepository()

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Audit middleware ---
    app.add_middleware(AuditMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- Console views ---
    app.include_router(views_router)

    # --- v1 API routes (/api/v1/*) ---
    app.include_router(auth_v1_router, prefix="/api/v1")
    app.include_router(users_v1_router, prefix="/api/v1")
    app.include_router(uploads_v1_router, prefix="/api/v1")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
