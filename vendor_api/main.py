"""Vendor API — FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from redis.asyncio import Redis

from vendor_api.core.config import settings
from vendor_api.core.exceptions import register_exception_handlers
from vendor_api.db.base import async_session_factory, create_schema
from vendor_api.middleware.request_log import RequestLogMiddleware
from vendor_api.routers.auth import router as auth_router
from vendor_api.routers.bank_accounts import router as bank_accounts_router
from vendor_api.routers.contact_persons import router as contact_persons_router
from vendor_api.routers.users import router as users_router
from vendor_api.routers.vendors import router as vendors_router
from vendor_api.schemas.common import HealthResponse
from vendor_api.services.seed import initialize_database

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def create_app(redis_client: Redis | None = None) -> FastAPI:
    """Build the application.

    ``redis_client`` replaces the client normally created from
    ``settings.redis_url``; the caller then owns its lifecycle.
    """
    _configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_client = redis_client is None
        app.state.redis = (
            Redis.from_url(settings.redis_url, decode_responses=True)
            if owns_client
            else redis_client
        )

        if settings.auto_create_schema:
            await create_schema()
        async with async_session_factory() as session:
            await initialize_database(session)
        logger.info("%s started (env=%s)", settings.app_name, settings.app_env)

        yield

        if owns_client:
            await app.state.redis.aclose()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        lifespan=lifespan,
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Request log middleware ---
    app.add_middleware(RequestLogMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- API routes (/api/*) ---
    app.include_router(auth_router, prefix="/api")
    app.include_router(vendors_router, prefix="/api")
    app.include_router(bank_accounts_router, prefix="/api")
    app.include_router(contact_persons_router, prefix="/api")
    app.include_router(users_router, prefix="/api")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
