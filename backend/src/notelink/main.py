# Main application entry point
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from redis.exceptions import RedisError

from .api import auth_router, health_router, notes_router, search_router
from .api.errors import register_exception_handlers
from .config import Settings, get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.redis_client import RedisClient
from .database import build_engine, build_session_factory, create_tables
from .middleware import DeadlineMiddleware, RateLimiter
from .security import TokenService

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings: Settings = app.state.settings
    # Startup
    logger.info(
        "Starting NoteLink application",
        extra={
            "version": settings.app_version,
            "environment": settings.environment,
            "debug": settings.debug,
        },
    )

    if settings.rate_limit_enabled:
        try:
            await app.state.redis_client.connect()
        except RedisError as e:
            logger.warning(f"Redis connection failed: {e}. Continuing without rate limiting...")

    if settings.database_create_tables:
        await create_tables(app.state.engine)
        logger.info("Database tables created/verified")

    yield

    # Shutdown
    logger.info("Shutting down NoteLink application")
    await app.state.redis_client.disconnect()
    await app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application and everything it shares across requests."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Personal notes with copy-on-share",
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.token_service = TokenService.from_settings(settings)
    app.state.redis_client = RedisClient(settings)
    app.state.rate_limiter = (
        RateLimiter.from_settings(settings, app.state.redis_client)
        if settings.rate_limit_enabled
        else None
    )

    register_exception_handlers(app)

    # Outermost first: CORS, logging, then the per-request deadline
    app.add_middleware(DeadlineMiddleware, timeout=settings.request_timeout)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(auth_router, prefix="/api")
    app.include_router(notes_router, prefix="/api")
    app.include_router(search_router, prefix="/api")
    app.include_router(health_router, prefix="/api")

    return app


def run() -> None:
    """Serve the app with uvicorn using the configured address."""
    settings = get_settings()
    uvicorn.run(
        "notelink.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
