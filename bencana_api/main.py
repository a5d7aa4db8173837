"""FastAPI application — main entry point."""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI

from bencana_api.config import Settings, get_settings
from bencana_api.core.exceptions import register_exception_handlers
from bencana_api.core.logging import configure_logging
from bencana_api.core.middleware import setup_middleware
from bencana_api.infrastructure.database import build_engine, build_sessionmaker, init_db

from bencana_api.interfaces.api.auth import router as auth_router
from bencana_api.interfaces.api.bencana import router as bencana_router

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicit settings object."""
    settings = settings or get_settings()
    configure_logging(settings)

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Bencana API...", env=settings.ENVIRONMENT)
        if settings.DB_CREATE_TABLES:
            await init_db(engine)

        yield

        await engine.dispose()
        logger.info("Bencana API stopped")

    app = FastAPI(
        title=settings.APP_NAME,
        description="Laporan status bencana gunung api — CRUD dan autentikasi token",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)

    # Every Depends(get_settings) in this app sees the injected settings
    app.dependency_overrides[get_settings] = lambda: settings

    setup_middleware(app, settings)
    register_exception_handlers(app)

    app.include_router(bencana_router)
    app.include_router(auth_router)

    @app.get("/")
    def root():
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


def run() -> None:
    uvicorn.run("bencana_api.main:create_app", factory=True, host="0.0.0.0", port=5000)


if __name__ == "__main__":
    run()
