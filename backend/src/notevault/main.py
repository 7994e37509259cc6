# Main application entry point
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import auth_router, health_router, notes_router, register_exception_handlers
from .config import Settings, get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import HealthStatus
from .database import Database
from .security import TokenService

logger = get_logger("main")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its database and token service wired once."""
    settings = settings or get_settings()
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Starting NoteVault application",
            extra={
                "version": settings.app_version,
                "environment": settings.environment,
                "debug": settings.debug,
            },
        )
        database: Database = app.state.database
        if settings.create_tables_on_startup:
            try:
                await database.create_tables()
                logger.info("Database tables created/verified")
            except Exception as e:
                logger.error("Failed to create database tables", exc_info=e)
                raise

        yield

        logger.info("Shutting down NoteVault application")
        await database.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="Personal notes API with token authentication",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database.from_settings(settings)
    app.state.token_service = TokenService.from_settings(settings)

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth_router, prefix="/api")
    app.include_router(notes_router, prefix="/api")
    app.include_router(health_router, prefix="/api")

    @app.get("/")
    async def root():
        return {"message": "NoteVault API", "version": settings.app_version}

    @app.get("/health", response_model=HealthStatus)
    async def basic_health():
        return HealthStatus(status="ok", timestamp=datetime.now(timezone.utc))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run("notevault.main:app", host=_settings.host, port=_settings.port, reload=_settings.debug)
