# Database connection setup
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from .config import Settings
from .core.models.base import BaseModel


class Database:
    """Async engine and session factory, built once per process.

    The engine opens connections lazily on first use and pools them for reuse.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, **self._engine_options(url))
        if url.startswith("sqlite"):
            _enable_sqlite_foreign_keys(self.engine)
        # Session factory
        self.session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, echo=settings.database_echo)

    @staticmethod
    def _engine_options(url: str) -> dict:
        if url.startswith("sqlite") and ":memory:" in url:
            # keep the same memory DB across connections
            return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
        return {}

    async def create_tables(self) -> None:
        """Create all tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


def _enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    # SQLite needs this per connection for ON DELETE CASCADE
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    """Get database session."""
    async with get_database(request).session_factory() as session:
        yield session
