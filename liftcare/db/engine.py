"""Async SQLAlchemy engine and session factory."""

from __future__ import annotations

from pathlib import Path

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from liftcare.models import Base


def _configure_sqlite(engine) -> None:
    # The sqlite driver defers BEGIN on its own, which breaks SAVEPOINT; emit it explicitly.
    # Foreign keys are off by default in sqlite; deletes of referenced rows must fail.
    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


class Database:
    """One pooled async engine per process, built from ``Settings.database_url``."""

    def __init__(self, url: str, echo: bool = False):
        parsed = make_url(url)
        is_sqlite = parsed.drivername.startswith("sqlite")
        if is_sqlite and parsed.database not in (None, "", ":memory:"):
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_async_engine(url, echo=echo)
        if is_sqlite:
            _configure_sqlite(self.engine)
        self.session_factory = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request):
    """FastAPI dependency that yields an async DB session."""
    database: Database = request.app.state.db
    async with database.session_factory() as session:
        yield session
