"""Database Session Manager — async engine and sessions for the housing tables.

Invariants:
    - A session that raises is rolled back before the error leaves the context
    - SQLAlchemy failures surface as DatabaseError (503), never as driver exceptions
    - Pool sizing applies to server databases only; SQLite URLs keep the dialect pool

Design Decisions:
    - Module-level db_manager set by the FastAPI lifespan; get_db reads it per request
    - expire_on_commit=False: ORM rows stay readable after commit in async handlers
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from campus_api.core.errors import DatabaseError

logger = logging.getLogger(__name__)

# Most specific first; the first isinstance match wins.
_ERROR_TRANSLATIONS: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def _translate(exc: SQLAlchemyError) -> DatabaseError:
    for error_type, message, operation in _ERROR_TRANSLATIONS:
        if isinstance(exc, error_type):
            return DatabaseError(message, operation)
    return DatabaseError("Database operation failed", "unknown")


def _engine_options(database_url: str, pool_size: int, max_overflow: int) -> dict:
    options: dict = {"pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        return options
    options.update(
        pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
    )
    return options


class DatabaseSessionManager:
    """Owns the engine and hands out sessions that roll back on failure."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url, **_engine_options(database_url, pool_size, max_overflow),
        )
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as exc:
            await session.rollback()
            error = _translate(exc)
            logger.error(
                f"{error.message}: {exc}", extra={"error_code": error.code},
            )
            raise error from exc
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """True when a trivial query round-trips."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except Exception as exc:
            logger.error(f"Database health check failed: {exc}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> None:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    logger.info(f"Database engine created ({db_manager.engine.dialect.name})")


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session for the housing repositories."""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
