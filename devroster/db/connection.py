"""
Engine and session lifecycle for the roster database.

init_db() is called from the app lifespan (and from test fixtures with a
temporary SQLite URL); request handlers receive sessions through the
get_db_session dependency.
"""
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from devroster.db.models import Base
from devroster.config import settings
import logging

logger = logging.getLogger(__name__)

# Set by init_db, cleared by close_db
engine = None
async_session_maker = None


def _engine_options(database_url: str) -> Dict[str, Any]:
    if database_url.startswith("sqlite"):
        # One shared connection so every session sees the same database file
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return {
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


async def init_db(database_url: Optional[str] = None):
    """
    Create the engine and session factory, then the developers table.

    Args:
        database_url: Overrides settings.database_url (tests pass a tmp file)
    """
    global engine, async_session_maker

    url = database_url or settings.database_url
    logger.info(f"Initializing roster database ({url.split('://')[0]})")

    engine = create_async_engine(url, echo=False, **_engine_options(url))
    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("✅ Roster database ready")


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """
    FastAPI dependency yielding one session per request.

    The session commits when the handler returns. Any exception rolls it
    back; HTTPExceptions are expected client errors (rejected payloads,
    unknown ids) and are only logged at debug level.
    """
    if async_session_maker is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")

    async with async_session_maker() as session:
        try:
            yield session
        except HTTPException as e:
            await session.rollback()
            logger.debug(f"Request ended with {e.status_code}, session rolled back")
            raise
        except Exception as e:
            await session.rollback()
            logger.error(f"Database session error: {e}")
            raise
        else:
            await session.commit()


async def close_db():
    """Dispose of the engine and forget the session factory."""
    global engine, async_session_maker
    if engine is None:
        return
    await engine.dispose()
    engine = None
    async_session_maker = None
    logger.info("Roster database connection closed")
