# src/common/database/database.py

import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.common.config import settings
from src.models.models import Base

logger = logging.getLogger(__name__)

engine = create_async_engine(settings.DATABASE_URL, echo=False, future=True)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a session for the duration of a request.
    """
    async with async_session() as session:
        yield session

def get_session_factory() -> async_sessionmaker:
    """
    FastAPI dependency returning the session factory used for search fan-out.
    Each content source opens its own session from it.
    """
    return async_session

async def connect_to_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database connection established")

async def close_db_connection():
    await engine.dispose()
    logger.info("Database connection closed")
