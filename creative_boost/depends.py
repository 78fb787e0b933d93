"""Database engine and FastAPI session dependency"""

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig

# Registers every table on SQLModel.metadata
import creative_boost.domain  # noqa: F401

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def create_tables():
    """Create missing tables (local SQLite setups; the CRM database is migrated elsewhere)"""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
