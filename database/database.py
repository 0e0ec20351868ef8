import logging
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from utils.constants import DATABASE_ECHO, DATABASE_URL

logger = logging.getLogger(__name__)

Base = declarative_base()


def to_async_url(url: str) -> str:
    """Rewrite a plain database URL to use an async driver."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


class DatabaseManager:
    def __init__(self, url: Optional[str] = None, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: AsyncEngine
        self.async_session_factory: async_sessionmaker[AsyncSession]
        self._setup_database()

    def _setup_database(self):
        """Initialize the database engine and session factory."""
        if not self.url:
            raise RuntimeError("DATABASE_URL environment variable not set")

        database_url = to_async_url(self.url)
        engine_options = {"echo": self.echo, "pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_options["pool_recycle"] = 3600

        self.engine = create_async_engine(database_url, **engine_options)
        self.async_session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False
        )

    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get an async database session."""
        async with self.async_session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_tables(self):
        """Create all tables defined by SQLAlchemy models."""
        # Registers the models on Base.metadata
        import models.user  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")

    async def close(self):
        """Close the database engine."""
        if self.engine:
            await self.engine.dispose()


# Global database manager instance
db_manager = DatabaseManager(DATABASE_URL, echo=DATABASE_ECHO)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency to get database session."""
    async for session in db_manager.get_session():
        yield session
