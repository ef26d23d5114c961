from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from yardtrack.utils.settings.database import DatabaseSettings


database_settings = DatabaseSettings()

async_engine = create_async_engine(
    database_settings.DATABASE_URL_ASYNC, echo=database_settings.DATABASE_ECHO
)
AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, class_=AsyncSession, expire_on_commit=False
)


