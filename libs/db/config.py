from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from libs.common.config import get_settings

settings = get_settings()


def _engine_options() -> dict:
    # SQLite (tests, local scratch) has no connection pool to size
    if settings.is_sqlite:
        return {}
    return {
        "pool_pre_ping": True,  # Test connections before using
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_recycle": settings.DB_POOL_RECYCLE,
    }


# echo=True for local dev to see SQL queries
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=(settings.ENVIRONMENT == "local" and not settings.is_sqlite),
    **_engine_options(),
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)
