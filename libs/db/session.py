from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from libs.db.config import AsyncSessionLocal


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a request-scoped session.

    Uncommitted work is rolled back when the request fails.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
