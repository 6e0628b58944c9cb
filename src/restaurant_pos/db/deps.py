from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession


async def get_async_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Использовать в Depends(get_async_session)
    Пример: async def endpoint(db: AsyncSession = Depends(get_async_session))

    Фабрика сессий берётся из app.state, её кладёт туда lifespan приложения.
    """
    async with request.app.state.sessionmaker() as session:
        yield session
