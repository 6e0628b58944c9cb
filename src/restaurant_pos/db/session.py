from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from restaurant_pos.config import Settings


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Асинхронный движок. Создаётся один раз на приложение (в lifespan).
    """
    return create_async_engine(settings.DATABASE_URL, echo=settings.DB_ECHO, future=True)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Фабрика сессий
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# асинхронный драйвер -> синхронный (offline-миграции alembic, create_all в тестах)
SYNC_DRIVERS = {"+asyncpg": "+psycopg2", "+aiosqlite": ""}


def sync_database_url(url: str) -> str:
    for async_driver, sync_driver in SYNC_DRIVERS.items():
        url = url.replace(async_driver, sync_driver)
    return url
