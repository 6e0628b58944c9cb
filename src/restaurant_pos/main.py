import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api import health
from .api.errors import register_exception_handlers
from .api.routes.foods import router as foods_router
from .api.routes.invoices import router as invoices_router
from .api.routes.menus import router as menus_router
from .api.routes.order_items import router as order_items_router
from .api.routes.orders import router as orders_router
from .api.routes.tables import router as tables_router
from .api.routes.users import router as users_router
from .config import Settings, get_settings
from .core.middleware import RequestTimeoutMiddleware
from .db.session import build_engine, build_sessionmaker

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(settings)
        app.state.sessionmaker = build_sessionmaker(engine)
        logger.info("🚀 Application started")
        yield
        await engine.dispose()
        logger.info("🛑 Application stopped")

    app = FastAPI(title="Restaurant POS", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(RequestTimeoutMiddleware, timeout=settings.REQUEST_TIMEOUT_SECONDS)
    register_exception_handlers(app)

    # Подключаем роуты
    app.include_router(health.router)
    app.include_router(users_router)
    app.include_router(menus_router)
    app.include_router(foods_router)
    app.include_router(tables_router)
    app.include_router(orders_router)
    app.include_router(order_items_router)
    app.include_router(invoices_router)

    return app


app = create_app()
