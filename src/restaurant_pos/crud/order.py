import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_pos.core.errors import NotFoundError
from restaurant_pos.core.utils import generate_id, utcnow
from restaurant_pos.models import Order, Table
from restaurant_pos.schemas.order import OrderCreate, OrderUpdate

logger = logging.getLogger(__name__)


async def _ensure_table(db: AsyncSession, table_id: str) -> None:
    if not await db.get(Table, table_id):
        raise NotFoundError("table was not found")


async def get_orders(db: AsyncSession) -> List[Order]:
    """
    Возвращает все заказы, новые первыми.
    """
    result = await db.execute(select(Order).order_by(Order.created_at.desc()))
    return result.scalars().all()


async def get_order_by_id(db: AsyncSession, order_id: str) -> Optional[Order]:
    return await db.get(Order, order_id)


async def create_order_record(
    db: AsyncSession, order_date: Optional[datetime] = None, table_id: Optional[str] = None
) -> str:
    """
    Создаёт заказ без каких-либо проверок и возвращает его id.
    Используется при создании пачки позиций заказа.
    """
    now = utcnow()
    order = Order(
        id=generate_id(),
        order_date=order_date or now,
        table_id=table_id,
        created_at=now,
        updated_at=now,
    )
    db.add(order)
    await db.commit()

    logger.info("Order %s created (table %s)", order.id, table_id)
    return order.id


async def create_order(db: AsyncSession, order_in: OrderCreate) -> Order:
    """
    Создаёт заказ через API: стол, если указан, должен существовать.
    """
    if order_in.table_id is not None:
        await _ensure_table(db, order_in.table_id)

    order_id = await create_order_record(db, order_in.order_date, order_in.table_id)
    return await db.get(Order, order_id)


async def update_order(db: AsyncSession, order_id: str, order_in: OrderUpdate) -> Order:
    order = await db.get(Order, order_id)
    if not order:
        raise NotFoundError("order was not found")

    update_data = order_in.model_dump(exclude_unset=True, exclude_none=True)
    if "table_id" in update_data:
        await _ensure_table(db, update_data["table_id"])

    for key, value in update_data.items():
        setattr(order, key, value)
    order.updated_at = utcnow()

    await db.commit()
    return order
