import logging
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_pos.core.errors import NotFoundError
from restaurant_pos.core.utils import generate_id, to_fixed, utcnow
from restaurant_pos.crud.order import create_order_record
from restaurant_pos.models import Food, Order, OrderItem, Table
from restaurant_pos.schemas.order_item import OrderItemPack, OrderItemsCreated, OrderItemUpdate
from restaurant_pos.services.order_report import ReportSources, run_pipeline

logger = logging.getLogger(__name__)


def as_dict(obj) -> dict:
    return {column.key: getattr(obj, column.key) for column in obj.__table__.columns}


async def get_order_items(db: AsyncSession) -> List[OrderItem]:
    result = await db.execute(select(OrderItem).order_by(OrderItem.created_at, OrderItem.id))
    return result.scalars().all()


async def get_order_item_by_id(db: AsyncSession, order_item_id: str) -> Optional[OrderItem]:
    return await db.get(OrderItem, order_item_id)


async def create_order_items(db: AsyncSession, pack: OrderItemPack) -> OrderItemsCreated:
    """
    Создаёт заказ и все его позиции.
    Позиции к этому моменту уже провалидированы (OrderItemPack), поэтому
    невалидный запрос не создаёт ни заказа, ни позиций.
    Заказ и позиции пишутся двумя коммитами: при сбое на вставке позиций
    заказ останется без позиций.
    """
    order_id = await create_order_record(db, table_id=pack.table_id)

    now = utcnow()
    order_items = [
        OrderItem(
            id=generate_id(),
            order_id=order_id,
            food_id=item.food_id,
            quantity=item.quantity,
            unit_price=to_fixed(item.unit_price),
            created_at=now,
            updated_at=now,
        )
        for item in pack.order_items
    ]
    db.add_all(order_items)
    await db.commit()

    inserted_ids = [item.id for item in order_items]
    logger.info("Order %s: %d order items created", order_id, len(inserted_ids))
    return OrderItemsCreated(order_id=order_id, inserted_ids=inserted_ids)


async def update_order_item(db: AsyncSession, order_item_id: str, item_in: OrderItemUpdate) -> OrderItem:
    order_item = await db.get(OrderItem, order_item_id)
    if not order_item:
        raise NotFoundError("order item was not found")

    update_data = item_in.model_dump(exclude_unset=True, exclude_none=True)
    if "unit_price" in update_data:
        update_data["unit_price"] = to_fixed(update_data["unit_price"])

    for key, value in update_data.items():
        setattr(order_item, key, value)
    order_item.updated_at = utcnow()

    await db.commit()
    return order_item


async def load_report_sources(db: AsyncSession, order_id: str) -> Tuple[List[dict], ReportSources]:
    """
    Достаёт позиции заказа и связанные с ними блюда, заказы и столы.
    """
    result = await db.execute(
        select(OrderItem).where(OrderItem.order_id == order_id).order_by(OrderItem.created_at, OrderItem.id)
    )
    items = [as_dict(item) for item in result.scalars().all()]
    sources = ReportSources(order_id=order_id)
    if not items:
        return items, sources

    food_ids = sorted({item["food_id"] for item in items})
    result = await db.execute(select(Food).where(Food.id.in_(food_ids)))
    sources.foods = {food.id: as_dict(food) for food in result.scalars().all()}

    result = await db.execute(select(Order).where(Order.id == order_id))
    sources.orders = {order.id: as_dict(order) for order in result.scalars().all()}

    table_ids = sorted({order["table_id"] for order in sources.orders.values() if order["table_id"]})
    if table_ids:
        result = await db.execute(select(Table).where(Table.id.in_(table_ids)))
        sources.tables = {table.id: as_dict(table) for table in result.scalars().all()}

    return items, sources


async def items_by_order(db: AsyncSession, order_id: str) -> List[dict]:
    """
    Сводка по заказу: позиции с блюдами, номер стола, количество и сумма.
    """
    items, sources = await load_report_sources(db, order_id)
    return run_pipeline(items, sources)
