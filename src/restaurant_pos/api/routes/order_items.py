import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_pos.crud.order_item import (
    create_order_items,
    get_order_item_by_id,
    get_order_items,
    items_by_order,
    update_order_item,
)
from restaurant_pos.db.deps import get_async_session
from restaurant_pos.schemas.order_item import (
    OrderItemPack,
    OrderItemRead,
    OrderItemsCreated,
    OrderItemUpdate,
    OrderReportRow,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["order items"])


@router.get("/orderItems", response_model=List[OrderItemRead])
async def list_order_items(db: AsyncSession = Depends(get_async_session)):
    return await get_order_items(db)


@router.get("/orderItems-order/{order_id}", response_model=List[OrderReportRow])
async def get_order_items_by_order(
    order_id: str = Path(..., description="ID заказа"),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Сводка по заказу: позиции с названием и картинкой блюда, номер стола,
    количество позиций и общая сумма.
    """
    try:
        return await items_by_order(db, order_id)
    except SQLAlchemyError:
        logger.exception("Order report failed for order %s", order_id)
        raise HTTPException(status_code=500, detail="error occurred while listing order items by order")


@router.get("/orderItems/{order_item_id}", response_model=OrderItemRead)
async def get_order_item(
    order_item_id: str = Path(..., description="ID позиции заказа"),
    db: AsyncSession = Depends(get_async_session),
):
    order_item = await get_order_item_by_id(db, order_item_id)
    if not order_item:
        raise HTTPException(status_code=404, detail="order item was not found")
    return order_item


@router.post("/orderItems", response_model=OrderItemsCreated)
async def create_order_items_endpoint(pack: OrderItemPack, db: AsyncSession = Depends(get_async_session)):
    """
    Создаёт заказ и все переданные позиции.
    Если хотя бы одна позиция невалидна, не создаётся ничего.
    """
    return await create_order_items(db, pack)


@router.patch("/orderItems/{order_item_id}", response_model=OrderItemRead)
async def patch_order_item_endpoint(
    order_item_id: str,
    item_in: OrderItemUpdate,
    db: AsyncSession = Depends(get_async_session),
):
    """
    Частичное обновление позиции.
    Поддерживаемые поля: unit_price, quantity, food_id.
    """
    return await update_order_item(db, order_item_id, item_in)
