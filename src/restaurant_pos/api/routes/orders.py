from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_pos.crud.order import create_order, get_order_by_id, get_orders, update_order
from restaurant_pos.db.deps import get_async_session
from restaurant_pos.schemas.order import OrderCreate, OrderRead, OrderUpdate


router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=List[OrderRead])
async def list_orders(db: AsyncSession = Depends(get_async_session)):
    """
    Возвращает список заказов, новые первыми.
    """
    return await get_orders(db)


@router.get("/{order_id}", response_model=OrderRead)
async def get_order(
    order_id: str = Path(..., description="ID заказа"),
    db: AsyncSession = Depends(get_async_session),
):
    order = await get_order_by_id(db, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="order was not found")
    return order


@router.post("", response_model=OrderRead)
async def create_order_endpoint(order_in: OrderCreate, db: AsyncSession = Depends(get_async_session)):
    """
    Создаёт заказ. Если указан table_id, стол должен существовать.
    """
    return await create_order(db, order_in)


@router.patch("/{order_id}", response_model=OrderRead)
async def patch_order_endpoint(
    order_id: str,
    order_in: OrderUpdate,
    db: AsyncSession = Depends(get_async_session),
):
    """
    Частичное обновление заказа.
    Поддерживаемые поля: order_date, table_id.
    """
    return await update_order(db, order_id, order_in)
