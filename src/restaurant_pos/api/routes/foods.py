from typing import Tuple

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_pos.api.deps import get_pagination
from restaurant_pos.crud.food import create_food, get_food_by_id, get_foods, update_food
from restaurant_pos.db.deps import get_async_session
from restaurant_pos.schemas.food import FoodCreate, FoodPage, FoodRead, FoodUpdate


router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("", response_model=FoodPage)
async def list_foods(
    pagination: Tuple[int, int] = Depends(get_pagination),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Возвращает страницу блюд и их общее количество.
    Параметры: recordPerPage (по умолчанию 10), page (с 1).
    """
    limit, offset = pagination
    total, foods = await get_foods(db, limit=limit, offset=offset)
    return FoodPage(total_count=total, food_items=[FoodRead.model_validate(f) for f in foods])


@router.get("/{food_id}", response_model=FoodRead)
async def get_food(
    food_id: str = Path(..., description="ID блюда"),
    db: AsyncSession = Depends(get_async_session),
):
    food = await get_food_by_id(db, food_id)
    if not food:
        raise HTTPException(status_code=404, detail="food was not found")
    return food


@router.post("", response_model=FoodRead)
async def create_food_endpoint(food_in: FoodCreate, db: AsyncSession = Depends(get_async_session)):
    """
    Создаёт блюдо в существующем меню. Цена округляется до 2 знаков.
    """
    return await create_food(db, food_in)


@router.patch("/{food_id}", response_model=FoodRead)
async def patch_food_endpoint(
    food_id: str,
    food_in: FoodUpdate,
    db: AsyncSession = Depends(get_async_session),
):
    """
    Частичное обновление блюда.
    Поддерживаемые поля: name, price, food_image, menu_id.
    """
    return await update_food(db, food_id, food_in)
