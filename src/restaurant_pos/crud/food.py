import logging
from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_pos.core.errors import NotFoundError
from restaurant_pos.core.utils import generate_id, to_fixed, utcnow
from restaurant_pos.models import Food, Menu
from restaurant_pos.schemas.food import FoodCreate, FoodUpdate

logger = logging.getLogger(__name__)


async def _ensure_menu(db: AsyncSession, menu_id: str) -> None:
    if not await db.get(Menu, menu_id):
        raise NotFoundError("menu was not found")


async def get_foods(db: AsyncSession, limit: int, offset: int) -> Tuple[int, List[Food]]:
    """
    Возвращает общее количество блюд и одну страницу.
    """
    total = await db.scalar(select(func.count(Food.id)))
    result = await db.execute(
        select(Food).order_by(Food.created_at, Food.id).offset(offset).limit(limit)
    )
    return total or 0, result.scalars().all()


async def get_food_by_id(db: AsyncSession, food_id: str) -> Optional[Food]:
    return await db.get(Food, food_id)


async def create_food(db: AsyncSession, food_in: FoodCreate) -> Food:
    await _ensure_menu(db, food_in.menu_id)

    now = utcnow()
    data = food_in.model_dump()
    data["price"] = to_fixed(data["price"])
    food = Food(id=generate_id(), created_at=now, updated_at=now, **data)
    db.add(food)
    await db.commit()

    logger.info("Food %s created in menu %s", food.id, food.menu_id)
    return food


async def update_food(db: AsyncSession, food_id: str, food_in: FoodUpdate) -> Food:
    food = await db.get(Food, food_id)
    if not food:
        raise NotFoundError("food was not found")

    update_data = food_in.model_dump(exclude_unset=True, exclude_none=True)
    if "menu_id" in update_data:
        await _ensure_menu(db, update_data["menu_id"])
    if "price" in update_data:
        update_data["price"] = to_fixed(update_data["price"])

    for key, value in update_data.items():
        setattr(food, key, value)
    food.updated_at = utcnow()

    await db.commit()
    return food
