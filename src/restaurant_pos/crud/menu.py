import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_pos.core.errors import InvalidInputError, NotFoundError
from restaurant_pos.core.utils import as_utc, generate_id, utcnow
from restaurant_pos.models import Menu
from restaurant_pos.schemas.menu import MenuCreate, MenuUpdate

logger = logging.getLogger(__name__)


def check_menu_period(start_date: datetime, end_date: datetime) -> None:
    if as_utc(start_date) >= as_utc(end_date):
        raise InvalidInputError("start_date must be before end_date")


async def get_menus(db: AsyncSession) -> List[Menu]:
    result = await db.execute(select(Menu).order_by(Menu.created_at))
    return result.scalars().all()


async def get_menu_by_id(db: AsyncSession, menu_id: str) -> Optional[Menu]:
    return await db.get(Menu, menu_id)


async def create_menu(db: AsyncSession, menu_in: MenuCreate) -> Menu:
    check_menu_period(menu_in.start_date, menu_in.end_date)

    now = utcnow()
    menu = Menu(id=generate_id(), created_at=now, updated_at=now, **menu_in.model_dump())
    db.add(menu)
    await db.commit()

    logger.info("Menu %s created", menu.id)
    return menu


async def update_menu(db: AsyncSession, menu_id: str, menu_in: MenuUpdate) -> Menu:
    """
    Частичное обновление меню. Период проверяется уже после слияния
    с сохранёнными датами.
    """
    menu = await db.get(Menu, menu_id)
    if not menu:
        raise NotFoundError("menu was not found")

    update_data = menu_in.model_dump(exclude_unset=True, exclude_none=True)
    check_menu_period(
        update_data.get("start_date", menu.start_date),
        update_data.get("end_date", menu.end_date),
    )

    for key, value in update_data.items():
        setattr(menu, key, value)
    menu.updated_at = utcnow()

    await db.commit()
    return menu
