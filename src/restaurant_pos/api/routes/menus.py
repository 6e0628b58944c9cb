from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_pos.crud.menu import create_menu, get_menu_by_id, get_menus, update_menu
from restaurant_pos.db.deps import get_async_session
from restaurant_pos.schemas.menu import MenuCreate, MenuRead, MenuUpdate


router = APIRouter(prefix="/menus", tags=["menus"])


@router.get("", response_model=List[MenuRead])
async def list_menus(db: AsyncSession = Depends(get_async_session)):
    return await get_menus(db)


@router.get("/{menu_id}", response_model=MenuRead)
async def get_menu(
    menu_id: str = Path(..., description="ID меню"),
    db: AsyncSession = Depends(get_async_session),
):
    menu = await get_menu_by_id(db, menu_id)
    if not menu:
        raise HTTPException(status_code=404, detail="menu was not found")
    return menu


@router.post("", response_model=MenuRead)
async def create_menu_endpoint(menu_in: MenuCreate, db: AsyncSession = Depends(get_async_session)):
    """
    Создаёт меню. start_date должна быть раньше end_date.
    """
    return await create_menu(db, menu_in)


@router.patch("/{menu_id}", response_model=MenuRead)
async def patch_menu_endpoint(
    menu_id: str,
    menu_in: MenuUpdate,
    db: AsyncSession = Depends(get_async_session),
):
    return await update_menu(db, menu_id, menu_in)
