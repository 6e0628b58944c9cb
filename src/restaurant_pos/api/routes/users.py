from typing import Tuple

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_pos.api.deps import get_app_settings, get_pagination
from restaurant_pos.config import Settings
from restaurant_pos.crud.user import get_user_by_id, get_users, login, signup
from restaurant_pos.db.deps import get_async_session
from restaurant_pos.schemas.user import UserLogin, UserOut, UserPage, UserSignup

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserPage)
async def list_users(
    pagination: Tuple[int, int] = Depends(get_pagination),
    session: AsyncSession = Depends(get_async_session),
):
    limit, offset = pagination
    total, users = await get_users(session, limit=limit, offset=offset)
    return UserPage(total_count=total, user_items=[UserOut.model_validate(u) for u in users])


@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: str, session: AsyncSession = Depends(get_async_session)):
    user = await get_user_by_id(session, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="user was not found")
    return user


@router.post("/signup", response_model=UserOut)
async def signup_endpoint(
    user_in: UserSignup,
    session: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_app_settings),
):
    return await signup(session, settings, user_in)


@router.post("/login", response_model=UserOut)
async def login_endpoint(
    credentials: UserLogin,
    session: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_app_settings),
):
    """
    Проверяет email и пароль, выдаёт новую пару токенов.
    """
    return await login(session, settings, credentials)
