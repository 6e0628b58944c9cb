import logging
from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from restaurant_pos.config import Settings
from restaurant_pos.core.errors import AuthenticationError, ConflictError
from restaurant_pos.core.security import generate_all_tokens, hash_password, verify_password
from restaurant_pos.core.utils import generate_id, utcnow
from restaurant_pos.models import User
from restaurant_pos.schemas.user import UserLogin, UserSignup

logger = logging.getLogger(__name__)


async def get_users(db: AsyncSession, limit: int, offset: int) -> Tuple[int, List[User]]:
    total = await db.scalar(select(func.count(User.id)))
    result = await db.execute(select(User).order_by(User.created_at, User.id).offset(offset).limit(limit))
    return total or 0, result.scalars().all()


async def get_user_by_id(db: AsyncSession, user_id: str) -> Optional[User]:
    return await db.get(User, user_id)


async def signup(db: AsyncSession, settings: Settings, user_in: UserSignup) -> User:
    """
    Регистрирует пользователя: email и телефон должны быть свободны,
    пароль хранится только в виде bcrypt-хэша, токены выдаются сразу.
    """
    count_email = await db.scalar(select(func.count(User.id)).where(User.email == user_in.email))
    count_phone = await db.scalar(select(func.count(User.id)).where(User.phone == user_in.phone))
    if count_email or count_phone:
        raise ConflictError("this email or phone number already exists")

    # bcrypt нагружает CPU: считаем хэш в пуле потоков, не блокируя event loop
    hashed = await run_in_threadpool(hash_password, user_in.password, settings.BCRYPT_ROUNDS)

    now = utcnow()
    user_id = generate_id()
    token, refresh_token = generate_all_tokens(
        settings, user_in.email, user_in.first_name, user_in.last_name, user_id
    )
    user = User(
        id=user_id,
        first_name=user_in.first_name,
        last_name=user_in.last_name,
        email=user_in.email,
        phone=user_in.phone,
        avatar=user_in.avatar,
        password=hashed,
        token=token,
        refresh_token=refresh_token,
        created_at=now,
        updated_at=now,
    )
    db.add(user)
    await db.commit()

    logger.info("User %s signed up", user.id)
    return user


async def login(db: AsyncSession, settings: Settings, credentials: UserLogin) -> User:
    result = await db.execute(select(User).where(User.email == credentials.email))
    user = result.scalars().first()
    if not user or not await run_in_threadpool(verify_password, credentials.password, user.password):
        raise AuthenticationError("email or password is incorrect")

    user.token, user.refresh_token = generate_all_tokens(
        settings, user.email, user.first_name, user.last_name, user.id
    )
    user.updated_at = utcnow()
    await db.commit()

    logger.info("User %s logged in", user.id)
    return user
