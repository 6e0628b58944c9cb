from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_pos.db.deps import get_async_session

router = APIRouter()

@router.get("/health", summary="Health check")
async def health_check(db: AsyncSession = Depends(get_async_session)):
    """
    Health-check: приложение отвечает и база доступна.
    Ошибка базы превращается в 500 общим обработчиком.
    """
    await db.execute(text("SELECT 1"))
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc)
    }
