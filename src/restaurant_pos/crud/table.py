import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_pos.core.errors import NotFoundError
from restaurant_pos.core.utils import generate_id, utcnow
from restaurant_pos.models import Table
from restaurant_pos.schemas.table import TableCreate, TableUpdate

logger = logging.getLogger(__name__)


async def get_tables(db: AsyncSession) -> List[Table]:
    result = await db.execute(select(Table).order_by(Table.table_number))
    return result.scalars().all()


async def get_table_by_id(db: AsyncSession, table_id: str) -> Optional[Table]:
    return await db.get(Table, table_id)


async def create_table(db: AsyncSession, table_in: TableCreate) -> Table:
    now = utcnow()
    table = Table(id=generate_id(), created_at=now, updated_at=now, **table_in.model_dump())
    db.add(table)
    await db.commit()

    logger.info("Table %s (number %s) created", table.id, table.table_number)
    return table


async def update_table(db: AsyncSession, table_id: str, table_in: TableUpdate) -> Table:
    table = await db.get(Table, table_id)
    if not table:
        raise NotFoundError("table was not found")

    for key, value in table_in.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(table, key, value)
    table.updated_at = utcnow()

    await db.commit()
    return table
