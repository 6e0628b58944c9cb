from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_pos.crud.table import create_table, get_table_by_id, get_tables, update_table
from restaurant_pos.db.deps import get_async_session
from restaurant_pos.schemas.table import TableCreate, TableRead, TableUpdate


router = APIRouter(prefix="/tables", tags=["tables"])


@router.get("", response_model=List[TableRead])
async def list_tables(db: AsyncSession = Depends(get_async_session)):
    return await get_tables(db)


@router.get("/{table_id}", response_model=TableRead)
async def get_table(
    table_id: str = Path(..., description="ID стола"),
    db: AsyncSession = Depends(get_async_session),
):
    table = await get_table_by_id(db, table_id)
    if not table:
        raise HTTPException(status_code=404, detail="table was not found")
    return table


@router.post("", response_model=TableRead)
async def create_table_endpoint(table_in: TableCreate, db: AsyncSession = Depends(get_async_session)):
    return await create_table(db, table_in)


@router.patch("/{table_id}", response_model=TableRead)
async def patch_table_endpoint(
    table_id: str,
    table_in: TableUpdate,
    db: AsyncSession = Depends(get_async_session),
):
    return await update_table(db, table_id, table_in)
