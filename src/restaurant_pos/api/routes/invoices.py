from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_pos.crud.invoice import create_invoice, get_invoice_view, get_invoices, update_invoice
from restaurant_pos.db.deps import get_async_session
from restaurant_pos.schemas.invoice import InvoiceCreate, InvoiceRead, InvoiceUpdate, InvoiceView


router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", response_model=List[InvoiceRead])
async def list_invoices(db: AsyncSession = Depends(get_async_session)):
    return await get_invoices(db)


@router.get("/{invoice_id}", response_model=InvoiceView)
async def get_invoice(
    invoice_id: str = Path(..., description="ID счёта"),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Счёт с суммой к оплате, номером стола и позициями заказа.
    """
    return await get_invoice_view(db, invoice_id)


@router.post("", response_model=InvoiceRead)
async def create_invoice_endpoint(invoice_in: InvoiceCreate, db: AsyncSession = Depends(get_async_session)):
    return await create_invoice(db, invoice_in)


@router.patch("/{invoice_id}", response_model=InvoiceRead)
async def patch_invoice_endpoint(
    invoice_id: str,
    invoice_in: InvoiceUpdate,
    db: AsyncSession = Depends(get_async_session),
):
    """
    Частичное обновление счёта.
    Поддерживаемые поля: payment_method, payment_status.
    """
    return await update_invoice(db, invoice_id, invoice_in)
