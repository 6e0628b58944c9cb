import logging
from datetime import timedelta
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_pos.core.errors import NotFoundError
from restaurant_pos.core.utils import generate_id, utcnow
from restaurant_pos.crud.order_item import items_by_order
from restaurant_pos.models import Invoice, Order, PaymentStatusEnum
from restaurant_pos.schemas.invoice import InvoiceCreate, InvoiceUpdate, InvoiceView

logger = logging.getLogger(__name__)


async def get_invoices(db: AsyncSession) -> List[Invoice]:
    result = await db.execute(select(Invoice).order_by(Invoice.created_at.desc()))
    return result.scalars().all()


async def get_invoice_by_id(db: AsyncSession, invoice_id: str) -> Optional[Invoice]:
    return await db.get(Invoice, invoice_id)


async def create_invoice(db: AsyncSession, invoice_in: InvoiceCreate) -> Invoice:
    """
    Выставляет счёт по существующему заказу. Срок оплаты — сутки.
    """
    if not await db.get(Order, invoice_in.order_id):
        raise NotFoundError("order was not found")

    now = utcnow()
    invoice = Invoice(
        id=generate_id(),
        order_id=invoice_in.order_id,
        payment_method=invoice_in.payment_method,
        payment_status=invoice_in.payment_status or PaymentStatusEnum.PENDING,
        payment_due_date=now + timedelta(days=1),
        created_at=now,
        updated_at=now,
    )
    db.add(invoice)
    await db.commit()

    logger.info("Invoice %s created for order %s", invoice.id, invoice.order_id)
    return invoice


async def update_invoice(db: AsyncSession, invoice_id: str, invoice_in: InvoiceUpdate) -> Invoice:
    invoice = await db.get(Invoice, invoice_id)
    if not invoice:
        raise NotFoundError("invoice was not found")

    for key, value in invoice_in.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(invoice, key, value)
    invoice.updated_at = utcnow()

    await db.commit()
    return invoice


async def get_invoice_view(db: AsyncSession, invoice_id: str) -> InvoiceView:
    """
    Счёт вместе с содержимым заказа: сумма к оплате, номер стола и позиции
    берутся из первой строки сводки по заказу.
    """
    invoice = await db.get(Invoice, invoice_id)
    if not invoice:
        raise NotFoundError("invoice was not found")

    report = await items_by_order(db, invoice.order_id)
    first = report[0] if report else {}

    return InvoiceView(
        invoice_id=invoice.id,
        order_id=invoice.order_id,
        payment_method=invoice.payment_method.value if invoice.payment_method else "null",
        payment_status=invoice.payment_status,
        payment_due=first.get("payment_due", 0.0),
        table_number=first.get("table_number"),
        payment_due_date=invoice.payment_due_date,
        order_details=first.get("order_items", []),
    )
