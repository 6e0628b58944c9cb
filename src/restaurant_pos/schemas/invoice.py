from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from restaurant_pos.models.invoice import PaymentMethodEnum, PaymentStatusEnum
from restaurant_pos.schemas.order_item import OrderReportLine


class InvoiceCreate(BaseModel):
    order_id: str
    payment_method: Optional[PaymentMethodEnum] = None
    payment_status: Optional[PaymentStatusEnum] = None  # по умолчанию PENDING


class InvoiceUpdate(BaseModel):
    payment_method: Optional[PaymentMethodEnum] = None
    payment_status: Optional[PaymentStatusEnum] = None

    class Config:
        extra = "forbid"


class InvoiceRead(BaseModel):
    id: str
    order_id: str
    payment_method: Optional[PaymentMethodEnum] = None
    payment_status: PaymentStatusEnum
    payment_due_date: datetime
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class InvoiceView(BaseModel):
    invoice_id: str
    order_id: str
    payment_method: str
    payment_status: PaymentStatusEnum
    payment_due: float
    table_number: Optional[int] = None
    payment_due_date: datetime
    order_details: List[OrderReportLine] = []
