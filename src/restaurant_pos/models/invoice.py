import enum
from sqlalchemy import Column, String, DateTime, Enum as SAEnum
from ..db.base import Base


class PaymentMethodEnum(str, enum.Enum):
    CARD = "CARD"
    CASH = "CASH"


class PaymentStatusEnum(str, enum.Enum):
    PENDING = "PENDING"
    PAID = "PAID"


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(String(32), primary_key=True, index=True)
    order_id = Column(String(32), index=True, nullable=False)
    payment_method = Column(SAEnum(PaymentMethodEnum, name="payment_method"), nullable=True)
    payment_status = Column(
        SAEnum(PaymentStatusEnum, name="payment_status"), nullable=False, default=PaymentStatusEnum.PENDING
    )
    payment_due_date = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
