import enum
from sqlalchemy import Column, String, Float, DateTime, Enum as SAEnum
from ..db.base import Base


class QuantityEnum(str, enum.Enum):
    S = "S"
    M = "M"
    L = "L"


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(String(32), primary_key=True, index=True)
    order_id = Column(String(32), index=True, nullable=False)
    food_id = Column(String(32), index=True, nullable=False)
    quantity = Column(SAEnum(QuantityEnum, name="order_item_quantity"), nullable=False)
    unit_price = Column(Float, nullable=False)  # фиксируется на момент заказа
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
