from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from restaurant_pos.models.order_item import QuantityEnum
from restaurant_pos.schemas.money import Money


class OrderItemCreate(BaseModel):
    food_id: str = Field(..., min_length=1)
    quantity: QuantityEnum
    unit_price: Money


class OrderItemPack(BaseModel):
    """
    Тело POST /orderItems: стол (может отсутствовать) и позиции одного заказа.
    """
    table_id: Optional[str] = None
    order_items: List[OrderItemCreate] = Field(..., min_length=1)


class OrderItemUpdate(BaseModel):
    food_id: Optional[str] = Field(None, min_length=1)
    quantity: Optional[QuantityEnum] = None
    unit_price: Optional[Money] = None

    class Config:
        extra = "forbid"


class OrderItemRead(BaseModel):
    id: str
    order_id: str
    food_id: str
    quantity: QuantityEnum
    unit_price: float
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class OrderItemsCreated(BaseModel):
    order_id: str
    inserted_ids: List[str]


class OrderReportLine(BaseModel):
    order_item_id: str
    food_id: Optional[str] = None
    size: Optional[QuantityEnum] = None
    quantity: int
    unit_price: Optional[float] = None
    price: Optional[float] = None
    amount: Optional[float] = None
    food_name: Optional[str] = None
    food_image: Optional[str] = None
    table_number: Optional[int] = None
    table_id: Optional[str] = None
    order_id: Optional[str] = None


class OrderReportRow(BaseModel):
    order_id: Optional[str] = None
    table_id: Optional[str] = None
    table_number: Optional[int] = None
    total_count: int
    order_items: List[OrderReportLine] = []
    total_amount: float
    payment_due: float
