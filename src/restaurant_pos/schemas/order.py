from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class OrderCreate(BaseModel):
    order_date: Optional[datetime] = None  # по умолчанию — момент создания
    table_id: Optional[str] = None


class OrderUpdate(BaseModel):
    order_date: Optional[datetime] = None
    table_id: Optional[str] = None

    class Config:
        extra = "forbid"


class OrderRead(BaseModel):
    id: str
    order_date: datetime
    table_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
