from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from restaurant_pos.schemas.money import Money


class FoodCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    price: Money
    food_image: str
    menu_id: str


class FoodUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    price: Optional[Money] = None
    food_image: Optional[str] = None
    menu_id: Optional[str] = None

    class Config:
        extra = "forbid"


class FoodRead(BaseModel):
    id: str
    name: str
    price: float
    food_image: str
    menu_id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class FoodPage(BaseModel):
    total_count: int
    food_items: List[FoodRead] = []
