from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class MenuCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    category: str = Field(..., min_length=3, max_length=50)
    start_date: datetime
    end_date: datetime


class MenuUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    category: Optional[str] = Field(None, min_length=3, max_length=50)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    class Config:
        extra = "forbid"


class MenuRead(BaseModel):
    id: str
    name: str
    category: str
    start_date: datetime
    end_date: datetime
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
