from datetime import datetime
from typing import Optional

from pydantic import BaseModel, conint


class TableCreate(BaseModel):
    table_number: int
    number_of_guests: conint(ge=1)


class TableUpdate(BaseModel):
    table_number: Optional[int] = None
    number_of_guests: Optional[conint(ge=1)] = None

    class Config:
        extra = "forbid"


class TableRead(BaseModel):
    id: str
    table_number: int
    number_of_guests: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
