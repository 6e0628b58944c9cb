from sqlalchemy import Column, Integer, String, DateTime
from ..db.base import Base


class Table(Base):
    __tablename__ = "tables"

    id = Column(String(32), primary_key=True, index=True)
    table_number = Column(Integer, nullable=False)
    number_of_guests = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
