from sqlalchemy import Column, String, DateTime
from ..db.base import Base


class Menu(Base):
    __tablename__ = "menus"

    id = Column(String(32), primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    category = Column(String(50), nullable=False)  # завтраки, бар, десерты и т.д.
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
