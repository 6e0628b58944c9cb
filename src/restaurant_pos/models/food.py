from sqlalchemy import Column, String, Float, DateTime
from ..db.base import Base


class Food(Base):
    __tablename__ = "foods"

    id = Column(String(32), primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    price = Column(Float, nullable=False)  # всегда округлена до 2 знаков
    food_image = Column(String(255), nullable=False)
    menu_id = Column(String(32), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
