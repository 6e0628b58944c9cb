from sqlalchemy import Column, String, DateTime
from ..db.base import Base


class Order(Base):
    __tablename__ = "orders"

    id = Column(String(32), primary_key=True, index=True)
    order_date = Column(DateTime(timezone=True), nullable=False)
    # ссылка на стол без FK: заказ может быть создан и без стола
    table_id = Column(String(32), index=True, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
