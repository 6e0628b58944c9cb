from sqlalchemy import Column, String, Text, DateTime
from ..db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    phone = Column(String(32), nullable=False, unique=True, index=True)
    password = Column(String(128), nullable=False)  # bcrypt-хэш, не сам пароль
    avatar = Column(String(255), nullable=True)
    token = Column(Text, nullable=True)
    refresh_token = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
