import enum
from sqlalchemy import Column, Integer, String, DateTime, func
from dms.db.session import Base

class Role(enum.IntEnum):
    ADMINISTRATOR = 1
    STANDARD = 2

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    user_name = Column(String(120), nullable=False)
    first_name = Column(String(120), nullable=False)
    last_name = Column(String(120), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(Integer, nullable=False, default=Role.STANDARD.value)
    reset_password_token = Column(String(64), index=True, nullable=True)
    reset_password_expires = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
