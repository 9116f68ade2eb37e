"""SQLAlchemy ORM model for the retailers table (read by the order core)."""

from sqlalchemy import Boolean, Column, DateTime, String, func

from .base import Base


class RetailerModel(Base):
    __tablename__ = "retailers"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
