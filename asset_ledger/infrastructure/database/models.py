"""SQLAlchemy ORM models."""
from sqlalchemy import Column, DateTime, LargeBinary, String
from sqlalchemy.sql import func

from .base import Base


class WorldStateEntry(Base):
    __tablename__ = "world_state"

    key = Column(String(255), primary_key=True)
    value = Column(LargeBinary, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
