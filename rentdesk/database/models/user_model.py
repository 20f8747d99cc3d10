from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship

from rentdesk.database.init import Base


class User(Base):
    """An authenticated account. Every tenant-owned row points back here."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    hashed_password = Column(String(100), nullable=False)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    customers = relationship("Customer", back_populates="owner", cascade="all, delete-orphan")
    tablecloth_colors = relationship("TableclothColor", cascade="all, delete-orphan")
    inventory = relationship("Inventory", uselist=False, cascade="all, delete-orphan")
