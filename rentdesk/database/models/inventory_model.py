from datetime import datetime, timezone

from sqlalchemy import Column, Integer, DateTime, ForeignKey

from rentdesk.database.init import Base


class Inventory(Base):
    """Per-tenant equipment totals. Availability is derived from active rentals."""

    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    total_chairs = Column(Integer, nullable=False, default=0)
    total_tables = Column(Integer, nullable=False, default=0)
    total_tablecloths = Column(Integer, nullable=False, default=0)
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
