from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from rentdesk.database.init import Base


class TableclothColor(Base):
    __tablename__ = "tablecloth_colors"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    hex_color = Column(String(7), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    # No delete cascade: rentals keep existing and lose the reference
    rentals = relationship("Rental", back_populates="tablecloth_color")
