from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Float, Boolean
from sqlalchemy.orm import relationship

from rentdesk.database.init import Base
from rentdesk.enums.item_type import ItemType


class Rental(Base):
    __tablename__ = "rentals"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False)
    tablecloth_color_id = Column(
        Integer, ForeignKey("tablecloth_colors.id", ondelete="SET NULL"), nullable=True
    )

    chair_quantity = Column(Integer, nullable=False, default=0)
    table_quantity = Column(Integer, nullable=False, default=0)
    tablecloth_quantity = Column(Integer, nullable=False, default=0)
    # Always chair_quantity + table_quantity + tablecloth_quantity
    quantity = Column(Integer, nullable=False, default=0)
    item_type = Column(String(20), nullable=False, default=ItemType.CHAIR.value)

    amount = Column(Float, nullable=False)
    start_date = Column(DateTime(timezone=True), nullable=True)
    end_date = Column(DateTime(timezone=True), nullable=True)
    location_name = Column(String(255), nullable=True)
    location_lat = Column(Float, nullable=True)
    location_lng = Column(Float, nullable=True)
    notes = Column(Text, nullable=True)
    returned = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), onupdate=lambda: datetime.now(timezone.utc), nullable=True)

    customer = relationship("Customer", back_populates="rentals")
    tablecloth_color = relationship("TableclothColor", back_populates="rentals")
