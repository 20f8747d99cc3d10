from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class InventoryUpdate(BaseModel):
    total_chairs: int = Field(default=0, ge=0)
    total_tables: int = Field(default=0, ge=0)
    total_tablecloths: int = Field(default=0, ge=0)


class InventoryTotals(BaseModel):
    total_chairs: int = 0
    total_tables: int = 0
    total_tablecloths: int = 0
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CategoryAvailability(BaseModel):
    total: int = 0
    allocated: int = 0
    # Negative when active rentals exceed the recorded total
    available: int = 0
    occupancy_rate: int = 0
    over_allocated: bool = False


class InventoryStatus(BaseModel):
    chairs: CategoryAvailability
    tables: CategoryAvailability
    tablecloths: CategoryAvailability
    updated_at: Optional[datetime] = None
