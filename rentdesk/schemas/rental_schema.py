from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from typing import Annotated, Optional
from datetime import datetime

from rentdesk.enums.item_type import ItemType
from rentdesk.enums.due_status import DueStatus
from rentdesk.utils.dates import as_utc
from .customer_schema import CustomerCreate

# Bump when the shape of RentalWithRelations changes
RENTAL_CONTRACT_VERSION = 1


# Amounts are kept in whole cents so per-month totals add up to the overall total
Cents = Annotated[float, AfterValidator(lambda value: round(value, 2))]


class RentalBase(BaseModel):
    chair_quantity: int = Field(default=0, ge=0)
    table_quantity: int = Field(default=0, ge=0)
    tablecloth_quantity: int = Field(default=0, ge=0)
    tablecloth_color_id: Optional[int] = None
    amount: Cents = Field(ge=0)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location_name: Optional[str] = Field(default=None, max_length=255)
    location_lat: Optional[float] = None
    location_lng: Optional[float] = None
    notes: Optional[str] = None

class RentalCreate(RentalBase):
    """
    New rental. Either ``customer_id`` points at an existing customer, or
    ``customer`` describes one to look up by email (or create).
    """

    customer_id: Optional[int] = None
    customer: Optional[CustomerCreate] = None


class RentalUpdate(BaseModel):
    chair_quantity: Optional[int] = Field(default=None, ge=0)
    table_quantity: Optional[int] = Field(default=None, ge=0)
    tablecloth_quantity: Optional[int] = Field(default=None, ge=0)
    tablecloth_color_id: Optional[int] = None
    amount: Optional[Cents] = Field(default=None, ge=0)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location_name: Optional[str] = Field(default=None, max_length=255)
    location_lat: Optional[float] = None
    location_lng: Optional[float] = None
    notes: Optional[str] = None

class RentalCustomer(BaseModel):
    id: int
    name: str
    phone: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class RentalTableclothColor(BaseModel):
    id: int
    name: str
    hex_color: str

    model_config = ConfigDict(from_attributes=True)


class RentalWithRelations(BaseModel):
    """A rental joined with its customer and optional tablecloth color."""

    id: int
    customer_id: int
    chair_quantity: int
    table_quantity: int
    tablecloth_quantity: int
    quantity: int
    item_type: ItemType
    amount: Cents
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location_name: Optional[str] = None
    location_lat: Optional[float] = None
    location_lng: Optional[float] = None
    notes: Optional[str] = None
    tablecloth_color_id: Optional[int] = None
    returned: bool
    created_at: datetime
    customer: RentalCustomer
    tablecloth_color: Optional[RentalTableclothColor] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("start_date", "end_date", "created_at")
    @classmethod
    def _normalize_timezone(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

class RentalResponse(RentalWithRelations):
    contract_version: int = RENTAL_CONTRACT_VERSION
    due_status: Optional[DueStatus] = None


class RentalCounts(BaseModel):
    total: int = 0
    active: int = 0
    inactive: int = 0
