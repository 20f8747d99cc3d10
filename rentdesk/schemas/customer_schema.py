from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class CustomerBase(BaseModel):
    name: str = Field(max_length=150)
    email: Optional[str] = Field(default=None, max_length=150)
    phone: Optional[str] = Field(default=None, max_length=30)


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=150)
    email: Optional[str] = Field(default=None, max_length=150)
    phone: Optional[str] = Field(default=None, max_length=30)


class CustomerResponse(CustomerBase):
    id: int
    created_at: Optional[datetime] = None
    rental_count: int = 0

    model_config = ConfigDict(from_attributes=True)
