from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class TableclothColorCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    hex_color: str = Field(pattern=HEX_COLOR_PATTERN)


class TableclothColorUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    hex_color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)


class TableclothColorResponse(BaseModel):
    id: int
    name: str
    hex_color: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
