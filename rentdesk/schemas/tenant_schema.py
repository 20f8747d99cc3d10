from pydantic import BaseModel, ConfigDict


class TenantContext(BaseModel):
    """The authenticated account every query and mutation is scoped to."""

    user_id: int

    model_config = ConfigDict(frozen=True)
