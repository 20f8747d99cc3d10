from enum import Enum


class RevenueDateField(str, Enum):
    """Which rental timestamp places a rental's amount into a revenue period."""

    CREATED_AT = "created_at"
    START_DATE = "start_date"
