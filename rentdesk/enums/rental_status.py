from enum import Enum


class RentalStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class RentalStatusFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"
