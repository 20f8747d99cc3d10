from enum import Enum


class SortBy(str, Enum):
    DATE = "date"
    PRICE = "price"
    CUSTOMER = "customer"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"
