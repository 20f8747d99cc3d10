from enum import Enum


class ItemType(str, Enum):
    CHAIR = "chair"
    TABLE = "table"
    TABLECLOTH = "tablecloth"
    MIXED = "mixed"
