import logging

from rentdesk.enums.item_type import ItemType
from rentdesk.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


def validate_quantities(chairs: int, tables: int, tablecloths: int) -> None:
    """Reject a rental that does not rent anything."""
    if chairs == 0 and tables == 0 and tablecloths == 0:
        logger.warning("Rejected rental with no chairs, tables or tablecloths")
        raise ValidationError(
            "quantity", "Select at least one chair, table or tablecloth"
        )


def classify_item_type(chairs: int, tables: int, tablecloths: int) -> ItemType:
    """
    Derive the item type tag of a rental from its quantities.

    Args:
        chairs: Number of chairs rented
        tables: Number of tables rented
        tablecloths: Number of tablecloths rented

    Returns:
        ``ItemType.MIXED`` when more than one category is rented, otherwise
        the tag of the only category with a positive quantity.
    """
    present = [
        item_type
        for item_type, quantity in (
            (ItemType.CHAIR, chairs),
            (ItemType.TABLE, tables),
            (ItemType.TABLECLOTH, tablecloths),
        )
        if quantity > 0
    ]

    if not present:
        # validate_quantities() runs before every classification
        raise ValueError("cannot classify a rental with no items")
    if len(present) > 1:
        return ItemType.MIXED
    return present[0]


def total_quantity(chairs: int, tables: int, tablecloths: int) -> int:
    return chairs + tables + tablecloths
