from datetime import datetime
from typing import Optional

from rentdesk.enums.due_status import DueStatus
from rentdesk.enums.rental_status import RentalStatus
from rentdesk.utils.dates import as_utc
from rentdesk.utils.exceptions import ValidationError


def status_of(returned: bool) -> RentalStatus:
    return RentalStatus.INACTIVE if returned else RentalStatus.ACTIVE


def transition(returned: bool, target: RentalStatus) -> bool:
    """
    Validate a status change and return the new ``returned`` flag.

    Only active -> inactive (mark returned) and inactive -> active
    (reactivate) exist.
    """
    current = status_of(returned)
    if current == target:
        raise ValidationError("returned", f"Rental is already {current.value}")
    return target == RentalStatus.INACTIVE


def due_status(
    end_date: Optional[datetime], now: datetime, returned: bool = False
) -> Optional[DueStatus]:
    """Display flag for an unreturned rental's end date; never stored."""
    if returned or end_date is None:
        return None
    end_date = as_utc(end_date)
    now = as_utc(now)
    if end_date.date() == now.date():
        return DueStatus.DUE_TODAY
    if end_date < now:
        return DueStatus.OVERDUE
    return DueStatus.UPCOMING
