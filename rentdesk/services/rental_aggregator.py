"""
Revenue and occupancy figures computed from a snapshot of rentals.

Nothing here touches the database: callers load the rentals (already scoped
to one tenant) and pass them in. Periods are evaluated in UTC.
"""

import math
from collections import OrderedDict
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from rentdesk.enums.revenue_date_field import RevenueDateField
from rentdesk.schemas.report_schema import MonthlyRevenue, TopCustomer
from rentdesk.utils.dates import as_utc

MONTHS_IN_YEAR = 12


def _money(value: float) -> float:
    return round(float(value), 2)


def _rental_date(rental, date_field: RevenueDateField) -> Optional[datetime]:
    return as_utc(getattr(rental, date_field.value))


def sum_amount(rentals: Iterable) -> float:
    return _money(sum(rental.amount for rental in rentals))


def revenue_since(
    rentals: Iterable,
    threshold: datetime,
    date_field: RevenueDateField = RevenueDateField.CREATED_AT,
) -> float:
    """
    Sum the amount of rentals dated on or after ``threshold``.

    Rentals with no value for ``date_field`` (a rental without a start date,
    for instance) are left out.
    """
    threshold = as_utc(threshold)
    total = 0.0
    for rental in rentals:
        rental_date = _rental_date(rental, date_field)
        if rental_date is not None and rental_date >= threshold:
            total += rental.amount
    return _money(total)


def monthly_breakdown(
    rentals: Iterable,
    year: int,
    date_field: RevenueDateField = RevenueDateField.CREATED_AT,
) -> List[MonthlyRevenue]:
    """Revenue per calendar month of ``year``; always twelve entries, January first."""
    totals = [0.0] * MONTHS_IN_YEAR
    for rental in rentals:
        rental_date = _rental_date(rental, date_field)
        if rental_date is not None and rental_date.year == year:
            totals[rental_date.month - 1] += rental.amount

    return [
        MonthlyRevenue(month=index + 1, revenue=_money(total))
        for index, total in enumerate(totals)
    ]


def top_customer_by_frequency(rentals: Iterable) -> Optional[TopCustomer]:
    """
    The customer with the most rentals.

    Ties go to the customer that appears first in ``rentals``.
    """
    counts = OrderedDict()
    for rental in rentals:
        entry = counts.get(rental.customer_id)
        if entry is None:
            counts[rental.customer_id] = [rental.customer.name, 1]
        else:
            entry[1] += 1

    top = None
    for customer_id, (name, count) in counts.items():
        # Strictly greater keeps the first-seen customer on ties
        if top is None or count > top.count:
            top = TopCustomer(customer_id=customer_id, name=name, count=count)
    return top


def occupancy_rate(total: int, available: int) -> int:
    """Percentage of ``total`` that is not available, rounded half up."""
    if total <= 0:
        return 0
    return int(math.floor((total - available) / total * 100 + 0.5))


def available_count(total: int, active_quantity_sum: int) -> int:
    # Not clamped: a negative result means more is rented out than is owned
    return total - active_quantity_sum


def week_start(now: datetime) -> datetime:
    """Midnight of the Sunday that starts the week containing ``now``."""
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - timedelta(days=(now.weekday() + 1) % 7)


def month_start(now: datetime) -> datetime:
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def year_start(now: datetime) -> datetime:
    return now.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
