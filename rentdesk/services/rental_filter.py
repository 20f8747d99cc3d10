"""
In-memory filtering and ordering of rental listings.

Every function takes a sequence of rentals joined with their customer
(anything shaped like ``RentalWithRelations``) and returns a new list; the
input is never modified.
"""

import unicodedata
from typing import Iterable, List, Sequence, TypeVar

from rentdesk.enums.rental_status import RentalStatusFilter
from rentdesk.enums.rental_sort import SortBy, SortOrder
from rentdesk.schemas.rental_schema import RentalCounts
from rentdesk.utils.dates import as_utc

RentalT = TypeVar("RentalT")


def filter_by_status(rentals: Iterable[RentalT], status: RentalStatusFilter) -> List[RentalT]:
    if status == RentalStatusFilter.ACTIVE:
        return [rental for rental in rentals if not rental.returned]
    if status == RentalStatusFilter.INACTIVE:
        return [rental for rental in rentals if rental.returned]
    return list(rentals)


def search_by_customer(rentals: Iterable[RentalT], term: str) -> List[RentalT]:
    """Keep rentals whose customer name contains ``term``, ignoring case."""
    if not term:
        return list(rentals)
    needle = term.casefold()
    return [rental for rental in rentals if needle in rental.customer.name.casefold()]


def collation_key(name: str) -> tuple:
    """
    Sort key approximating locale-aware name comparison: letters compare
    without accents or case first, then accents, then case.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return (base.casefold(), name.casefold(), name.swapcase())


def _sort_key(sort_by: SortBy):
    if sort_by == SortBy.PRICE:
        return lambda rental: rental.amount
    if sort_by == SortBy.CUSTOMER:
        return lambda rental: collation_key(rental.customer.name)
    return lambda rental: as_utc(rental.created_at).timestamp()


def sort_rentals(
    rentals: Iterable[RentalT],
    sort_by: SortBy = SortBy.DATE,
    sort_order: SortOrder = SortOrder.DESC,
) -> List[RentalT]:
    """
    Order rentals by creation date, amount or customer name.

    The sort is stable in both directions: rentals that compare equal keep
    their input order.
    """
    return sorted(
        rentals,
        key=_sort_key(sort_by),
        reverse=sort_order == SortOrder.DESC,
    )


def apply_filters_and_sort(
    rentals: Iterable[RentalT],
    status: RentalStatusFilter = RentalStatusFilter.ALL,
    search: str = "",
    sort_by: SortBy = SortBy.DATE,
    sort_order: SortOrder = SortOrder.DESC,
) -> List[RentalT]:
    filtered = filter_by_status(rentals, status)
    filtered = search_by_customer(filtered, search)
    return sort_rentals(filtered, sort_by, sort_order)


def status_counts(rentals: Sequence) -> RentalCounts:
    active = sum(1 for rental in rentals if not rental.returned)
    return RentalCounts(total=len(rentals), active=active, inactive=len(rentals) - active)
