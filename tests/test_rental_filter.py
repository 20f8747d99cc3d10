"""Tests for rental filtering and sorting."""

from rentdesk.enums.rental_status import RentalStatusFilter
from rentdesk.enums.rental_sort import SortBy, SortOrder
from rentdesk.services.rental_filter import (
    apply_filters_and_sort,
    filter_by_status,
    search_by_customer,
    sort_rentals,
    status_counts,
)


def _ids(rentals):
    return [r.id for r in rentals]


class TestFilterByStatus:
    def test_active_and_inactive_partition_the_list(self, make_rental):
        rentals = [
            make_rental(returned=False),
            make_rental(returned=True),
            make_rental(returned=False),
            make_rental(returned=True),
        ]
        active = filter_by_status(rentals, RentalStatusFilter.ACTIVE)
        inactive = filter_by_status(rentals, RentalStatusFilter.INACTIVE)

        assert all(not r.returned for r in active)
        assert all(r.returned for r in inactive)
        assert set(_ids(active)).isdisjoint(_ids(inactive))
        assert sorted(_ids(active) + _ids(inactive)) == sorted(_ids(rentals))

    def test_all_keeps_everything(self, make_rental):
        rentals = [make_rental(returned=False), make_rental(returned=True)]
        result = filter_by_status(rentals, RentalStatusFilter.ALL)
        assert result == rentals
        assert result is not rentals

    def test_scenario_active_keeps_first(self, make_rental):
        first = make_rental(amount=100, returned=False, created_at="2024-01-05T00:00:00+00:00")
        second = make_rental(amount=50, returned=True, created_at="2024-02-10T00:00:00+00:00")
        assert filter_by_status([first, second], RentalStatusFilter.ACTIVE) == [first]


class TestSearchByCustomer:
    def test_case_insensitive_substring(self, make_rental):
        rentals = [
            make_rental(customer="Ana Silva"),
            make_rental(customer="Mariana Costa"),
            make_rental(customer="Pedro"),
        ]
        result = search_by_customer(rentals, "ana")
        assert [r.customer.name for r in result] == ["Ana Silva", "Mariana Costa"]

    def test_uppercase_term(self, make_rental):
        rentals = [make_rental(customer="Pedro"), make_rental(customer="Ana")]
        assert [r.customer.name for r in search_by_customer(rentals, "PED")] == ["Pedro"]

    def test_empty_term_is_noop(self, make_rental):
        rentals = [make_rental(customer="Pedro"), make_rental(customer="Ana")]
        assert search_by_customer(rentals, "") == rentals

    def test_whitespace_is_part_of_the_term(self, make_rental):
        rentals = [make_rental(customer="Ana Silva"), make_rental(customer="Pedro")]
        assert [r.customer.name for r in search_by_customer(rentals, " ")] == ["Ana Silva"]

        rentals = [make_rental(customer="Ana Silva"), make_rental(customer="Silva")]
        assert search_by_customer(rentals, "silva ") == []


class TestSortRentals:
    def test_date_descending_by_default(self, make_rental):
        old = make_rental(created_at="2024-01-01T00:00:00+00:00")
        new = make_rental(created_at="2024-03-01T00:00:00+00:00")
        mid = make_rental(created_at="2024-02-01T00:00:00+00:00")
        assert _ids(sort_rentals([old, new, mid])) == [new.id, mid.id, old.id]

    def test_price_ascending(self, make_rental):
        rentals = [make_rental(amount=30), make_rental(amount=10), make_rental(amount=20)]
        result = sort_rentals(rentals, SortBy.PRICE, SortOrder.ASC)
        assert [r.amount for r in result] == [10, 20, 30]

    def test_customer_ignores_case_and_accents(self, make_rental):
        rentals = [
            make_rental(customer="bruno"),
            make_rental(customer="Álvaro"),
            make_rental(customer="Carla"),
            make_rental(customer="Amanda"),
        ]
        result = sort_rentals(rentals, SortBy.CUSTOMER, SortOrder.ASC)
        assert [r.customer.name for r in result] == ["Álvaro", "Amanda", "bruno", "Carla"]

    def test_sort_does_not_mutate_input(self, make_rental):
        rentals = [make_rental(amount=30), make_rental(amount=10)]
        before = list(rentals)
        sort_rentals(rentals, SortBy.PRICE, SortOrder.ASC)
        assert rentals == before

    def test_idempotent(self, make_rental):
        rentals = [make_rental(amount=a) for a in (5, 1, 5, 3, 1)]
        for sort_by in SortBy:
            for order in SortOrder:
                once = sort_rentals(rentals, sort_by, order)
                assert sort_rentals(once, sort_by, order) == once

    def test_asc_is_reverse_of_desc_without_ties(self, make_rental):
        rentals = [make_rental(amount=a) for a in (40, 10, 30, 20)]
        asc = sort_rentals(rentals, SortBy.PRICE, SortOrder.ASC)
        desc = sort_rentals(rentals, SortBy.PRICE, SortOrder.DESC)
        assert asc == list(reversed(desc))

    def test_ties_keep_input_order(self, make_rental):
        first = make_rental(amount=10)
        second = make_rental(amount=10)
        for order in SortOrder:
            assert _ids(sort_rentals([first, second], SortBy.PRICE, order)) == [first.id, second.id]


def test_apply_filters_and_sort(make_rental):
    rentals = [
        make_rental(amount=10, customer="Ana Silva", returned=False),
        make_rental(amount=30, customer="Mariana Costa", returned=False),
        make_rental(amount=20, customer="Ana Lima", returned=True),
        make_rental(amount=40, customer="Pedro", returned=False),
    ]
    result = apply_filters_and_sort(
        rentals, RentalStatusFilter.ACTIVE, "ana", SortBy.PRICE, SortOrder.DESC
    )
    assert [r.customer.name for r in result] == ["Mariana Costa", "Ana Silva"]


def test_status_counts(make_rental):
    rentals = [make_rental(returned=False), make_rental(returned=True), make_rental(returned=False)]
    counts = status_counts(rentals)
    assert (counts.total, counts.active, counts.inactive) == (3, 2, 1)
