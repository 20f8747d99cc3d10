"""Tests for the tenant-scoped data access services."""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from rentdesk.database.models import Rental
from rentdesk.enums.item_type import ItemType
from rentdesk.schemas.customer_schema import CustomerCreate, CustomerUpdate
from rentdesk.schemas.inventory_schema import InventoryUpdate
from rentdesk.schemas.rental_schema import RentalCreate, RentalUpdate
from rentdesk.schemas.tablecloth_color_schema import TableclothColorCreate
from rentdesk.services.customer_service import CustomerService
from rentdesk.services.inventory_service import InventoryService
from rentdesk.services.rental_service import RentalService
from rentdesk.services.report_service import ReportService
from rentdesk.services.tablecloth_color_service import TableclothColorService
from rentdesk.utils.exceptions import DataAccessError, NotFoundError, ValidationError
from tests.conftest import utc

customer_service = CustomerService()
rental_service = RentalService()
color_service = TableclothColorService()
inventory_service = InventoryService()


def _customer(db, tenant, name="Ana Silva", email=None):
    return customer_service.create_customer(db, tenant, CustomerCreate(name=name, email=email))


def _rental(db, tenant, customer_id, **kwargs):
    data = {"chair_quantity": 10, "amount": 100.0, "customer_id": customer_id}
    data.update(kwargs)
    return rental_service.create_rental(db, tenant, RentalCreate(**data))


class TestCustomerService:
    def test_blank_name_is_rejected(self, db, tenant):
        with pytest.raises(ValidationError) as exc_info:
            _customer(db, tenant, name="   ")
        assert exc_info.value.field == "name"

    def test_empty_contact_fields_become_null(self, db, tenant):
        customer = customer_service.create_customer(
            db, tenant, CustomerCreate(name="Ana", email="", phone=" ")
        )
        assert customer.email is None
        assert customer.phone is None

    def test_list_is_ordered_with_rental_counts(self, db, tenant):
        pedro = _customer(db, tenant, "Pedro")
        ana = _customer(db, tenant, "Ana")
        _rental(db, tenant, pedro.id)
        _rental(db, tenant, pedro.id)

        customers = customer_service.list_with_counts(db, tenant)
        assert [(c.name, c.rental_count) for c in customers] == [("Ana", 0), ("Pedro", 2)]
        assert customers[0].id == ana.id

    def test_search_matches_email_and_phone(self, db, tenant):
        customer_service.create_customer(
            db, tenant, CustomerCreate(name="Ana", email="ana@mail.com", phone="11 9999")
        )
        _customer(db, tenant, "Pedro")
        assert [c.name for c in customer_service.list_with_counts(db, tenant, "MAIL")] == ["Ana"]
        assert [c.name for c in customer_service.list_with_counts(db, tenant, "9999")] == ["Ana"]

    def test_get_or_create_by_email_reuses_customer(self, db, tenant):
        payload = CustomerCreate(name="Ana", email="ana@mail.com")
        first = customer_service.get_or_create_by_email(db, tenant, payload)
        second = customer_service.get_or_create_by_email(db, tenant, payload)
        assert first.id == second.id

    def test_update_unknown_customer(self, db, tenant):
        with pytest.raises(NotFoundError):
            customer_service.update_customer(db, tenant, 999, CustomerUpdate(name="X"))

    def test_delete_removes_rentals(self, db, tenant):
        customer = _customer(db, tenant)
        _rental(db, tenant, customer.id)

        assert customer_service.delete(db, tenant, customer.id) is True
        assert db.query(Rental).count() == 0


class TestTenantScoping:
    def test_other_tenant_sees_nothing(self, db, tenant, other_tenant):
        customer = _customer(db, tenant)
        _rental(db, tenant, customer.id)

        assert customer_service.get(db, other_tenant, customer.id) is None
        assert rental_service.list_with_relations(db, other_tenant) == []
        assert customer_service.delete(db, other_tenant, customer.id) is False

    def test_cannot_rent_to_other_tenants_customer(self, db, tenant, other_tenant):
        customer = _customer(db, tenant)
        with pytest.raises(ValidationError) as exc_info:
            _rental(db, other_tenant, customer.id)
        assert exc_info.value.field == "customer_id"

    def test_update_of_foreign_row_is_refused(self, db, tenant, other_tenant):
        customer = _customer(db, tenant)
        with pytest.raises(NotFoundError):
            customer_service.update(db, other_tenant, customer, {"name": "Hijacked"})


class TestRentalService:
    def test_create_derives_item_type_and_quantity(self, db, tenant):
        customer = _customer(db, tenant)
        rental = _rental(db, tenant, customer.id, chair_quantity=10, table_quantity=2)

        assert rental.item_type == ItemType.MIXED.value
        assert rental.quantity == 12
        assert rental.returned is False

    def test_amount_is_kept_in_cents(self, db, tenant):
        customer = _customer(db, tenant)
        rental = _rental(db, tenant, customer.id, amount=10.006)
        assert rental.amount == 10.01

        rental = rental_service.update_rental(db, tenant, rental.id, RentalUpdate(amount=0.004))
        assert rental.amount == 0

    def test_create_with_no_items_is_rejected(self, db, tenant):
        customer = _customer(db, tenant)
        with pytest.raises(ValidationError) as exc_info:
            _rental(db, tenant, customer.id, chair_quantity=0)
        assert exc_info.value.field == "quantity"

    def test_create_with_inline_customer(self, db, tenant):
        rental = rental_service.create_rental(
            db,
            tenant,
            RentalCreate(
                table_quantity=3,
                amount=60.0,
                customer=CustomerCreate(name="Maria", email="maria@mail.com"),
            ),
        )
        assert rental.customer.name == "Maria"
        assert rental.item_type == ItemType.TABLE.value

    def test_create_without_customer_is_rejected(self, db, tenant):
        with pytest.raises(ValidationError) as exc_info:
            rental_service.create_rental(db, tenant, RentalCreate(chair_quantity=1, amount=10))
        assert exc_info.value.field == "customer_id"

    def test_unknown_tablecloth_color_is_rejected(self, db, tenant):
        customer = _customer(db, tenant)
        with pytest.raises(ValidationError) as exc_info:
            _rental(db, tenant, customer.id, tablecloth_quantity=2, tablecloth_color_id=42)
        assert exc_info.value.field == "tablecloth_color_id"

    def test_update_reclassifies(self, db, tenant):
        customer = _customer(db, tenant)
        rental = _rental(db, tenant, customer.id, chair_quantity=10)

        updated = rental_service.update_rental(
            db, tenant, rental.id, RentalUpdate(chair_quantity=0, tablecloth_quantity=4)
        )
        assert updated.item_type == ItemType.TABLECLOTH.value
        assert updated.quantity == 4

    def test_update_to_no_items_is_rejected(self, db, tenant):
        customer = _customer(db, tenant)
        rental = _rental(db, tenant, customer.id, chair_quantity=10)
        with pytest.raises(ValidationError):
            rental_service.update_rental(db, tenant, rental.id, RentalUpdate(chair_quantity=0))

    def test_status_transitions(self, db, tenant):
        customer = _customer(db, tenant)
        rental = _rental(db, tenant, customer.id)

        assert rental_service.mark_returned(db, tenant, rental.id).returned is True
        with pytest.raises(ValidationError):
            rental_service.mark_returned(db, tenant, rental.id)
        assert rental_service.reactivate(db, tenant, rental.id).returned is False

    def test_deleting_color_keeps_rental(self, db, tenant):
        customer = _customer(db, tenant)
        color = color_service.create_color(
            db, tenant, TableclothColorCreate(name="Branco", hex_color="#ffffff")
        )
        rental = _rental(db, tenant, customer.id, tablecloth_quantity=5, tablecloth_color_id=color.id)

        assert color.hex_color == "#FFFFFF"
        assert color_service.delete(db, tenant, color.id) is True
        db.expire_all()
        remaining = rental_service.get_with_relations(db, tenant, rental.id)
        assert remaining.tablecloth_color_id is None
        assert remaining.tablecloth_color is None

    def test_list_with_relations_contract(self, db, tenant):
        customer = _customer(db, tenant)
        _rental(db, tenant, customer.id)
        (rental,) = rental_service.list_with_relations(db, tenant)

        assert rental.customer.name == "Ana Silva"
        assert rental.created_at.tzinfo is not None

    def test_active_quantity_sums(self, db, tenant):
        customer = _customer(db, tenant)
        _rental(db, tenant, customer.id, chair_quantity=10, table_quantity=1)
        returned = _rental(db, tenant, customer.id, chair_quantity=5)
        rental_service.mark_returned(db, tenant, returned.id)

        sums = rental_service.active_quantity_sums(db, tenant)
        assert sums == {"chairs": 10, "tables": 1, "tablecloths": 0}

    def test_database_failure_becomes_data_access_error(self, db, tenant):
        with patch.object(db, "commit", side_effect=OperationalError("INSERT", {}, Exception("down"))):
            with pytest.raises(DataAccessError) as exc_info:
                _customer(db, tenant)
        assert "customer" in exc_info.value.message


class TestReportService:
    def test_inventory_status_reports_over_allocation(self, db, tenant):
        inventory_service.save_totals(db, tenant, InventoryUpdate(total_chairs=10, total_tables=4))
        customer = _customer(db, tenant)
        _rental(db, tenant, customer.id, chair_quantity=12, table_quantity=1)

        status = ReportService(db).get_inventory_status(tenant)
        assert status.chairs.available == -2
        assert status.chairs.over_allocated is True
        assert status.chairs.occupancy_rate == 120
        assert status.tables.available == 3
        assert status.tables.occupancy_rate == 25
        assert status.tablecloths.occupancy_rate == 0

    def test_inventory_defaults_to_zero(self, db, tenant):
        totals = inventory_service.get_totals(db, tenant)
        assert (totals.total_chairs, totals.total_tables, totals.total_tablecloths) == (0, 0, 0)

    def test_save_totals_updates_existing_row(self, db, tenant):
        inventory_service.save_totals(db, tenant, InventoryUpdate(total_chairs=10))
        inventory_service.save_totals(db, tenant, InventoryUpdate(total_chairs=20))
        assert inventory_service.count(db, tenant) == 1
        assert inventory_service.get_totals(db, tenant).total_chairs == 20

    def test_revenue_report_by_start_date(self, db, tenant):
        from rentdesk.enums.revenue_date_field import RevenueDateField

        customer = _customer(db, tenant)
        _rental(db, tenant, customer.id, amount=100, start_date=utc(2024, 6, 10))
        _rental(db, tenant, customer.id, amount=50, start_date=utc(2024, 5, 20))
        _rental(db, tenant, customer.id, amount=25, start_date=utc(2023, 12, 1))

        report = ReportService(db).get_revenue_report(
            tenant, now=utc(2024, 6, 12), date_field=RevenueDateField.START_DATE
        )
        assert report.weekly_revenue == 100
        assert report.monthly_revenue == 100
        assert report.yearly_revenue == 150
        assert report.top_customer.count == 3
