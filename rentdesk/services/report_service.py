from sqlalchemy.orm import Session
from datetime import datetime
from typing import Optional

from rentdesk.config import CURRENCY
from rentdesk.enums.revenue_date_field import RevenueDateField
from rentdesk.schemas.inventory_schema import CategoryAvailability, InventoryStatus
from rentdesk.schemas.report_schema import DashboardReport, MonthlyReport, RevenueReport
from rentdesk.schemas.tenant_schema import TenantContext
from rentdesk.services.inventory_service import InventoryService
from rentdesk.services.rental_service import RentalService
from rentdesk.services import rental_aggregator as aggregator
from rentdesk.utils.dates import as_utc, utcnow


class ReportService:
    def __init__(self, db: Session):
        self.db = db
        self.rental_service = RentalService()
        self.inventory_service = InventoryService()

    def _category(self, total: int, allocated: int) -> CategoryAvailability:
        available = aggregator.available_count(total, allocated)
        return CategoryAvailability(
            total=total,
            allocated=allocated,
            available=available,
            occupancy_rate=aggregator.occupancy_rate(total, available),
            over_allocated=available < 0,
        )

    def get_inventory_status(self, tenant: TenantContext) -> InventoryStatus:
        """
        Inventory totals with what is currently rented out per category.

        Availability is not clamped: ``over_allocated`` marks a category whose
        active rentals exceed the recorded total.
        """
        totals = self.inventory_service.get_totals(self.db, tenant)
        allocated = self.rental_service.active_quantity_sums(self.db, tenant)

        return InventoryStatus(
            chairs=self._category(totals.total_chairs, allocated["chairs"]),
            tables=self._category(totals.total_tables, allocated["tables"]),
            tablecloths=self._category(totals.total_tablecloths, allocated["tablecloths"]),
            updated_at=totals.updated_at,
        )

    def get_dashboard(
        self,
        tenant: TenantContext,
        now: Optional[datetime] = None,
        date_field: RevenueDateField = RevenueDateField.CREATED_AT,
    ) -> DashboardReport:
        """
        Generate the dashboard summary for a tenant.

        Args:
            tenant: Tenant the report is for
            now: Reference time; defaults to the current UTC time
            date_field: Rental timestamp used to place revenue in the month

        Returns:
            DashboardReport with chair availability, active rentals and the
            current month's revenue
        """
        now = as_utc(now) if now else utcnow()
        chairs = self.get_inventory_status(tenant).chairs
        rentals = self.rental_service.list_with_relations(self.db, tenant)

        return DashboardReport(
            total_chairs=chairs.total,
            available_chairs=chairs.available,
            active_rentals=self.rental_service.active_count(self.db, tenant),
            monthly_revenue=aggregator.revenue_since(
                rentals, aggregator.month_start(now), date_field
            ),
            occupancy_rate=chairs.occupancy_rate,
            currency=CURRENCY,
            generated_at=now,
        )

    def get_revenue_report(
        self,
        tenant: TenantContext,
        now: Optional[datetime] = None,
        date_field: RevenueDateField = RevenueDateField.CREATED_AT,
    ) -> RevenueReport:
        """
        Revenue for the current week, month and year plus the most frequent customer.
        """
        now = as_utc(now) if now else utcnow()
        rentals = self.rental_service.list_with_relations(self.db, tenant)

        return RevenueReport(
            weekly_revenue=aggregator.revenue_since(rentals, aggregator.week_start(now), date_field),
            monthly_revenue=aggregator.revenue_since(rentals, aggregator.month_start(now), date_field),
            yearly_revenue=aggregator.revenue_since(rentals, aggregator.year_start(now), date_field),
            top_customer=aggregator.top_customer_by_frequency(rentals),
            date_field=date_field,
            currency=CURRENCY,
            generated_at=now,
        )

    def get_monthly_report(
        self,
        tenant: TenantContext,
        year: Optional[int] = None,
        date_field: RevenueDateField = RevenueDateField.CREATED_AT,
    ) -> MonthlyReport:
        now = utcnow()
        year = year or now.year
        rentals = self.rental_service.list_with_relations(self.db, tenant)
        months = aggregator.monthly_breakdown(rentals, year, date_field)

        return MonthlyReport(
            year=year,
            months=months,
            total=round(sum(month.revenue for month in months), 2),
            date_field=date_field,
            currency=CURRENCY,
            generated_at=now,
        )
