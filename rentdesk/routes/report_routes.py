from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from rentdesk.database.init import get_db
from rentdesk.enums.revenue_date_field import RevenueDateField
from rentdesk.schemas.inventory_schema import InventoryStatus
from rentdesk.schemas.report_schema import DashboardReport, MonthlyReport, RevenueReport
from rentdesk.schemas.tenant_schema import TenantContext
from rentdesk.services.report_service import ReportService
from rentdesk.utils.dependencies import get_tenant
from rentdesk.responses.success import data_response

router = APIRouter(
    prefix="/reports",
    tags=["reports"],
    responses={404: {"description": "Not found"}},
)


@router.get("/dashboard", response_model=DashboardReport)
def get_dashboard(
    date_field: RevenueDateField = RevenueDateField.CREATED_AT,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    """
    Dashboard summary: chairs owned and available, active rentals,
    revenue of the current month and chair occupancy rate.
    """
    return data_response(ReportService(db).get_dashboard(tenant, date_field=date_field))


@router.get("/revenue", response_model=RevenueReport)
def get_revenue_report(
    date_field: RevenueDateField = RevenueDateField.CREATED_AT,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    """Weekly, monthly and yearly revenue with the most frequent customer."""
    return data_response(ReportService(db).get_revenue_report(tenant, date_field=date_field))


@router.get("/monthly", response_model=MonthlyReport)
def get_monthly_report(
    year: Optional[int] = Query(default=None, ge=1900, le=9999),
    date_field: RevenueDateField = RevenueDateField.CREATED_AT,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    return data_response(ReportService(db).get_monthly_report(tenant, year, date_field))


@router.get("/inventory", response_model=InventoryStatus)
def get_inventory_report(
    db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)
):
    return data_response(ReportService(db).get_inventory_status(tenant))
