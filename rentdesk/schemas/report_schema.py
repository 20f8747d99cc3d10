from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional

from rentdesk.enums.revenue_date_field import RevenueDateField


class TopCustomer(BaseModel):
    customer_id: int
    name: str
    count: int


class MonthlyRevenue(BaseModel):
    month: int
    revenue: float = 0.0


class DashboardReport(BaseModel):
    """Response model for the dashboard summary"""

    total_chairs: int = 0
    available_chairs: int = 0
    active_rentals: int = 0
    monthly_revenue: float = 0.0
    occupancy_rate: int = 0
    currency: str
    generated_at: datetime


class RevenueReport(BaseModel):
    weekly_revenue: float = 0.0
    monthly_revenue: float = 0.0
    yearly_revenue: float = 0.0
    top_customer: Optional[TopCustomer] = None
    date_field: RevenueDateField
    currency: str
    generated_at: datetime


class MonthlyReport(BaseModel):
    year: int
    months: List[MonthlyRevenue]
    total: float = 0.0
    date_field: RevenueDateField
    currency: str
    generated_at: datetime
