from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rentdesk.database.init import get_db
from rentdesk.schemas.inventory_schema import InventoryUpdate, InventoryStatus
from rentdesk.schemas.tenant_schema import TenantContext
from rentdesk.services.inventory_service import InventoryService
from rentdesk.services.report_service import ReportService
from rentdesk.utils.dependencies import get_tenant
from rentdesk.responses.success import data_response

router = APIRouter(prefix="/inventory", tags=["Inventory"])
inventory_service = InventoryService()


@router.get("", response_model=InventoryStatus)
def get_inventory(db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)):
    """Totals per category with what is rented out and what is left."""
    return data_response(ReportService(db).get_inventory_status(tenant))


@router.put("", response_model=InventoryStatus)
def save_inventory(
    payload: InventoryUpdate,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    inventory_service.save_totals(db, tenant, payload)
    return data_response(ReportService(db).get_inventory_status(tenant))
