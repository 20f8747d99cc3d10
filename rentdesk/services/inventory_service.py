from sqlalchemy.orm import Session

from rentdesk.database.models.inventory_model import Inventory
from rentdesk.schemas.inventory_schema import InventoryTotals, InventoryUpdate
from rentdesk.schemas.tenant_schema import TenantContext
from rentdesk.services.base_service import DataAccessService


class InventoryService(DataAccessService):
    entity_name = "Inventory"

    def __init__(self):
        super().__init__(Inventory)

    def get_totals(self, db: Session, tenant: TenantContext) -> InventoryTotals:
        """The tenant's totals; all zero until the inventory is first saved."""
        rows = self.list(db, tenant)
        if not rows:
            return InventoryTotals()
        return InventoryTotals.model_validate(rows[0])

    def save_totals(
        self, db: Session, tenant: TenantContext, payload: InventoryUpdate
    ) -> InventoryTotals:
        rows = self.list(db, tenant)
        if rows:
            inventory = self.update(db, tenant, rows[0], payload.model_dump())
        else:
            inventory = self.insert(db, tenant, payload)
        return InventoryTotals.model_validate(inventory)
