from typing import List

from sqlalchemy.orm import Session

from rentdesk.database.models.tablecloth_color_model import TableclothColor
from rentdesk.schemas.tablecloth_color_schema import TableclothColorCreate, TableclothColorUpdate
from rentdesk.schemas.tenant_schema import TenantContext
from rentdesk.services.base_service import DataAccessService


class TableclothColorService(DataAccessService):
    entity_name = "Tablecloth color"

    def __init__(self):
        super().__init__(TableclothColor)

    def list_colors(self, db: Session, tenant: TenantContext) -> List[TableclothColor]:
        return self.list(db, tenant, order_by=[TableclothColor.name])

    def create_color(
        self, db: Session, tenant: TenantContext, payload: TableclothColorCreate
    ) -> TableclothColor:
        data = payload.model_dump()
        data["hex_color"] = data["hex_color"].upper()
        return self.insert(db, tenant, data)

    def update_color(
        self, db: Session, tenant: TenantContext, color_id: int, payload: TableclothColorUpdate
    ) -> TableclothColor:
        color = self.get_or_404(db, tenant, color_id)
        patch = payload.model_dump(exclude_unset=True)
        if patch.get("hex_color"):
            patch["hex_color"] = patch["hex_color"].upper()
        return self.update(db, tenant, color, patch)
