import logging
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from rentdesk.database.models.rental_model import Rental
from rentdesk.enums.rental_status import RentalStatus
from rentdesk.schemas.rental_schema import RentalCreate, RentalUpdate, RentalWithRelations
from rentdesk.schemas.tenant_schema import TenantContext
from rentdesk.services.base_service import DataAccessService
from rentdesk.services.customer_service import CustomerService
from rentdesk.services.tablecloth_color_service import TableclothColorService
from rentdesk.services.item_classifier import (
    classify_item_type,
    total_quantity,
    validate_quantities,
)
from rentdesk.services.rental_status import transition
from rentdesk.utils.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

QUANTITY_FIELDS = ("chair_quantity", "table_quantity", "tablecloth_quantity")


class RentalService(DataAccessService):
    entity_name = "Rental"

    def __init__(self):
        super().__init__(Rental)
        self.customer_service = CustomerService()
        self.tablecloth_color_service = TableclothColorService()

    def _with_relations(self, db: Session, tenant: TenantContext):
        return self.scoped_query(db, tenant).options(
            joinedload(Rental.customer), joinedload(Rental.tablecloth_color)
        )

    def list_with_relations(self, db: Session, tenant: TenantContext) -> List[RentalWithRelations]:
        """All of the tenant's rentals, newest first, joined with customer and color."""
        with self._guard(db, "list"):
            rentals = (
                self._with_relations(db, tenant)
                .order_by(Rental.created_at.desc(), Rental.id.desc())
                .all()
            )
        return [RentalWithRelations.model_validate(rental) for rental in rentals]

    def get_with_relations(
        self, db: Session, tenant: TenantContext, rental_id: int
    ) -> Optional[RentalWithRelations]:
        with self._guard(db, "load"):
            rental = self._with_relations(db, tenant).filter(Rental.id == rental_id).first()
        if rental is None:
            return None
        return RentalWithRelations.model_validate(rental)

    def _derive_item_fields(self, data: Dict) -> Dict:
        quantities = [data[field] for field in QUANTITY_FIELDS]
        validate_quantities(*quantities)
        data["item_type"] = classify_item_type(*quantities).value
        data["quantity"] = total_quantity(*quantities)
        return data

    def _check_tablecloth_color(
        self, db: Session, tenant: TenantContext, color_id: Optional[int]
    ) -> None:
        if color_id is not None and self.tablecloth_color_service.get(db, tenant, color_id) is None:
            raise ValidationError("tablecloth_color_id", f"Tablecloth color {color_id} does not exist")

    def _resolve_customer_id(self, db: Session, tenant: TenantContext, payload: RentalCreate) -> int:
        if payload.customer_id is not None:
            try:
                return self.customer_service.get_or_404(db, tenant, payload.customer_id).id
            except NotFoundError:
                raise ValidationError(
                    "customer_id", f"Customer {payload.customer_id} does not exist"
                )
        if payload.customer is not None:
            return self.customer_service.get_or_create_by_email(db, tenant, payload.customer).id
        raise ValidationError("customer_id", "A rental needs a customer")

    def create_rental(self, db: Session, tenant: TenantContext, payload: RentalCreate) -> Rental:
        data = payload.model_dump(exclude={"customer"})
        data = self._derive_item_fields(data)
        self._check_tablecloth_color(db, tenant, data["tablecloth_color_id"])
        data["customer_id"] = self._resolve_customer_id(db, tenant, payload)
        data["returned"] = False
        return self.insert(db, tenant, data)

    def update_rental(
        self, db: Session, tenant: TenantContext, rental_id: int, payload: RentalUpdate
    ) -> Rental:
        rental = self.get_or_404(db, tenant, rental_id)
        patch = payload.model_dump(exclude_unset=True)

        if any(field in patch for field in QUANTITY_FIELDS):
            merged = {field: patch.get(field, getattr(rental, field)) for field in QUANTITY_FIELDS}
            # An explicit null quantity means none of that item
            merged = {field: value or 0 for field, value in merged.items()}
            patch.update(self._derive_item_fields(merged))
        if patch.get("amount", 0) is None:
            raise ValidationError("amount", "Amount is required")
        if "tablecloth_color_id" in patch:
            self._check_tablecloth_color(db, tenant, patch["tablecloth_color_id"])

        return self.update(db, tenant, rental, patch)

    def _set_status(
        self, db: Session, tenant: TenantContext, rental_id: int, target: RentalStatus
    ) -> Rental:
        rental = self.get_or_404(db, tenant, rental_id)
        returned = transition(rental.returned, target)
        return self.update(db, tenant, rental, {"returned": returned})

    def mark_returned(self, db: Session, tenant: TenantContext, rental_id: int) -> Rental:
        return self._set_status(db, tenant, rental_id, RentalStatus.INACTIVE)

    def reactivate(self, db: Session, tenant: TenantContext, rental_id: int) -> Rental:
        return self._set_status(db, tenant, rental_id, RentalStatus.ACTIVE)

    def active_quantity_sums(self, db: Session, tenant: TenantContext) -> Dict[str, int]:
        """Quantities currently out on unreturned rentals, per category."""
        with self._guard(db, "sum"):
            chairs, tables, tablecloths = (
                db.query(
                    func.coalesce(func.sum(Rental.chair_quantity), 0),
                    func.coalesce(func.sum(Rental.table_quantity), 0),
                    func.coalesce(func.sum(Rental.tablecloth_quantity), 0),
                )
                .filter(Rental.user_id == tenant.user_id, Rental.returned.is_(False))
                .one()
            )
        return {"chairs": int(chairs), "tables": int(tables), "tablecloths": int(tablecloths)}

    def active_count(self, db: Session, tenant: TenantContext) -> int:
        return self.count(db, tenant, filters={"returned": False})
