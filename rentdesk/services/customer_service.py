import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from rentdesk.database.models.customer_model import Customer
from rentdesk.database.models.rental_model import Rental
from rentdesk.schemas.customer_schema import CustomerCreate, CustomerUpdate, CustomerResponse
from rentdesk.schemas.tenant_schema import TenantContext
from rentdesk.services.base_service import DataAccessService
from rentdesk.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def customer_matches(customer, term: str) -> bool:
    """Case-insensitive match on name or email, plain substring on phone."""
    needle = term.strip().casefold()
    if not needle:
        return True
    return (
        needle in customer.name.casefold()
        or (customer.email is not None and needle in customer.email.casefold())
        or (customer.phone is not None and term.strip() in customer.phone)
    )


class CustomerService(DataAccessService):
    entity_name = "Customer"

    def __init__(self):
        super().__init__(Customer)

    def _clean(self, data: dict) -> dict:
        if "name" in data:
            name = (data["name"] or "").strip()
            if not name:
                logger.warning("Rejected customer without a name")
                raise ValidationError("name", "Customer name is required")
            data["name"] = name
        for field in ("email", "phone"):
            if field in data:
                data[field] = _blank_to_none(data[field])
        return data

    def list_with_counts(
        self, db: Session, tenant: TenantContext, search: Optional[str] = None
    ) -> List[CustomerResponse]:
        """Customers ordered by name, each with its number of rentals."""
        with self._guard(db, "list"):
            rows = (
                db.query(Customer, func.count(Rental.id))
                .outerjoin(Rental, Rental.customer_id == Customer.id)
                .filter(Customer.user_id == tenant.user_id)
                .group_by(Customer.id)
                .order_by(Customer.name)
                .all()
            )

        customers = []
        for customer, rental_count in rows:
            if search and not customer_matches(customer, search):
                continue
            response = CustomerResponse.model_validate(customer)
            response.rental_count = rental_count
            customers.append(response)
        return customers

    def create_customer(
        self, db: Session, tenant: TenantContext, payload: CustomerCreate
    ) -> Customer:
        return self.insert(db, tenant, self._clean(payload.model_dump()))

    def update_customer(
        self, db: Session, tenant: TenantContext, customer_id: int, payload: CustomerUpdate
    ) -> Customer:
        customer = self.get_or_404(db, tenant, customer_id)
        return self.update(db, tenant, customer, self._clean(payload.model_dump(exclude_unset=True)))

    def get_or_create_by_email(
        self, db: Session, tenant: TenantContext, payload: CustomerCreate
    ) -> Customer:
        """Reuse the tenant's customer with the same email, if any."""
        data = self._clean(payload.model_dump())
        if data["email"]:
            existing = self.list(db, tenant, filters={"email": data["email"]})
            if existing:
                return existing[0]
        return self.insert(db, tenant, data)
