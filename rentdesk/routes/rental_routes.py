from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from datetime import datetime

from rentdesk.database.init import get_db
from rentdesk.enums.rental_status import RentalStatusFilter
from rentdesk.enums.rental_sort import SortBy, SortOrder
from rentdesk.schemas.rental_schema import (
    RentalCreate,
    RentalUpdate,
    RentalResponse,
    RentalWithRelations,
)
from rentdesk.schemas.tenant_schema import TenantContext
from rentdesk.services.rental_service import RentalService
from rentdesk.services.rental_filter import apply_filters_and_sort, status_counts
from rentdesk.services.rental_status import due_status
from rentdesk.utils.dates import utcnow
from rentdesk.utils.dependencies import get_tenant
from rentdesk.responses.success import data_response, created_response, empty_response
from rentdesk.responses.error import not_found_error

router = APIRouter(prefix="/rentals", tags=["Rentals"])
rental_service = RentalService()


def format_rental_response(rental: RentalWithRelations, now: datetime) -> RentalResponse:
    return RentalResponse(
        **rental.model_dump(),
        due_status=due_status(rental.end_date, now, rental.returned),
    )


def _rental_payload(db: Session, tenant: TenantContext, rental_id: int):
    rental = rental_service.get_with_relations(db, tenant, rental_id)
    return format_rental_response(rental, utcnow())


@router.get("")
def list_rentals(
    status: RentalStatusFilter = RentalStatusFilter.ALL,
    search: str = "",
    sort_by: SortBy = SortBy.DATE,
    sort_order: SortOrder = SortOrder.DESC,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    """
    Returns the tenant's rentals filtered by status and customer name, in the
    requested order, with total/active/inactive counts of the result.
    """
    rentals = rental_service.list_with_relations(db, tenant)
    rentals = apply_filters_and_sort(rentals, status, search, sort_by, sort_order)
    now = utcnow()

    return data_response(
        {
            "rentals": [format_rental_response(r, now).model_dump(mode="json") for r in rentals],
            "counts": status_counts(rentals).model_dump(),
        }
    )


@router.post("", response_model=RentalResponse)
def create_rental(
    payload: RentalCreate,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    rental = rental_service.create_rental(db, tenant, payload)
    return created_response(_rental_payload(db, tenant, rental.id))


@router.get("/{rental_id}", response_model=RentalResponse)
def get_rental(
    rental_id: int,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    rental = rental_service.get_with_relations(db, tenant, rental_id)
    if not rental:
        return not_found_error("Rental not found")
    return data_response(format_rental_response(rental, utcnow()))


@router.put("/{rental_id}", response_model=RentalResponse)
def update_rental(
    rental_id: int,
    payload: RentalUpdate,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    rental = rental_service.update_rental(db, tenant, rental_id, payload)
    return data_response(_rental_payload(db, tenant, rental.id))


@router.patch("/{rental_id}/return", response_model=RentalResponse)
def mark_rental_returned(
    rental_id: int,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    rental = rental_service.mark_returned(db, tenant, rental_id)
    return data_response(_rental_payload(db, tenant, rental.id))


@router.patch("/{rental_id}/reactivate", response_model=RentalResponse)
def reactivate_rental(
    rental_id: int,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    rental = rental_service.reactivate(db, tenant, rental_id)
    return data_response(_rental_payload(db, tenant, rental.id))


@router.delete("/{rental_id}")
def delete_rental(
    rental_id: int,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    if not rental_service.delete(db, tenant, rental_id):
        return not_found_error("Rental not found")
    return empty_response()
