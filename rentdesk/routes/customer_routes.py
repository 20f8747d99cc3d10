from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from rentdesk.database.init import get_db
from rentdesk.schemas.customer_schema import CustomerCreate, CustomerUpdate, CustomerResponse
from rentdesk.schemas.tenant_schema import TenantContext
from rentdesk.services.customer_service import CustomerService
from rentdesk.utils.dependencies import get_tenant
from rentdesk.responses.success import data_response, created_response, empty_response
from rentdesk.responses.error import not_found_error

router = APIRouter(prefix="/customers", tags=["Customers"])
customer_service = CustomerService()


@router.get("", response_model=List[CustomerResponse])
def list_customers(
    search: Optional[str] = None,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    """
    Returns the tenant's customers ordered by name, each with its rental count.
    ``search`` matches name or email (case-insensitive) or phone.
    """
    return data_response(customer_service.list_with_counts(db, tenant, search))


@router.post("", response_model=CustomerResponse)
def create_customer(
    payload: CustomerCreate,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    customer = customer_service.create_customer(db, tenant, payload)
    return created_response(CustomerResponse.model_validate(customer))


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(
    customer_id: int,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    customer = customer_service.get(db, tenant, customer_id)
    if not customer:
        return not_found_error("Customer not found")
    return data_response(CustomerResponse.model_validate(customer))


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(
    customer_id: int,
    payload: CustomerUpdate,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    customer = customer_service.update_customer(db, tenant, customer_id, payload)
    return data_response(CustomerResponse.model_validate(customer))


@router.delete("/{customer_id}")
def delete_customer(
    customer_id: int,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    """Deletes the customer together with all of its rentals."""
    if not customer_service.delete(db, tenant, customer_id):
        return not_found_error("Customer not found")
    return empty_response()
