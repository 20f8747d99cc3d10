from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from rentdesk.database.init import get_db
from rentdesk.schemas.tablecloth_color_schema import (
    TableclothColorCreate,
    TableclothColorUpdate,
    TableclothColorResponse,
)
from rentdesk.schemas.tenant_schema import TenantContext
from rentdesk.services.tablecloth_color_service import TableclothColorService
from rentdesk.utils.dependencies import get_tenant
from rentdesk.responses.success import data_response, created_response, empty_response
from rentdesk.responses.error import not_found_error

router = APIRouter(prefix="/tablecloth-colors", tags=["Tablecloth Colors"])
tablecloth_color_service = TableclothColorService()


@router.get("", response_model=List[TableclothColorResponse])
def list_colors(db: Session = Depends(get_db), tenant: TenantContext = Depends(get_tenant)):
    colors = tablecloth_color_service.list_colors(db, tenant)
    return data_response([TableclothColorResponse.model_validate(c) for c in colors])


@router.post("", response_model=TableclothColorResponse)
def create_color(
    payload: TableclothColorCreate,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    color = tablecloth_color_service.create_color(db, tenant, payload)
    return created_response(TableclothColorResponse.model_validate(color))


@router.put("/{color_id}", response_model=TableclothColorResponse)
def update_color(
    color_id: int,
    payload: TableclothColorUpdate,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    color = tablecloth_color_service.update_color(db, tenant, color_id, payload)
    return data_response(TableclothColorResponse.model_validate(color))


@router.delete("/{color_id}")
def delete_color(
    color_id: int,
    db: Session = Depends(get_db),
    tenant: TenantContext = Depends(get_tenant),
):
    """Rentals that used this color keep existing without one."""
    if not tablecloth_color_service.delete(db, tenant, color_id):
        return not_found_error("Tablecloth color not found")
    return empty_response()
