import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from rentdesk.schemas.tenant_schema import TenantContext
from rentdesk.utils.exceptions import DataAccessError, NotFoundError

ModelType = TypeVar("ModelType")

logger = logging.getLogger(__name__)


class DataAccessService:
    """
    Generic CRUD over one tenant-owned model.

    Every method takes the tenant explicitly and only ever sees rows whose
    ``user_id`` matches it. Database failures are rolled back and re-raised
    as ``DataAccessError``.
    """

    entity_name = "Record"

    def __init__(self, model: Type[ModelType]):
        self.model = model

    @contextmanager
    def _guard(self, db: Session, action: str):
        try:
            yield
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Failed to %s %s: %s", action, self.entity_name, e, exc_info=True)
            raise DataAccessError(f"Failed to {action} {self.entity_name.lower()}") from e

    def scoped_query(self, db: Session, tenant: TenantContext) -> Query:
        return db.query(self.model).filter(self.model.user_id == tenant.user_id)

    def _apply(
        self,
        query: Query,
        filters: Optional[Dict[str, Any]] = None,
        criteria: Sequence = (),
    ) -> Query:
        for field, value in (filters or {}).items():
            query = query.filter(getattr(self.model, field) == value)
        for criterion in criteria:
            query = query.filter(criterion)
        return query

    def list(
        self,
        db: Session,
        tenant: TenantContext,
        filters: Optional[Dict[str, Any]] = None,
        criteria: Sequence = (),
        order_by: Sequence = (),
    ) -> List[ModelType]:
        """
        List the tenant's rows.

        Args:
            db: Database session
            tenant: Tenant the rows belong to
            filters: Equality filters, column name -> value
            criteria: Extra SQLAlchemy expressions (ranges, ``in_``...)
            order_by: Columns or expressions to order by

        Returns:
            The matching model instances
        """
        with self._guard(db, "list"):
            query = self._apply(self.scoped_query(db, tenant), filters, criteria)
            if order_by:
                query = query.order_by(*order_by)
            return query.all()

    def count(
        self,
        db: Session,
        tenant: TenantContext,
        filters: Optional[Dict[str, Any]] = None,
        criteria: Sequence = (),
    ) -> int:
        with self._guard(db, "count"):
            return self._apply(self.scoped_query(db, tenant), filters, criteria).count()

    def get(self, db: Session, tenant: TenantContext, id: int) -> Optional[ModelType]:
        with self._guard(db, "load"):
            return self.scoped_query(db, tenant).filter(self.model.id == id).first()

    def get_or_404(self, db: Session, tenant: TenantContext, id: int) -> ModelType:
        db_obj = self.get(db, tenant, id)
        if db_obj is None:
            raise NotFoundError(self.entity_name, id)
        return db_obj

    def insert(
        self, db: Session, tenant: TenantContext, obj_in: Union[BaseModel, Dict[str, Any]]
    ) -> ModelType:
        data = obj_in.model_dump() if isinstance(obj_in, BaseModel) else dict(obj_in)
        data["user_id"] = tenant.user_id

        with self._guard(db, "create"):
            db_obj = self.model(**data)
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        logger.info("Created %s %s for tenant %s", self.entity_name, db_obj.id, tenant.user_id)
        return db_obj

    def update(
        self,
        db: Session,
        tenant: TenantContext,
        db_obj: ModelType,
        patch: Union[BaseModel, Dict[str, Any]],
    ) -> ModelType:
        if db_obj.user_id != tenant.user_id:
            raise NotFoundError(self.entity_name, db_obj.id)

        if isinstance(patch, BaseModel):
            patch = patch.model_dump(exclude_unset=True)

        with self._guard(db, "update"):
            for key, value in patch.items():
                setattr(db_obj, key, value)
            db.commit()
            db.refresh(db_obj)
        logger.info("Updated %s %s for tenant %s", self.entity_name, db_obj.id, tenant.user_id)
        return db_obj

    def delete(self, db: Session, tenant: TenantContext, id: int) -> bool:
        db_obj = self.get(db, tenant, id)
        if not db_obj:
            return False

        with self._guard(db, "delete"):
            db.delete(db_obj)
            db.commit()
        logger.info("Deleted %s %s for tenant %s", self.entity_name, id, tenant.user_id)
        return True
