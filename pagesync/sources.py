"""
Count source: reads collection totals from the database and feeds them to
a store, standing in for the data-fetch collaborator.
"""
import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from pagesync.core.store import PaginationStore
from pagesync.db.base import Base
from pagesync.models.audit_event import AuditEvent
from pagesync.models.user import User
from pagesync.schemas.pagination import PaginationState

log = logging.getLogger(__name__)

# resource name -> model whose rows make up the collection
COUNTED_MODELS: dict[str, type[Base]] = {
    "audits": AuditEvent,
    "users": User,
}


def count_rows(db: Session, model: type[Base]) -> int:
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def refresh_from_db(db: Session, store: PaginationStore, model: type[Base]) -> PaginationState:
    total = count_rows(db, model)
    log.debug(
        "counted %s rows for %s",
        total,
        model.__tablename__,
        extra={"resource": store.resource, "total_count": total},
    )
    store.apply_collection_refresh(total)
    return store.get_state()
