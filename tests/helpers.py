from pagesync.core.store import PaginationStore
from pagesync.models.audit_event import AuditEvent
from pagesync.models.user import User


def make_store(total_count: int = 0, page_size: int = 10, page: int = 0, resource: str = "audits") -> PaginationStore:
    """Store already refreshed to ``total_count`` and sitting on ``page``."""
    store = PaginationStore(resource, page_size)
    if total_count:
        store.apply_collection_refresh(total_count)
    if page:
        store.traverse(page)
    return store


class Recorder:
    """Zero-argument listener that counts calls and keeps the states it saw."""

    def __init__(self, store: PaginationStore | None = None) -> None:
        self.store = store
        self.calls = 0
        self.seen = []

    def __call__(self) -> None:
        self.calls += 1
        if self.store is not None:
            self.seen.append(self.store.get_state())


def create_user(db, email: str, full_name="User", is_admin=False) -> User:
    u = User(email=email, full_name=full_name, is_active=True, is_admin=is_admin)
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


def create_audit_events(db, count: int, actor: User | None = None, action="admin_login") -> list[AuditEvent]:
    events = [
        AuditEvent(
            actor_user_id=actor.id if actor else None,
            action=action,
            event_metadata={"seq": i},
        )
        for i in range(count)
    ]
    db.add_all(events)
    db.commit()
    return events
