from pagesync.models.audit_event import AuditEvent
from pagesync.models.user import User

__all__ = ["AuditEvent", "User"]
