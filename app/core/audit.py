from sqlalchemy.orm import Session
from typing import Any

from app.models.audit_event import AuditEvent


def log_event(
    *,
    db: Session,
    actor: str | None,
    action: str,
    entity_type: str,
    entity_id: int,
    metadata: dict[str, Any] | None = None,
):
    event = AuditEvent(
        actor=actor,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        event_metadata=metadata,
    )
    db.add(event)
