from datetime import datetime

from pydantic import BaseModel


class AuditEventOut(BaseModel):
    id: int
    actor: str | None
    action: str
    entity_type: str
    entity_id: int
    metadata: dict | None
    created_at: datetime
