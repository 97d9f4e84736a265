from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.employees import archive_to_out
from app.db.session import get_db
from app.models.archived_employee import ArchivedEmployee
from app.schemas.employee import ArchivedEmployeeOut

router = APIRouter(prefix="/archive", tags=["archive"])


@router.get("", response_model=list[ArchivedEmployeeOut])
def list_archived_employees(
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
):
    rows = (
        db.query(ArchivedEmployee)
        .order_by(ArchivedEmployee.archived_at.desc(), ArchivedEmployee.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )
    return [archive_to_out(a) for a in rows]
