from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.guards import delete_department
from app.db.session import get_db
from app.models.department import Department
from app.schemas.department import DepartmentOut

router = APIRouter(prefix="/departments", tags=["departments"])


@router.get("", response_model=list[DepartmentOut])
def list_departments(db: Session = Depends(get_db)):
    rows = db.query(Department).order_by(Department.id.asc()).all()
    return [DepartmentOut(id=d.id, name=d.name) for d in rows]


@router.delete("/{department_id}")
def remove_department(department_id: int):
    """Departments are permanent: this always answers 403."""
    delete_department(department_id)
