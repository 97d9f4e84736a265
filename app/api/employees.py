from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.deletion import delete_employee
from app.core.hierarchy import resolve_hierarchy
from app.core.records import EmployeeRecord, load_employee_record
from app.core.security import get_actor
from app.core.validation import insert_employee
from app.db.session import get_db
from app.models.archived_employee import ArchivedEmployee
from app.schemas.directory import HierarchyLevelOut
from app.schemas.employee import ArchivedEmployeeOut, EmployeeCreate, EmployeeOut

router = APIRouter(prefix="/employees", tags=["employees"])


def employee_to_out(r: EmployeeRecord) -> EmployeeOut:
    e = r.employee
    return EmployeeOut(
        id=e.id,
        first_name=e.first_name,
        last_name=e.last_name,
        job_title=e.job_title,
        department_id=e.department_id,
        manager_id=e.manager_id,
        phone=r.phone,
        email=r.email,
        salary=r.amount,
    )


def archive_to_out(a: ArchivedEmployee) -> ArchivedEmployeeOut:
    return ArchivedEmployeeOut(
        employee_id=a.employee_id,
        first_name=a.first_name,
        last_name=a.last_name,
        job_title=a.job_title,
        department_id=a.department_id,
        manager_id=a.manager_id,
        archived_at=a.archived_at,
    )


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
def create_employee(
    payload: EmployeeCreate,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
):
    """
    Admit a new employee together with its salary and contact records.
    The id is issued by the directory; the email is derived from the name.
    """
    record = insert_employee(
        db,
        first_name=payload.first_name,
        last_name=payload.last_name,
        phone=payload.phone,
        job_title=payload.job_title,
        department_id=payload.department_id,
        manager_id=payload.manager_id,
        salary=payload.salary,
        actor=actor,
    )
    return employee_to_out(record)


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(
    employee_id: int,
    db: Session = Depends(get_db),
):
    return employee_to_out(load_employee_record(db, employee_id))


@router.delete("/{employee_id}", response_model=ArchivedEmployeeOut)
def remove_employee(
    employee_id: int,
    db: Session = Depends(get_db),
    actor: str | None = Depends(get_actor),
):
    """
    Delete an employee with its contact and salary records and return the
    archived snapshot.
    """
    archived = delete_employee(db, employee_id, actor=actor)
    return archive_to_out(archived)


@router.get("/{employee_id}/hierarchy", response_model=list[HierarchyLevelOut])
def get_hierarchy(
    employee_id: int,
    db: Session = Depends(get_db),
):
    return [
        HierarchyLevelOut(
            employee_id=h.employee_id,
            name=h.name,
            job_title=h.job_title,
            level=h.level,
        )
        for h in resolve_hierarchy(db, employee_id)
    ]
