from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import Select, select
from sqlalchemy.orm import Session, aliased

from app.models.department import Department
from app.models.employee import Employee
from app.models.salary import SalaryRecord


@dataclass(frozen=True)
class DirectoryRow:
    employee_id: int
    first_name: str
    last_name: str
    job_title: str
    department_id: int
    department_name: str
    manager_id: int | None
    manager_first_name: str | None
    salary: Decimal | None

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"


def projection_query(department_id: int | None = None) -> Select:
    """
    Employee joined with its manager's first name, its department name and
    its salary. Roots have no manager; employees without a salary row keep a
    NULL salary.
    """
    manager = aliased(Employee, name="manager")

    stmt = (
        select(
            Employee.id.label("employee_id"),
            Employee.first_name,
            Employee.last_name,
            Employee.job_title,
            Employee.department_id,
            Department.name.label("department_name"),
            Employee.manager_id,
            manager.first_name.label("manager_first_name"),
            SalaryRecord.amount.label("salary"),
        )
        .join(Department, Department.id == Employee.department_id)
        .outerjoin(manager, manager.id == Employee.manager_id)
        .outerjoin(SalaryRecord, SalaryRecord.employee_id == Employee.id)
    )
    if department_id is not None:
        stmt = stmt.where(Employee.department_id == department_id)
    return stmt.order_by(Employee.id)


def directory_projection(
    db: Session,
    *,
    department_id: int | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> list[DirectoryRow]:
    stmt = projection_query(department_id)
    if offset:
        stmt = stmt.offset(offset)
    if limit is not None:
        stmt = stmt.limit(limit)
    return [DirectoryRow(**row._asdict()) for row in db.execute(stmt)]
