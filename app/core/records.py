from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.orm import Session

from app.core.errors import EmployeeNotFound
from app.models.contact import ContactRecord
from app.models.employee import Employee
from app.models.salary import SalaryRecord


@dataclass(frozen=True)
class EmployeeRecord:
    """An employee together with its contact and salary rows."""

    employee: Employee
    contact: ContactRecord | None
    salary: SalaryRecord | None

    @property
    def email(self) -> str | None:
        return self.contact.email if self.contact else None

    @property
    def phone(self) -> str | None:
        return self.contact.phone if self.contact else None

    @property
    def amount(self) -> Decimal | None:
        return self.salary.amount if self.salary else None


def load_employee_record(db: Session, employee_id: int) -> EmployeeRecord:
    employee = db.get(Employee, employee_id)
    if employee is None:
        raise EmployeeNotFound(employee_id)
    return EmployeeRecord(
        employee=employee,
        contact=db.get(ContactRecord, employee_id),
        salary=db.get(SalaryRecord, employee_id),
    )
