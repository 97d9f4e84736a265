from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.audit import log_event
from app.core.config import settings
from app.core.errors import IntegrityFailure, ValidationError
from app.core.ids import allocate_employee_id, get_max_id
from app.core.records import EmployeeRecord
from app.db.session import transaction
from app.models.contact import ContactRecord
from app.models.department import Department
from app.models.employee import Employee
from app.models.salary import SalaryRecord

logger = logging.getLogger(__name__)


def derive_email(first_name: str, last_name: str, domain: str | None = None) -> str:
    """first.last@domain, keeping the case the names were given in."""
    return f"{first_name}.{last_name}@{domain or settings.EMAIL_DOMAIN}"


def _reject(message: str, field: str, value) -> ValidationError:
    logger.warning("Rejected employee insertion: %s", message)
    return ValidationError(message, entity="employee", field=field, value=value)


def _parse_salary(salary) -> Decimal:
    try:
        amount = Decimal(str(salary))
    except (InvalidOperation, ValueError):
        raise _reject(f"Salary {salary!r} is not a number", "salary", str(salary))
    if not amount.is_finite() or amount < 0:
        raise _reject(f"Salary must be a non-negative amount, got {salary}", "salary", str(salary))
    return amount


def validate_new_employee(
    db: Session,
    *,
    first_name: str,
    last_name: str,
    department_id: int,
) -> None:
    """
    Checks that do not depend on the candidate id: the full name is not taken
    and the department exists.
    """
    if not first_name.strip() or not last_name.strip():
        raise _reject("First and last name are required", "name", f"{first_name} {last_name}")

    duplicate = (
        db.query(Employee.id)
        .filter(Employee.first_name == first_name, Employee.last_name == last_name)
        .first()
    )
    if duplicate:
        raise _reject(
            f"An employee named {first_name} {last_name} already exists (id {duplicate[0]})",
            "name",
            f"{first_name} {last_name}",
        )

    max_department_id = get_max_id(db, Department)
    if department_id > max_department_id:
        raise _reject(
            f"Department {department_id} is out of range (highest is {max_department_id})",
            "department_id",
            department_id,
        )
    if db.get(Department, department_id) is None:
        raise _reject(f"Department {department_id} does not exist", "department_id", department_id)


def validate_manager(db: Session, *, manager_id: int | None, candidate_id: int) -> None:
    if manager_id is None:
        return
    if manager_id > candidate_id:
        raise _reject(
            f"Manager {manager_id} is out of range (new employee id is {candidate_id})",
            "manager_id",
            manager_id,
        )
    if db.get(Employee, manager_id) is None:
        raise _reject(f"Manager {manager_id} does not exist", "manager_id", manager_id)


def insert_employee(
    db: Session,
    *,
    first_name: str,
    last_name: str,
    phone: str,
    job_title: str,
    department_id: int,
    manager_id: int | None,
    salary,
    actor: str | None = None,
) -> EmployeeRecord:
    """
    Admit a new employee with its salary and contact records, or reject it
    with a ValidationError. All three rows are written in one transaction;
    a rejection leaves nothing behind, including the allocated id.
    """
    amount = _parse_salary(salary)

    try:
        with transaction(db):
            validate_new_employee(
                db,
                first_name=first_name,
                last_name=last_name,
                department_id=department_id,
            )

            candidate_id = allocate_employee_id(db)
            validate_manager(db, manager_id=manager_id, candidate_id=candidate_id)

            employee = Employee(
                id=candidate_id,
                first_name=first_name,
                last_name=last_name,
                job_title=job_title,
                department_id=department_id,
                manager_id=manager_id,
            )
            contact = ContactRecord(
                employee_id=candidate_id,
                phone=phone,
                email=derive_email(first_name, last_name),
            )
            salary_record = SalaryRecord(employee_id=candidate_id, amount=amount)

            db.add(employee)
            db.flush()
            db.add_all([salary_record, contact])
            db.flush()

            log_event(
                db=db,
                actor=actor,
                action="EMPLOYEE_CREATED",
                entity_type="employee",
                entity_id=candidate_id,
                metadata={
                    "first_name": first_name,
                    "last_name": last_name,
                    "job_title": job_title,
                    "department_id": department_id,
                    "manager_id": manager_id,
                    "email": contact.email,
                    "salary": str(amount),
                },
            )
    except SQLAlchemyError as exc:
        logger.warning("Insertion of %s %s rolled back: %s", first_name, last_name, exc)
        raise IntegrityFailure(
            f"Could not store employee {first_name} {last_name}: {exc.__class__.__name__}",
            entity="employee",
            field="name",
            value=f"{first_name} {last_name}",
        ) from exc

    logger.info("Admitted employee %s (%s)", candidate_id, employee.full_name)
    return EmployeeRecord(employee=employee, contact=contact, salary=salary_record)
