"""
Employee deletion pipeline.

Deleting an employee runs a fixed sequence of steps inside one transaction:

    load target -> check direct reports -> remove contact -> remove salary
                -> remove employee -> archive snapshot -> audit

Each step is flushed before the next one starts, so child rows are gone
before the parent row, and the parent row is gone before the archive row is
written. Any failure rolls back the whole sequence: either the employee,
its contact and its salary all disappear and exactly one archive row
appears, or nothing changes.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.audit import log_event
from app.core.errors import ArchiveConflict, DirectoryError, EmployeeNotFound, IntegrityFailure
from app.db.session import transaction
from app.models.archived_employee import ArchivedEmployee
from app.models.contact import ContactRecord
from app.models.employee import Employee
from app.models.salary import SalaryRecord

logger = logging.getLogger(__name__)


@dataclass
class DeletionContext:
    employee_id: int
    actor: str | None = None
    snapshot: dict | None = None
    archive: ArchivedEmployee | None = None
    removed: list[str] = field(default_factory=list)


def load_target(db: Session, ctx: DeletionContext) -> None:
    employee = db.get(Employee, ctx.employee_id)
    if employee is None:
        raise EmployeeNotFound(ctx.employee_id)
    ctx.snapshot = {
        "employee_id": employee.id,
        "first_name": employee.first_name,
        "last_name": employee.last_name,
        "job_title": employee.job_title,
        "department_id": employee.department_id,
        "manager_id": employee.manager_id,
    }


def check_direct_reports(db: Session, ctx: DeletionContext) -> None:
    reports = db.execute(
        select(Employee.id).where(Employee.manager_id == ctx.employee_id).order_by(Employee.id)
    ).scalars().all()
    if reports:
        raise IntegrityFailure(
            f"Employee {ctx.employee_id} still manages employees {list(reports)}",
            entity="employee",
            field="manager_id",
            value=list(reports),
        )


def remove_contact(db: Session, ctx: DeletionContext) -> None:
    contact = db.get(ContactRecord, ctx.employee_id)
    if contact is not None:
        db.delete(contact)
        db.flush()
        ctx.removed.append("contact")


def remove_salary(db: Session, ctx: DeletionContext) -> None:
    salary = db.get(SalaryRecord, ctx.employee_id)
    if salary is not None:
        db.delete(salary)
        db.flush()
        ctx.removed.append("salary")


def remove_employee(db: Session, ctx: DeletionContext) -> None:
    db.delete(db.get(Employee, ctx.employee_id))
    db.flush()
    ctx.removed.append("employee")


def archive_snapshot(db: Session, ctx: DeletionContext) -> None:
    """Write the pre-deletion snapshot, unless this employee id is already archived."""
    already_archived = db.execute(
        select(ArchivedEmployee.id).where(ArchivedEmployee.employee_id == ctx.employee_id)
    ).first()
    if already_archived:
        raise ArchiveConflict(ctx.employee_id)

    ctx.archive = ArchivedEmployee(**ctx.snapshot)
    db.add(ctx.archive)
    db.flush()


def record_audit(db: Session, ctx: DeletionContext) -> None:
    log_event(
        db=db,
        actor=ctx.actor,
        action="EMPLOYEE_DELETED",
        entity_type="employee",
        entity_id=ctx.employee_id,
        metadata={"snapshot": ctx.snapshot, "removed": list(ctx.removed)},
    )


DELETION_STEPS: tuple[Callable[[Session, DeletionContext], None], ...] = (
    load_target,
    check_direct_reports,
    remove_contact,
    remove_salary,
    remove_employee,
    archive_snapshot,
    record_audit,
)


def delete_employee(db: Session, employee_id: int, *, actor: str | None = None) -> ArchivedEmployee:
    ctx = DeletionContext(employee_id=employee_id, actor=actor)

    try:
        with transaction(db):
            for step in DELETION_STEPS:
                try:
                    step(db, ctx)
                except SQLAlchemyError as exc:
                    raise IntegrityFailure(
                        f"Deleting employee {employee_id} failed at {step.__name__}: "
                        f"{exc.__class__.__name__}",
                        entity="employee",
                        field="id",
                        value=employee_id,
                    ) from exc
    except SQLAlchemyError as exc:
        logger.warning("Commit of employee %s deletion failed: %s", employee_id, exc)
        raise IntegrityFailure(
            f"Deleting employee {employee_id} failed on commit: {exc.__class__.__name__}",
            entity="employee",
            field="id",
            value=employee_id,
        ) from exc
    except DirectoryError as exc:
        logger.warning("Deletion of employee %s rolled back: %s", employee_id, exc.message)
        raise

    logger.info("Deleted and archived employee %s", employee_id)
    return ctx.archive
