"""
Chain-of-command resolution.

The chain is read with one recursive query that climbs the manager relation
from the starting employee, one level per step, and stops after
``max_depth`` levels. The rows are then walked in level order, tracking the
ids already seen: meeting an id twice, or running out of depth before reaching an
employee without a manager, is reported as CycleDetected instead of looping.
"""
import logging
from dataclasses import dataclass

from sqlalchemy import Integer, literal_column, select
from sqlalchemy.orm import Session, aliased

from app.core.config import settings
from app.core.errors import CycleDetected, EmployeeNotFound
from app.models.employee import Employee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HierarchyLevel:
    employee_id: int
    name: str
    job_title: str
    level: int


def chain_rows(db: Session, employee_id: int, max_depth: int):
    seed = (
        select(
            Employee.id.label("employee_id"),
            Employee.first_name,
            Employee.last_name,
            Employee.job_title,
            Employee.manager_id,
            literal_column("1", Integer).label("level"),
        )
        .where(Employee.id == employee_id)
        .cte("chain", recursive=True)
    )

    manager = aliased(Employee, name="manager")
    step = (
        select(
            manager.id,
            manager.first_name,
            manager.last_name,
            manager.job_title,
            manager.manager_id,
            (seed.c.level + 1).label("level"),
        )
        .join(seed, manager.id == seed.c.manager_id)
        .where(seed.c.level < max_depth)
    )

    chain = seed.union_all(step)
    return db.execute(select(chain).order_by(chain.c.level)).all()


def resolve_hierarchy(
    db: Session,
    employee_id: int,
    *,
    max_depth: int | None = None,
) -> list[HierarchyLevel]:
    """
    Ordered (name, level) chain from ``employee_id`` (level 1) up to the
    organizational root (last element).
    """
    max_depth = max_depth or settings.HIERARCHY_MAX_DEPTH
    rows = chain_rows(db, employee_id, max_depth)
    if not rows:
        raise EmployeeNotFound(employee_id)

    seen: list[int] = []
    levels: list[HierarchyLevel] = []
    for row in rows:
        if row.employee_id in seen:
            logger.warning("Cycle in manager chain of employee %s: %s", employee_id, seen)
            raise CycleDetected(employee_id, seen + [row.employee_id])
        seen.append(row.employee_id)
        levels.append(
            HierarchyLevel(
                employee_id=row.employee_id,
                name=f"{row.first_name} {row.last_name}",
                job_title=row.job_title,
                level=row.level,
            )
        )

    top = rows[-1]
    if top.manager_id is not None:
        # Either the chain is deeper than max_depth, or the manager row is missing
        if len(rows) >= max_depth:
            logger.warning("Manager chain of employee %s exceeds %s levels", employee_id, max_depth)
            raise CycleDetected(
                employee_id,
                seen,
                f"Manager chain of employee {employee_id} exceeds {max_depth} levels",
            )

    return levels
