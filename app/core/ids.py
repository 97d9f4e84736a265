"""
Employee identifier allocation via a locked counter row.

Reading ``max(id) + 1`` and then inserting races under concurrent
insertions. The counter row is locked (``SELECT ... FOR UPDATE``) and
incremented inside the caller's transaction instead, so two transactions can
never be handed the same id, and a rollback returns the value.
"""
import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.employee import Employee
from app.models.id_counter import IdCounter

logger = logging.getLogger(__name__)

EMPLOYEE = "employee"


def get_max_id(db: Session, model=Employee) -> int:
    return db.execute(select(func.max(model.id))).scalar() or 0


def allocate_employee_id(db: Session) -> int:
    """
    Return the next employee id. Must be called inside a transaction; the
    counter row stays locked until that transaction ends.

    The next id is one past both the counter and the highest existing
    employee id, so ids continue past rows written without the allocator,
    such as an imported or seeded directory. Ids of deleted employees are
    never handed out again.
    """
    counter = db.execute(
        select(IdCounter)
        .where(IdCounter.name == EMPLOYEE)
        .with_for_update()
        .execution_options(populate_existing=True)
    ).scalar_one_or_none()

    if counter is None:
        counter = IdCounter(name=EMPLOYEE, current_value=get_max_id(db, Employee))
        db.add(counter)

    counter.current_value = max(counter.current_value, get_max_id(db, Employee)) + 1
    db.flush()
    logger.debug("Allocated employee id %s", counter.current_value)
    return counter.current_value
