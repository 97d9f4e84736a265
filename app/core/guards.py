"""
Unconditional guard policies.

Two absolute rules, neither with exceptions or partial checks:

  * departments are never deleted through the directory engine;
  * destructive schema commands (DROP, TRUNCATE, ALTER ... DROP/RENAME) are
    never applied to the store.

The decisions are plain predicates so the mutation pipeline can consult them
before touching the store. ``install_schema_guard`` additionally hooks the
gate into an engine, so every statement reaching the database passes through
it, whichever layer issued it.
"""
import logging
import re

from sqlalchemy import event
from sqlalchemy.engine import Engine

from app.core.errors import PolicyViolation

logger = logging.getLogger(__name__)

_LEADING_COMMENTS = re.compile(r"^(\s*(--[^\n]*\n|/\*.*?\*/))*\s*", re.DOTALL)

_DESTRUCTIVE_SCHEMA = re.compile(
    r"""^(
        DROP\s+\w+
      | TRUNCATE\b
      | ALTER\s+TABLE\s+\S+\s+(DROP|RENAME)\b
    )""",
    re.IGNORECASE | re.VERBOSE,
)

_DEPARTMENT_DELETE = re.compile(
    r"""^DELETE\s+FROM\s+["`\[]?departments["`\]]?(\s|$)""",
    re.IGNORECASE,
)


def _normalize(statement: str) -> str:
    return _LEADING_COMMENTS.sub("", statement, count=1)


def is_destructive_schema_command(statement: str) -> bool:
    return bool(_DESTRUCTIVE_SCHEMA.match(_normalize(statement)))


def is_department_delete(statement: str) -> bool:
    return bool(_DEPARTMENT_DELETE.match(_normalize(statement)))


def delete_department(department_id) -> None:
    """Department deletion is never allowed, whether or not the department exists."""
    logger.info("Blocked deletion of department %s", department_id)
    raise PolicyViolation(
        f"Departments cannot be deleted (department {department_id})",
        entity="department",
        field="id",
        value=department_id,
    )


def check_schema_command(statement: str) -> None:
    """
    Gate evaluated before any statement is applied to the store.
    Returns quietly when the statement is accepted.
    """
    if is_destructive_schema_command(statement):
        logger.info("Blocked destructive schema command: %s", statement.strip()[:200])
        raise PolicyViolation(
            "Destructive schema commands are not allowed",
            entity="schema",
            field="statement",
            value=statement.strip()[:200],
        )
    if is_department_delete(statement):
        logger.info("Blocked department delete statement: %s", statement.strip()[:200])
        raise PolicyViolation(
            "Departments cannot be deleted",
            entity="department",
            field="statement",
            value=statement.strip()[:200],
        )


def install_schema_guard(engine: Engine) -> None:
    if event.contains(engine, "before_cursor_execute", _gate):
        return
    event.listen(engine, "before_cursor_execute", _gate, retval=True)


def _gate(conn, cursor, statement, parameters, context, executemany):
    check_schema_command(statement)
    return statement, parameters
