import pytest
from sqlalchemy import inspect, text

from app.core.errors import PolicyViolation
from app.core.guards import (
    check_schema_command,
    delete_department,
    is_department_delete,
    is_destructive_schema_command,
)
from app.db.base import Base
from app.models.department import Department
from tests.helpers import count


@pytest.mark.parametrize("department_id", [1, 4, 5, 999, -1])
def test_delete_department_always_violates_policy(directory, department_id):
    with pytest.raises(PolicyViolation) as exc_info:
        delete_department(department_id)

    assert exc_info.value.entity == "department"
    assert exc_info.value.value == department_id
    assert count(directory, Department) == 5


def test_orm_delete_of_department_is_blocked(directory):
    dept = directory.get(Department, 4)
    directory.delete(dept)

    with pytest.raises(PolicyViolation):
        directory.flush()
    directory.rollback()

    assert directory.get(Department, 4).name == "Marketing"


@pytest.mark.parametrize(
    "statement",
    [
        "DROP TABLE employees",
        "  drop table if exists salaries",
        "DROP INDEX ix_contacts_email",
        "TRUNCATE contacts",
        "ALTER TABLE employees DROP COLUMN job_title",
        "ALTER TABLE employees RENAME TO staff",
        "-- cleanup\nDROP TABLE archived_employees",
        "/* admin */ DROP VIEW directory",
    ],
)
def test_destructive_schema_commands_are_recognized(statement):
    assert is_destructive_schema_command(statement)
    with pytest.raises(PolicyViolation):
        check_schema_command(statement)


@pytest.mark.parametrize(
    "statement",
    [
        "SELECT * FROM drop_log",
        "CREATE TABLE notes (id INTEGER PRIMARY KEY)",
        "ALTER TABLE employees ADD COLUMN nickname VARCHAR(50)",
        "DELETE FROM employees WHERE id = 3",
        "INSERT INTO departments (id, name) VALUES (6, 'Legal')",
    ],
)
def test_other_statements_pass_the_gate(statement):
    assert not is_destructive_schema_command(statement)
    check_schema_command(statement)


def test_raw_department_delete_is_recognized():
    assert is_department_delete("DELETE FROM departments WHERE id = 4")
    assert is_department_delete('delete from "departments"')
    assert not is_department_delete("DELETE FROM departments_log")


def test_engine_refuses_drop_table(engine, directory):
    with engine.connect() as conn:
        with pytest.raises(PolicyViolation):
            conn.execute(text("DROP TABLE employees"))

    assert inspect(engine).has_table("employees")
    assert count(directory, Department) == 5


def test_engine_refuses_raw_department_delete(engine, directory):
    with engine.connect() as conn:
        with pytest.raises(PolicyViolation):
            conn.execute(text("DELETE FROM departments WHERE id = 4"))

    assert count(directory, Department) == 5


def test_metadata_drop_all_is_refused(engine):
    with pytest.raises(PolicyViolation):
        Base.metadata.drop_all(bind=engine)

    assert inspect(engine).has_table("departments")
