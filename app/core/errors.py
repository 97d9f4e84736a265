"""
Typed errors raised by the directory engine.

Every error carries a machine-readable ``code`` and the entity / field /
value it is about, so callers can act on it without parsing the message.
None of them are retried internally: they are business-rule or integrity
violations, not transient faults.

    DirectoryError
    +-- ValidationError      rejected insertion (duplicate name, bad reference)
    +-- PolicyViolation      department deletion, destructive schema command
    +-- IntegrityFailure     store error during a mutation, rolled back
    +-- ArchiveConflict      employee id already archived, deletion rolled back
    +-- CycleDetected        manager chain revisits an employee
    +-- EmployeeNotFound     unknown employee id
"""
from typing import Any


class DirectoryError(Exception):
    code: str = "DIRECTORY_ERROR"

    def __init__(
        self,
        message: str,
        *,
        entity: str | None = None,
        field: str | None = None,
        value: Any = None,
    ):
        self.message = message
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "entity": self.entity,
            "field": self.field,
            "value": self.value,
        }


class ValidationError(DirectoryError):
    code: str = "VALIDATION_ERROR"


class PolicyViolation(DirectoryError):
    code: str = "POLICY_VIOLATION"


class IntegrityFailure(DirectoryError):
    code: str = "INTEGRITY_FAILURE"


class ArchiveConflict(DirectoryError):
    code: str = "ARCHIVE_CONFLICT"

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(
            f"Employee {employee_id} is already archived",
            entity="archived_employee",
            field="employee_id",
            value=employee_id,
        )


class CycleDetected(DirectoryError):
    code: str = "CYCLE_DETECTED"

    def __init__(self, start_id: int, chain: list[int], message: str | None = None):
        self.start_id = start_id
        self.chain = chain
        super().__init__(
            message or f"Manager chain of employee {start_id} revisits an employee: {chain}",
            entity="employee",
            field="manager_id",
            value=chain,
        )


class EmployeeNotFound(DirectoryError):
    code: str = "EMPLOYEE_NOT_FOUND"

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(
            f"Employee {employee_id} not found",
            entity="employee",
            field="id",
            value=employee_id,
        )
