from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class EmployeeCreate(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    phone: str = Field(min_length=1, max_length=30)
    job_title: str = Field(min_length=1, max_length=150)
    department_id: int = Field(ge=1)
    manager_id: int | None = Field(default=None, ge=1)
    salary: Decimal = Field(ge=0, max_digits=12, decimal_places=2)


class EmployeeOut(BaseModel):
    id: int
    first_name: str
    last_name: str
    job_title: str
    department_id: int
    manager_id: int | None
    phone: str | None
    email: str | None
    salary: Decimal | None


class ArchivedEmployeeOut(BaseModel):
    employee_id: int
    first_name: str
    last_name: str
    job_title: str
    department_id: int
    manager_id: int | None
    archived_at: datetime
