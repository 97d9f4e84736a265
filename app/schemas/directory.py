from decimal import Decimal

from pydantic import BaseModel


class DirectoryRowOut(BaseModel):
    employee_id: int
    first_name: str
    last_name: str
    job_title: str
    department_id: int
    department_name: str
    manager_id: int | None
    manager_first_name: str | None
    salary: Decimal | None


class RankingRowOut(DirectoryRowOut):
    name: str
    contribution_pct: Decimal | None
    rank_in_department: int | None


class HierarchyLevelOut(BaseModel):
    employee_id: int
    name: str
    job_title: str
    level: int
