from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class ArchivedEmployee(Base):
    """Snapshot of an employee taken when it is deleted. Never updated or removed."""

    __tablename__ = "archived_employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Not a foreign key: the employee row is gone by the time this is written
    employee_id: Mapped[int] = mapped_column(Integer, unique=True, index=True, nullable=False)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    job_title: Mapped[str] = mapped_column(String(150), nullable=False)
    department_id: Mapped[int] = mapped_column(Integer, nullable=False)
    manager_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    archived_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=datetime.utcnow
    )
