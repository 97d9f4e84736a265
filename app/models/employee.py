from sqlalchemy import Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Employee(Base):
    __tablename__ = "employees"
    __table_args__ = (
        UniqueConstraint("first_name", "last_name", name="uq_employees_full_name"),
    )

    # Issued by app.core.ids, never by the database
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    job_title: Mapped[str] = mapped_column(String(150), nullable=False)

    department_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("departments.id", ondelete="RESTRICT"), index=True, nullable=False
    )

    # NULL marks the organizational root
    manager_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("employees.id", ondelete="RESTRICT"), index=True, nullable=True
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
