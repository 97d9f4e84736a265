from sqlalchemy import Integer, String, event
from sqlalchemy.orm import Mapped, mapped_column

from app.core.guards import delete_department
from app.db.base import Base


class Department(Base):
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)


@event.listens_for(Department, "before_delete")
def prevent_department_delete(mapper, connection, target):
    delete_department(target.id)
