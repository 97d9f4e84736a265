from decimal import Decimal

from sqlalchemy import Integer, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class SalaryRecord(Base):
    __tablename__ = "salaries"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_salaries_amount_non_negative"),
    )

    # One salary per employee
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id", ondelete="RESTRICT"), primary_key=True
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
