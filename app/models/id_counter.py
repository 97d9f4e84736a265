from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class IdCounter(Base):
    __tablename__ = "id_counters"

    name: Mapped[str] = mapped_column(String(50), primary_key=True)  # employee
    current_value: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
