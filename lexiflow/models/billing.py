"""청구(타임 엔트리) SQLAlchemy ORM 모델 정의.

Billing ORM model definitions — time entries recorded against cases.
"""

import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexiflow.database import Base, TimestampMixin


class TimeEntry(TimestampMixin, Base):
    """타임 엔트리 모델 — 청구 가능한 작업 시간 기록.

    Time entry model — billable work recorded against a case.

    Attributes:
        entry_date: 작업 일자 (Date the work was performed)
        duration: 작업 시간(분) (Duration in minutes)
        rate: 시간당 요율 (Hourly rate)
        total: 청구 금액 (Billed amount, duration / 60 * rate unless overridden)
        status: "Unbilled" | "Billed"
    """

    __tablename__ = "time_entries"

    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)
    case_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("cases.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    entry_date: Mapped[date] = mapped_column(Date, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    rate: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    total: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Unbilled", index=True)

    case = relationship("Case", back_populates="time_entries")
