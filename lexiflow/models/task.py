"""업무 SQLAlchemy ORM 모델 정의.

Workflow task ORM model definition.
"""

import uuid
from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexiflow.database import Base, TimestampMixin


class Task(TimestampMixin, Base):
    """업무 모델 — 사건에 연결되거나 독립적인 할 일.

    Task model — a to-do item, optionally linked to a case.

    Attributes:
        status: "Pending" | "In Progress" | "Review" | "Done"
        priority: "High" | "Medium" | "Low"
        sla_warning: SLA 경고 플래그 (SLA warning flag)
        automated_trigger: 자동 생성 트리거 이름 (Name of the automation that created it)
    """

    __tablename__ = "tasks"

    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)
    case_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("cases.id", ondelete="CASCADE"), nullable=True, index=True)
    assignee_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Pending", index=True)
    priority: Mapped[str] = mapped_column(String(10), nullable=False, default="Medium")
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    sla_warning: Mapped[bool] = mapped_column(Boolean, default=False)
    automated_trigger: Mapped[str | None] = mapped_column(String(255), nullable=True)

    case = relationship("Case", back_populates="tasks")
    assignee = relationship("UserProfile", foreign_keys=[assignee_id])
