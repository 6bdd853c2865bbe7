"""사건 SQLAlchemy ORM 모델 정의.

Case (legal matter) ORM model definition.
A case is the hub entity: documents, tasks, time entries and discovery
requests all hang off it via case_id.
"""

import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexiflow.database import Base, TimestampMixin

# 사건 상태 값 — Case lifecycle statuses
CASE_STATUSES: tuple[str, ...] = ("Discovery", "Trial", "Settled", "Closed", "Appeal")


class Case(TimestampMixin, Base):
    """사건 모델 — 로펌이 수임한 법률 사건.

    Case model — a legal matter handled by the firm.

    Attributes:
        client_id: 의뢰인 FK (Linked client record, optional)
        created_by: 생성 사용자 FK (User who opened the case)
        title: 사건명 (e.g. "Smith v. Jones Corporation")
        client_name: 의뢰인 표시 이름 (Client display name)
        status: 사건 상태 — CASE_STATUSES (Lifecycle status)
        value: 사건 가액 (Monetary value at stake)
        docket_number: 법원 사건번호 (Court docket number)

    Relationships:
        client, documents, tasks, time_entries, discovery_requests
    """

    __tablename__ = "cases"

    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)
    client_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("clients.id", ondelete="SET NULL"), nullable=True, index=True)
    created_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    client_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    opposing_counsel: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Discovery", index=True)
    filing_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    value: Mapped[Decimal | None] = mapped_column(Numeric(15, 2), nullable=True)
    matter_type: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    jurisdiction: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    court: Mapped[str | None] = mapped_column(String(255), nullable=True)
    docket_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    billing_model: Mapped[str | None] = mapped_column(String(20), nullable=True)
    judge: Mapped[str | None] = mapped_column(String(255), nullable=True)

    client = relationship("Client", back_populates="cases")
    documents = relationship("Document", back_populates="case", cascade="all, delete-orphan")
    tasks = relationship("Task", back_populates="case", cascade="all, delete-orphan")
    time_entries = relationship("TimeEntry", back_populates="case", cascade="all, delete-orphan")
    discovery_requests = relationship("DiscoveryRequest", back_populates="case", cascade="all, delete-orphan")
