"""의뢰인 SQLAlchemy ORM 모델 정의.

Client ORM model definition.
"""

import uuid
from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexiflow.database import Base, TimestampMixin


class Client(TimestampMixin, Base):
    """의뢰인 모델 — 개인 또는 법인 고객.

    Client model — an individual or corporate client of the firm.

    Attributes:
        name: 의뢰인 이름 (Client name)
        industry: 산업군 (Industry)
        status: "Active" | "Prospect" | "Former"
        total_billed: 누적 청구액 (Lifetime billed amount)
        risk_score: 위험 점수 0~100 (Risk score, optional)
    """

    __tablename__ = "clients"

    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    industry: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Active", index=True)
    total_billed: Mapped[Decimal] = mapped_column(Numeric(15, 2), default=Decimal("0"))
    risk_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    contact_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)

    cases = relationship("Case", back_populates="client")
