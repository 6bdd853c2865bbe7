"""디스커버리 요청 SQLAlchemy ORM 모델 정의.

Discovery request ORM model definition.
"""

import uuid
from datetime import date

from sqlalchemy import Date, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexiflow.database import Base, TimestampMixin


class DiscoveryRequest(TimestampMixin, Base):
    """디스커버리 요청 모델 — 증거개시 절차의 개별 요청.

    Discovery request model — one production request, interrogatory,
    request for admission or deposition notice within a case.

    Attributes:
        request_type: "Production" | "Interrogatory" | "Admission" | "Deposition"
        propounding_party: 요청 당사자 (Party that served the request)
        responding_party: 응답 당사자 (Party that must answer)
        status: "Draft" | "Served" | "Responded" | "Overdue" | "Closed"
    """

    __tablename__ = "discovery_requests"

    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)
    case_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("cases.id", ondelete="CASCADE"), nullable=False, index=True)
    request_type: Mapped[str] = mapped_column(String(20), nullable=False)
    propounding_party: Mapped[str] = mapped_column(String(255), nullable=False)
    responding_party: Mapped[str] = mapped_column(String(255), nullable=False)
    service_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Draft", index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    response_preview: Mapped[str | None] = mapped_column(Text, nullable=True)

    case = relationship("Case", back_populates="discovery_requests")
