"""감사 로그 SQLAlchemy ORM 모델 정의.

Audit log ORM model definition.
"""

import uuid

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from lexiflow.database import Base, TimestampMixin


class AuditLogEntry(TimestampMixin, Base):
    """감사 로그 항목 모델 — created_at이 이벤트 시각.

    Audit log entry model; created_at is the event timestamp.

    Attributes:
        user_id: 행위자 FK (Acting user, optional)
        user_name: 행위자 표시 이름 (Actor display name at the time of the event)
        action: 행위 (e.g. "case.update")
        resource: 대상 리소스 (e.g. "cases/<id>")
        ip: 요청 IP 주소 (Client IP address)
    """

    __tablename__ = "audit_log_entries"

    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    user_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    action: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    resource: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    ip: Mapped[str | None] = mapped_column(String(64), nullable=True)
