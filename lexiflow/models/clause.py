"""조항 라이브러리 SQLAlchemy ORM 모델 정의.

Clause library ORM model definitions.

Tables:
    - clauses: 재사용 가능한 계약 조항 (Reusable contract clauses)
    - clause_versions: 조항 본문 변경 이력 (Prior content snapshots)
"""

import uuid

from sqlalchemy import ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexiflow.database import Base, TimestampMixin


class Clause(TimestampMixin, Base):
    """조항 모델.

    Clause model. `version` starts at 1 and is incremented each time the
    content changes; the superseded content is kept in ClauseVersion.
    """

    __tablename__ = "clauses"

    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    usage_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 위험 등급 — "Low" | "Medium" | "High"
    risk_rating: Mapped[str] = mapped_column(String(10), nullable=False, default="Low")

    versions = relationship(
        "ClauseVersion",
        back_populates="clause",
        cascade="all, delete-orphan",
        order_by="ClauseVersion.version.desc()",
    )


class ClauseVersion(TimestampMixin, Base):
    """조항 버전 모델 — 이전 본문 스냅샷.

    Clause version model — snapshot of a clause's content before an edit.
    """

    __tablename__ = "clause_versions"

    clause_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("clauses.id", ondelete="CASCADE"), nullable=False, index=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str | None] = mapped_column(String(255), nullable=True)

    clause = relationship("Clause", back_populates="versions")
