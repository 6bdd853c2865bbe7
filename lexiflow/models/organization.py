"""조직(테넌트) SQLAlchemy ORM 모델 정의.

Organization (tenant) ORM model definition.
Every practice-owned row is scoped under an organization for multi-tenant
isolation.

Tables:
    - organizations: 최상위 테넌트 (Top-level tenant, i.e. a law firm)
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexiflow.database import Base, TimestampMixin


class Organization(TimestampMixin, Base):
    """조직(로펌) 모델 — 시스템의 최상위 엔티티.

    Organization (law firm) model — top-level tenant entity.

    Attributes:
        name: 조직 이름 (Firm name)
        domain: 이메일 도메인 (Firm email domain, optional)
        is_active: 활성 상태 (Active status flag)

    Relationships:
        users: 조직 내 사용자 목록 (Users of this firm, cascade delete)
    """

    __tablename__ = "organizations"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 이메일 도메인 — e.g. "smithlaw.com"
    domain: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    users = relationship("UserProfile", back_populates="organization", cascade="all, delete-orphan")
