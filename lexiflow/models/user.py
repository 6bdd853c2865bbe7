"""사용자 프로필 SQLAlchemy ORM 모델 정의.

User profile ORM model definition.
Roles are a fixed set of practice roles mapped to authority levels;
a lower level means higher authority.
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexiflow.database import Base, TimestampMixin

# 역할 → 권한 레벨 매핑 (Role name → authority level, 1 is highest)
ROLE_LEVELS: dict[str, int] = {
    "Administrator": 1,
    "Senior Partner": 2,
    "Associate": 3,
    "Paralegal": 4,
}


class UserProfile(TimestampMixin, Base):
    """사용자 프로필 모델 — 로펌 구성원.

    User profile model — a member of a firm who can sign in.

    Attributes:
        organization_id: 소속 조직 FK (Parent organization)
        email: 로그인 이메일, 전역 고유 (Login email, globally unique)
        full_name: 표시 이름 (Display name)
        role: 역할 이름 — ROLE_LEVELS 키 (Role name, a ROLE_LEVELS key)
        office: 근무 사무소 (Office location, optional)
        password_hash: bcrypt 해시 (Bcrypt password hash)
        is_active: 활성 상태 (Active flag; inactive users cannot authenticate)
        last_login_at: 마지막 로그인 시각 (Last successful login)
    """

    __tablename__ = "users"

    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False, default="Associate")
    office: Mapped[str | None] = mapped_column(String(255), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    organization = relationship("Organization", back_populates="users")

    @property
    def level(self) -> int:
        """권한 레벨 — 알 수 없는 역할은 최저 권한 (Unknown roles get the lowest authority)."""
        return ROLE_LEVELS.get(self.role, max(ROLE_LEVELS.values()))
