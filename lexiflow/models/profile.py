"""판사/상대방 변호인 프로필 SQLAlchemy ORM 모델 정의.

Judge and opposing-counsel analytics profile ORM models.
Rates are stored as percentages (0~100).
"""

import uuid

from sqlalchemy import Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from lexiflow.database import Base, JSONType, TimestampMixin


class JudgeProfile(TimestampMixin, Base):
    """판사 프로필 모델.

    Judge profile model with motion grant rates and tendencies.
    """

    __tablename__ = "judge_profiles"

    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    court: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    grant_rate_dismiss: Mapped[float | None] = mapped_column(Float, nullable=True)
    grant_rate_summary: Mapped[float | None] = mapped_column(Float, nullable=True)
    # 평균 사건 기간(일) — Average case duration in days
    avg_case_duration: Mapped[int | None] = mapped_column(Integer, nullable=True)
    tendencies: Mapped[list] = mapped_column(JSONType, default=list)


class OpposingCounselProfile(TimestampMixin, Base):
    """상대방 변호인 프로필 모델.

    Opposing counsel profile model with settlement/trial tendencies.
    """

    __tablename__ = "opposing_counsel_profiles"

    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    firm: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    settlement_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    trial_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    # 기대 대비 합의금 편차(%) — Settlement variance vs. expected, in percent
    avg_settlement_variance: Mapped[float | None] = mapped_column(Float, nullable=True)
