"""분석 이벤트 SQLAlchemy ORM 모델 정의.

Analytics event ORM model — rows flushed in batches by the frontend
analytics buffer.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from lexiflow.database import Base, JSONType, TimestampMixin, utcnow


class AnalyticsEvent(TimestampMixin, Base):
    __tablename__ = "analytics_events"

    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    properties: Mapped[dict] = mapped_column(JSONType, default=dict)
    # 클라이언트 발생 시각 — Client-side event time (defaults to receipt time)
    occurred_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
