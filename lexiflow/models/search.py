"""검색 쿼리 기록 SQLAlchemy ORM 모델 정의.

Search query history ORM model — one row per query forwarded to the
external search provider.
"""

import uuid

from sqlalchemy import Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from lexiflow.database import Base, TimestampMixin


class SearchQuery(TimestampMixin, Base):
    __tablename__ = "search_queries"

    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    query_text: Mapped[str] = mapped_column(Text, nullable=False)
    # "semantic" | "hybrid"
    mode: Mapped[str] = mapped_column(String(20), nullable=False)
    result_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    execution_ms: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
