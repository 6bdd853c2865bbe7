"""관할 SQLAlchemy ORM 모델 정의.

Jurisdiction ORM model definition.
Jurisdictions are global reference data shared by every organization,
so the table has no organization_id column.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from lexiflow.database import Base, TimestampMixin


class Jurisdiction(TimestampMixin, Base):
    """관할 모델 — 법원/주/연방 관할 참조 데이터.

    Jurisdiction model — court system reference data.

    Attributes:
        name: 관할 이름 (e.g. "California")
        code: 고유 코드 (Unique short code, e.g. "US-CA")
        jurisdiction_type: "Federal" | "State" | "International" | "Local"
        parent_code: 상위 관할 코드 (Parent jurisdiction code, optional)
        court_level: 법원 심급 (Court level, optional)
    """

    __tablename__ = "jurisdictions"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    jurisdiction_type: Mapped[str] = mapped_column(String(20), nullable=False, default="State", index=True)
    parent_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    court_level: Mapped[str | None] = mapped_column(String(100), nullable=True)
