"""문서 SQLAlchemy ORM 모델 정의.

Legal document ORM model definitions.

Tables:
    - documents: 사건 첨부 법률 문서 (Legal documents filed under cases)
    - document_versions: 문서 변경 이력 (Prior title/content snapshots)
"""

import uuid

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexiflow.database import Base, JSONType, TimestampMixin


class Document(TimestampMixin, Base):
    """문서 모델 — 사건에 첨부된 법률 문서.

    Document model — a legal document filed under a case.

    Attributes:
        case_id: 소속 사건 FK (Parent case)
        uploaded_by: 업로드 사용자 FK (Uploader, optional)
        doc_type: 문서 유형 (e.g. "Motion", "Contract")
        tags: 태그 목록 JSON (List of tag strings)
        source_module: "Evidence" | "Discovery" | "Billing" | "General"
        status: "Draft" | "Final" | "Signed" | "Pending OCR"
    """

    __tablename__ = "documents"

    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)
    case_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("cases.id", ondelete="CASCADE"), nullable=False, index=True)
    uploaded_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    doc_type: Mapped[str] = mapped_column(String(100), nullable=False, default="General")
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    risk_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    tags: Mapped[list] = mapped_column(JSONType, default=list)
    source_module: Mapped[str] = mapped_column(String(20), nullable=False, default="General")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Draft", index=True)
    is_encrypted: Mapped[bool] = mapped_column(Boolean, default=False)
    shared_with_client: Mapped[bool] = mapped_column(Boolean, default=False)
    file_size: Mapped[str | None] = mapped_column(String(50), nullable=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    case = relationship("Case", back_populates="documents")
    versions = relationship(
        "DocumentVersion",
        back_populates="document",
        cascade="all, delete-orphan",
        order_by="DocumentVersion.version.desc()",
    )


class DocumentVersion(TimestampMixin, Base):
    """문서 버전 모델 — 제목/본문 변경 직전의 스냅샷.

    Document version model — snapshot of a document taken before its title
    or content was changed.

    Attributes:
        version: 스냅샷 당시의 버전 번호 (Version number being superseded)
        changed_by: 변경한 사용자 FK (Editor, optional)
        author: 변경자 표시 이름 (Editor display name)
    """

    __tablename__ = "document_versions"

    document_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("documents.id", ondelete="CASCADE"), nullable=False, index=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    changed_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    author: Mapped[str | None] = mapped_column(String(255), nullable=True)

    document = relationship("Document", back_populates="versions")
