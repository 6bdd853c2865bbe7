"""문서 레포지토리.

Document Repository — CRUD over documents plus their revision history.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.models.document import Document, DocumentVersion
from lexiflow.repositories.base import BaseRepository


class DocumentRepository(BaseRepository[Document]):
    def __init__(self) -> None:
        super().__init__(Document)

    async def add_version(
        self,
        db: AsyncSession,
        document: Document,
        changed_by: UUID | None,
        author: str | None,
    ) -> DocumentVersion:
        """변경 직전의 제목/본문을 스냅샷으로 저장합니다.

        Snapshot the document's current title and content before an edit.
        """
        snapshot = DocumentVersion(
            document_id=document.id,
            version=document.version,
            title=document.title,
            content=document.content,
            changed_by=changed_by,
            author=author,
        )
        db.add(snapshot)
        await db.flush()
        return snapshot

    async def get_versions(
        self,
        db: AsyncSession,
        document_id: UUID,
    ) -> Sequence[DocumentVersion]:
        """문서 버전 이력 — 최신순 (Revision history, newest first)."""
        query: Select = (
            select(DocumentVersion)
            .where(DocumentVersion.document_id == document_id)
            .order_by(DocumentVersion.version.desc())
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def get_version(
        self,
        db: AsyncSession,
        document_id: UUID,
        version_id: UUID,
    ) -> DocumentVersion | None:
        query: Select = select(DocumentVersion).where(
            DocumentVersion.id == version_id,
            DocumentVersion.document_id == document_id,
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


document_repository: DocumentRepository = DocumentRepository()
