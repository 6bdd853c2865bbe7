"""문서 서비스.

Document Service — CRUD over documents; the parent case must belong to the
caller's organization. Changing a document's title or content keeps the
superseded revision as a DocumentVersion and increments `version`.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.models.document import Document, DocumentVersion
from lexiflow.models.user import UserProfile
from lexiflow.repositories.case_repository import case_repository
from lexiflow.repositories.document_repository import document_repository
from lexiflow.schemas.document import DocumentResponse, DocumentUpdate, DocumentVersionResponse
from lexiflow.services.base import BaseCrudService
from lexiflow.utils.exceptions import NotFoundError

# 변경 시 스냅샷을 남기는 필드 — Fields whose change creates a revision
_VERSIONED_FIELDS: tuple[str, ...] = ("title", "content")


class DocumentService(BaseCrudService[Document, DocumentResponse]):
    def __init__(self) -> None:
        super().__init__(
            document_repository,
            DocumentResponse,
            resource_name="Document",
            references={"case_id": (case_repository, "Case")},
        )

    async def update(
        self,
        db: AsyncSession,
        record_id: UUID,
        organization_id: UUID,
        data: DocumentUpdate,
        editor: UserProfile | None = None,
    ) -> DocumentResponse:
        """문서를 수정하고, 제목/본문이 바뀌면 이전 판을 이력에 남깁니다.

        Update a document. When the title or content changes, the previous
        revision is snapshotted and the version number is incremented.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 문서 ID (Document UUID)
            organization_id: 조직 ID (Organization UUID)
            data: 수정 데이터 (Update data)
            editor: 변경한 사용자 (User making the change)

        Raises:
            NotFoundError: 문서를 찾을 수 없을 때 (Document not found)
        """
        current: Document = await self.get_model(db, record_id, organization_id)
        payload: dict[str, Any] = self._drop_null_required(data.model_dump(exclude_unset=True))
        await self._check_references(db, organization_id, payload)

        changed: bool = any(
            field in payload and payload[field] != getattr(current, field)
            for field in _VERSIONED_FIELDS
        )
        if changed:
            await document_repository.add_version(
                db,
                current,
                changed_by=editor.id if editor is not None else None,
                author=editor.full_name if editor is not None else None,
            )
            payload["version"] = current.version + 1

        document: Document | None = await document_repository.update(db, record_id, payload, organization_id)
        if document is None:
            raise self._not_found()
        return self._to_response(document)

    async def list_versions(
        self,
        db: AsyncSession,
        record_id: UUID,
        organization_id: UUID,
    ) -> list[DocumentVersionResponse]:
        """문서 버전 이력을 최신순으로 조회합니다 (Revision history, newest first)."""
        await self.get_model(db, record_id, organization_id)
        versions = await document_repository.get_versions(db, record_id)
        return [DocumentVersionResponse.model_validate(v) for v in versions]

    async def get_version(
        self,
        db: AsyncSession,
        record_id: UUID,
        version_id: UUID,
        organization_id: UUID,
    ) -> DocumentVersionResponse:
        """특정 버전 스냅샷을 조회합니다.

        Raises:
            NotFoundError: 문서 또는 버전을 찾을 수 없을 때 (Document or version not found)
        """
        await self.get_model(db, record_id, organization_id)
        version: DocumentVersion | None = await document_repository.get_version(db, record_id, version_id)
        if version is None:
            raise NotFoundError("Document version not found")
        return DocumentVersionResponse.model_validate(version)


document_service: DocumentService = DocumentService()
