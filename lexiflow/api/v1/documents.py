"""문서 라우터.

Document Router — CRUD endpoints for case documents.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import PageParams, get_current_user, page_params
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.document import (
    DocumentCreate,
    DocumentResponse,
    DocumentStatus,
    DocumentUpdate,
    DocumentVersionResponse,
    SourceModule,
)
from lexiflow.services.document_service import document_service
from lexiflow.utils.pagination import Paginated

router: APIRouter = APIRouter()


@router.get("", response_model=Paginated[DocumentResponse])
async def list_documents(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
    paging: Annotated[PageParams, Depends(page_params)],
    case_id: Annotated[UUID | None, Query(description="사건 ID 필터")] = None,
    doc_type: Annotated[str | None, Query(description="문서 유형 필터")] = None,
    status: Annotated[DocumentStatus | None, Query(description="문서 상태 필터")] = None,
    source_module: Annotated[SourceModule | None, Query(description="출처 모듈 필터")] = None,
) -> Paginated[DocumentResponse]:
    """문서 목록을 조회합니다 (List documents, newest first)."""
    filters: dict = {
        "case_id": case_id,
        "doc_type": doc_type,
        "status": status,
        "source_module": source_module,
    }
    return await document_service.find_page(
        db, current_user.organization_id, paging.page, paging.limit, filters
    )


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> DocumentResponse:
    return await document_service.find_one(db, document_id, current_user.organization_id)


@router.get("/{document_id}/versions", response_model=list[DocumentVersionResponse])
async def list_document_versions(
    document_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> list[DocumentVersionResponse]:
    """문서 버전 이력 — 최신순.

    List the superseded revisions of a document, newest first.
    """
    return await document_service.list_versions(db, document_id, current_user.organization_id)


@router.get("/{document_id}/versions/{version_id}", response_model=DocumentVersionResponse)
async def get_document_version(
    document_id: UUID,
    version_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> DocumentVersionResponse:
    return await document_service.get_version(
        db, document_id, version_id, current_user.organization_id
    )


@router.post("", response_model=DocumentResponse, status_code=201)
async def create_document(
    data: DocumentCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> DocumentResponse:
    """문서를 등록합니다 — 업로더는 현재 사용자.

    Register a document on a case; the caller is recorded as uploader.
    """
    result: DocumentResponse = await document_service.create(
        db, current_user.organization_id, data, extra={"uploaded_by": current_user.id}
    )
    await db.commit()
    return result


@router.patch("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: UUID,
    data: DocumentUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> DocumentResponse:
    result: DocumentResponse = await document_service.update(
        db, document_id, current_user.organization_id, data, editor=current_user
    )
    await db.commit()
    return result


@router.delete("/{document_id}", status_code=204)
async def delete_document(
    document_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> None:
    await document_service.delete(db, document_id, current_user.organization_id)
    await db.commit()
