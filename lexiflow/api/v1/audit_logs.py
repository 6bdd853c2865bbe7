"""감사 로그 라우터.

Audit Log Router — append-only audit trail.

Permission Matrix (역할별 권한 설계):
    - 기록 생성: 인증된 모든 사용자 (Any authenticated user)
    - 목록/조회: Administrator + Senior Partner
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import PageParams, get_current_user, page_params, require_partner
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.audit import AuditLogCreate, AuditLogResponse
from lexiflow.services.audit_service import audit_service
from lexiflow.utils.pagination import Paginated

router: APIRouter = APIRouter()


@router.get("", response_model=Paginated[AuditLogResponse])
async def list_audit_logs(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(require_partner)],
    paging: Annotated[PageParams, Depends(page_params)],
    action: Annotated[str | None, Query(description="동작 필터")] = None,
    resource: Annotated[str | None, Query(description="대상 리소스 필터")] = None,
    user_id: Annotated[UUID | None, Query(description="사용자 ID 필터")] = None,
) -> Paginated[AuditLogResponse]:
    """감사 로그를 최신순으로 조회합니다 (List audit entries, newest first)."""
    filters: dict = {"action": action, "resource": resource, "user_id": user_id}
    return await audit_service.find_page(
        db, current_user.organization_id, paging.page, paging.limit, filters
    )


@router.get("/{entry_id}", response_model=AuditLogResponse)
async def get_audit_log(
    entry_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(require_partner)],
) -> AuditLogResponse:
    return await audit_service.find_one(db, entry_id, current_user.organization_id)


@router.post("", response_model=AuditLogResponse, status_code=201)
async def create_audit_log(
    data: AuditLogCreate,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> AuditLogResponse:
    """감사 로그를 기록합니다 — 사용자와 IP는 요청에서 취득.

    Record an audit entry. The actor and client IP come from the request.
    """
    extra: dict = {
        "user_id": current_user.id,
        "user_name": current_user.full_name,
        "ip": request.client.host if request.client else None,
    }
    result: AuditLogResponse = await audit_service.create(
        db, current_user.organization_id, data, extra=extra
    )
    await db.commit()
    return result
