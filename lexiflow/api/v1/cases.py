"""사건 라우터 — 사건 CRUD 및 통계 엔드포인트.

Case Router — CRUD and statistics endpoints for cases.
All endpoints are scoped to the caller's organization.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import PageParams, get_current_user, page_params
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.case import (
    CaseCreate,
    CaseDetailResponse,
    CaseResponse,
    CaseStatsResponse,
    CaseStatus,
    CaseUpdate,
    MatterType,
)
from lexiflow.services.case_service import case_service
from lexiflow.utils.pagination import Paginated

router: APIRouter = APIRouter()


@router.get("", response_model=Paginated[CaseResponse])
async def list_cases(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
    paging: Annotated[PageParams, Depends(page_params)],
    status: Annotated[CaseStatus | None, Query(description="사건 상태 필터")] = None,
    client_id: Annotated[UUID | None, Query(description="의뢰인 ID 필터")] = None,
    matter_type: Annotated[MatterType | None, Query(description="사건 유형 필터")] = None,
) -> Paginated[CaseResponse]:
    """사건 목록을 조회합니다 (List cases, newest first)."""
    filters: dict = {"status": status, "client_id": client_id, "matter_type": matter_type}
    return await case_service.find_page(
        db, current_user.organization_id, paging.page, paging.limit, filters
    )


@router.get("/stats", response_model=CaseStatsResponse)
async def case_stats(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> CaseStatsResponse:
    """상태별 사건 건수를 조회합니다 (Case counts per status)."""
    return await case_service.get_stats(db, current_user.organization_id)


@router.get("/{case_id}", response_model=CaseDetailResponse)
async def get_case(
    case_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> CaseDetailResponse:
    """사건 상세를 조회합니다.

    Retrieve a case with its documents, tasks, time entries and discovery
    requests.
    """
    return await case_service.find_one(db, case_id, current_user.organization_id)


@router.post("", response_model=CaseResponse, status_code=201)
async def create_case(
    data: CaseCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> CaseResponse:
    """새 사건을 생성합니다 — 생성자는 현재 사용자.

    Create a new case; the caller is recorded as its creator.
    """
    result: CaseResponse = await case_service.create(
        db, current_user.organization_id, data, extra={"created_by": current_user.id}
    )
    await db.commit()
    return result


@router.patch("/{case_id}", response_model=CaseResponse)
async def update_case(
    case_id: UUID,
    data: CaseUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> CaseResponse:
    """사건을 부분 수정합니다 (Partially update a case)."""
    result: CaseResponse = await case_service.update(
        db, case_id, current_user.organization_id, data
    )
    await db.commit()
    return result


@router.delete("/{case_id}", status_code=204)
async def delete_case(
    case_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> None:
    """사건을 삭제합니다 — 하위 문서/업무/타임 엔트리/디스커버리도 함께 삭제.

    Delete a case together with its documents, tasks, time entries and
    discovery requests.
    """
    await case_service.delete(db, case_id, current_user.organization_id)
    await db.commit()
