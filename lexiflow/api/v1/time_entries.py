"""타임 엔트리 라우터 — 청구 시간 CRUD 및 AI 설명 정제.

Time Entry Router — billable time CRUD plus AI refinement of the
narrative.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import PageParams, get_current_user, page_params
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.ai import RefineResponse
from lexiflow.schemas.billing import (
    TimeEntryCreate,
    TimeEntryResponse,
    TimeEntryStatus,
    TimeEntryUpdate,
)
from lexiflow.services.time_entry_service import time_entry_service
from lexiflow.utils.pagination import Paginated

router: APIRouter = APIRouter()


@router.get("", response_model=Paginated[TimeEntryResponse])
async def list_time_entries(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
    paging: Annotated[PageParams, Depends(page_params)],
    case_id: Annotated[UUID | None, Query(description="사건 ID 필터")] = None,
    user_id: Annotated[UUID | None, Query(description="작성자 ID 필터")] = None,
    status: Annotated[TimeEntryStatus | None, Query(description="청구 상태 필터")] = None,
) -> Paginated[TimeEntryResponse]:
    """타임 엔트리 목록을 조회합니다 (List time entries, latest work date first)."""
    filters: dict = {"case_id": case_id, "user_id": user_id, "status": status}
    return await time_entry_service.find_page(
        db, current_user.organization_id, paging.page, paging.limit, filters
    )


@router.get("/{entry_id}", response_model=TimeEntryResponse)
async def get_time_entry(
    entry_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> TimeEntryResponse:
    return await time_entry_service.find_one(db, entry_id, current_user.organization_id)


@router.post("", response_model=TimeEntryResponse, status_code=201)
async def create_time_entry(
    data: TimeEntryCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> TimeEntryResponse:
    """타임 엔트리를 기록합니다 — 작성자는 현재 사용자.

    Record billable time for the caller. `total` defaults to
    duration / 60 * rate.
    """
    result: TimeEntryResponse = await time_entry_service.create(
        db, current_user.organization_id, data, extra={"user_id": current_user.id}
    )
    await db.commit()
    return result


@router.patch("/{entry_id}", response_model=TimeEntryResponse)
async def update_time_entry(
    entry_id: UUID,
    data: TimeEntryUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> TimeEntryResponse:
    result: TimeEntryResponse = await time_entry_service.update(
        db, entry_id, current_user.organization_id, data
    )
    await db.commit()
    return result


@router.post("/{entry_id}/refine", response_model=RefineResponse)
async def refine_time_entry(
    entry_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> RefineResponse:
    """작업 설명을 AI로 다듬어 저장합니다.

    Rewrite the entry's narrative with AI and save it. When AI is
    unavailable the entry is left unchanged and the original is returned.
    """
    result: RefineResponse = await time_entry_service.refine_description(
        db, entry_id, current_user.organization_id
    )
    await db.commit()
    return result


@router.delete("/{entry_id}", status_code=204)
async def delete_time_entry(
    entry_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> None:
    await time_entry_service.delete(db, entry_id, current_user.organization_id)
    await db.commit()
