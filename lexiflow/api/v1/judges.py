"""판사 프로필 라우터.

Judge Profile Router — CRUD endpoints for judge analytics profiles.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import PageParams, get_current_user, page_params
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.profile import JudgeProfileCreate, JudgeProfileResponse, JudgeProfileUpdate
from lexiflow.services.profile_service import judge_service
from lexiflow.utils.pagination import Paginated

router: APIRouter = APIRouter()


@router.get("", response_model=Paginated[JudgeProfileResponse])
async def list_judges(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
    paging: Annotated[PageParams, Depends(page_params)],
    court: Annotated[str | None, Query(description="법원 필터")] = None,
) -> Paginated[JudgeProfileResponse]:
    return await judge_service.find_page(
        db, current_user.organization_id, paging.page, paging.limit, {"court": court}
    )


@router.get("/{judge_id}", response_model=JudgeProfileResponse)
async def get_judge(
    judge_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> JudgeProfileResponse:
    return await judge_service.find_one(db, judge_id, current_user.organization_id)


@router.post("", response_model=JudgeProfileResponse, status_code=201)
async def create_judge(
    data: JudgeProfileCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> JudgeProfileResponse:
    result: JudgeProfileResponse = await judge_service.create(db, current_user.organization_id, data)
    await db.commit()
    return result


@router.patch("/{judge_id}", response_model=JudgeProfileResponse)
async def update_judge(
    judge_id: UUID,
    data: JudgeProfileUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> JudgeProfileResponse:
    result: JudgeProfileResponse = await judge_service.update(
        db, judge_id, current_user.organization_id, data
    )
    await db.commit()
    return result


@router.delete("/{judge_id}", status_code=204)
async def delete_judge(
    judge_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> None:
    await judge_service.delete(db, judge_id, current_user.organization_id)
    await db.commit()
