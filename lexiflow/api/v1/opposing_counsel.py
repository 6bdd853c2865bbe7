"""상대방 변호인 프로필 라우터.

Opposing Counsel Router — CRUD endpoints for opposing counsel profiles.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import PageParams, get_current_user, page_params
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.profile import (
    OpposingCounselProfileCreate,
    OpposingCounselProfileResponse,
    OpposingCounselProfileUpdate,
)
from lexiflow.services.profile_service import opposing_counsel_service
from lexiflow.utils.pagination import Paginated

router: APIRouter = APIRouter()


@router.get("", response_model=Paginated[OpposingCounselProfileResponse])
async def list_opposing_counsel(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
    paging: Annotated[PageParams, Depends(page_params)],
    firm: Annotated[str | None, Query(description="로펌 필터")] = None,
) -> Paginated[OpposingCounselProfileResponse]:
    return await opposing_counsel_service.find_page(
        db, current_user.organization_id, paging.page, paging.limit, {"firm": firm}
    )


@router.get("/{profile_id}", response_model=OpposingCounselProfileResponse)
async def get_opposing_counsel(
    profile_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> OpposingCounselProfileResponse:
    return await opposing_counsel_service.find_one(db, profile_id, current_user.organization_id)


@router.post("", response_model=OpposingCounselProfileResponse, status_code=201)
async def create_opposing_counsel(
    data: OpposingCounselProfileCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> OpposingCounselProfileResponse:
    result: OpposingCounselProfileResponse = await opposing_counsel_service.create(
        db, current_user.organization_id, data
    )
    await db.commit()
    return result


@router.patch("/{profile_id}", response_model=OpposingCounselProfileResponse)
async def update_opposing_counsel(
    profile_id: UUID,
    data: OpposingCounselProfileUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> OpposingCounselProfileResponse:
    result: OpposingCounselProfileResponse = await opposing_counsel_service.update(
        db, profile_id, current_user.organization_id, data
    )
    await db.commit()
    return result


@router.delete("/{profile_id}", status_code=204)
async def delete_opposing_counsel(
    profile_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> None:
    await opposing_counsel_service.delete(db, profile_id, current_user.organization_id)
    await db.commit()
