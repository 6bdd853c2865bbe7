"""조항 라이브러리 라우터 — 조항 CRUD 및 버전 이력.

Clause Router — CRUD endpoints for the clause library plus version history.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import PageParams, get_current_user, page_params
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.clause import (
    ClauseCreate,
    ClauseResponse,
    ClauseUpdate,
    ClauseVersionResponse,
    RiskRating,
)
from lexiflow.services.clause_service import clause_service
from lexiflow.utils.pagination import Paginated

router: APIRouter = APIRouter()


@router.get("", response_model=Paginated[ClauseResponse])
async def list_clauses(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
    paging: Annotated[PageParams, Depends(page_params)],
    category: Annotated[str | None, Query(description="분류 필터")] = None,
    risk_rating: Annotated[RiskRating | None, Query(description="위험 등급 필터")] = None,
) -> Paginated[ClauseResponse]:
    return await clause_service.find_page(
        db, current_user.organization_id, paging.page, paging.limit,
        {"category": category, "risk_rating": risk_rating},
    )


@router.get("/{clause_id}", response_model=ClauseResponse)
async def get_clause(
    clause_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> ClauseResponse:
    return await clause_service.find_one(db, clause_id, current_user.organization_id)


@router.get("/{clause_id}/versions", response_model=list[ClauseVersionResponse])
async def list_clause_versions(
    clause_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> list[ClauseVersionResponse]:
    """조항의 이전 버전 목록을 최신순으로 조회합니다.

    List the superseded versions of a clause, newest first.
    """
    return await clause_service.list_versions(db, clause_id, current_user.organization_id)


@router.post("", response_model=ClauseResponse, status_code=201)
async def create_clause(
    data: ClauseCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> ClauseResponse:
    result: ClauseResponse = await clause_service.create(db, current_user.organization_id, data)
    await db.commit()
    return result


@router.patch("/{clause_id}", response_model=ClauseResponse)
async def update_clause(
    clause_id: UUID,
    data: ClauseUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> ClauseResponse:
    """조항을 수정합니다 — 본문 변경 시 버전 증가.

    Update a clause. A content change stores the previous text as a version
    authored by the caller and increments the version number.
    """
    result: ClauseResponse = await clause_service.update(
        db, clause_id, current_user.organization_id, data, author=current_user.full_name
    )
    await db.commit()
    return result


@router.delete("/{clause_id}", status_code=204)
async def delete_clause(
    clause_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> None:
    await clause_service.delete(db, clause_id, current_user.organization_id)
    await db.commit()
