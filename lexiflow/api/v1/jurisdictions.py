"""관할 라우터 — 전역 참조 데이터.

Jurisdiction Router — global reference data shared by all organizations.
Any authenticated user can read; only administrators can write.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import PageParams, get_current_user, page_params, require_admin
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.jurisdiction import (
    JurisdictionCreate,
    JurisdictionResponse,
    JurisdictionType,
    JurisdictionUpdate,
)
from lexiflow.services.jurisdiction_service import jurisdiction_service
from lexiflow.utils.pagination import Paginated

router: APIRouter = APIRouter()


@router.get("", response_model=Paginated[JurisdictionResponse])
async def list_jurisdictions(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
    paging: Annotated[PageParams, Depends(page_params)],
    jurisdiction_type: Annotated[JurisdictionType | None, Query(description="관할 유형 필터")] = None,
    parent_code: Annotated[str | None, Query(description="상위 관할 코드 필터")] = None,
) -> Paginated[JurisdictionResponse]:
    return await jurisdiction_service.find_page(
        db, current_user.organization_id, paging.page, paging.limit,
        {"jurisdiction_type": jurisdiction_type, "parent_code": parent_code},
    )


@router.get("/{jurisdiction_id}", response_model=JurisdictionResponse)
async def get_jurisdiction(
    jurisdiction_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> JurisdictionResponse:
    return await jurisdiction_service.find_one(db, jurisdiction_id, current_user.organization_id)


@router.post("", response_model=JurisdictionResponse, status_code=201)
async def create_jurisdiction(
    data: JurisdictionCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(require_admin)],
) -> JurisdictionResponse:
    """관할을 등록합니다 — 코드는 대문자로 저장, 중복 시 409.

    Register a jurisdiction. Codes are stored upper-cased and must be unique.
    """
    result: JurisdictionResponse = await jurisdiction_service.create(
        db, current_user.organization_id, data
    )
    await db.commit()
    return result


@router.patch("/{jurisdiction_id}", response_model=JurisdictionResponse)
async def update_jurisdiction(
    jurisdiction_id: UUID,
    data: JurisdictionUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(require_admin)],
) -> JurisdictionResponse:
    result: JurisdictionResponse = await jurisdiction_service.update(
        db, jurisdiction_id, current_user.organization_id, data
    )
    await db.commit()
    return result


@router.delete("/{jurisdiction_id}", status_code=204)
async def delete_jurisdiction(
    jurisdiction_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(require_admin)],
) -> None:
    await jurisdiction_service.delete(db, jurisdiction_id, current_user.organization_id)
    await db.commit()
