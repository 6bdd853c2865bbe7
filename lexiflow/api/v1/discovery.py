"""디스커버리 요청 라우터.

Discovery Request Router — CRUD endpoints for discovery requests.
Lists are ordered by due date, soonest first.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import PageParams, get_current_user, page_params
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.discovery import (
    DiscoveryRequestCreate,
    DiscoveryRequestResponse,
    DiscoveryRequestUpdate,
    DiscoveryStatus,
    DiscoveryType,
)
from lexiflow.services.discovery_service import discovery_service
from lexiflow.utils.pagination import Paginated

router: APIRouter = APIRouter()


@router.get("", response_model=Paginated[DiscoveryRequestResponse])
async def list_discovery_requests(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
    paging: Annotated[PageParams, Depends(page_params)],
    case_id: Annotated[UUID | None, Query(description="사건 ID 필터")] = None,
    status: Annotated[DiscoveryStatus | None, Query(description="상태 필터")] = None,
    request_type: Annotated[DiscoveryType | None, Query(description="요청 유형 필터")] = None,
) -> Paginated[DiscoveryRequestResponse]:
    filters: dict = {"case_id": case_id, "status": status, "request_type": request_type}
    return await discovery_service.find_page(
        db, current_user.organization_id, paging.page, paging.limit, filters
    )


@router.get("/{request_id}", response_model=DiscoveryRequestResponse)
async def get_discovery_request(
    request_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> DiscoveryRequestResponse:
    return await discovery_service.find_one(db, request_id, current_user.organization_id)


@router.post("", response_model=DiscoveryRequestResponse, status_code=201)
async def create_discovery_request(
    data: DiscoveryRequestCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> DiscoveryRequestResponse:
    result: DiscoveryRequestResponse = await discovery_service.create(
        db, current_user.organization_id, data
    )
    await db.commit()
    return result


@router.patch("/{request_id}", response_model=DiscoveryRequestResponse)
async def update_discovery_request(
    request_id: UUID,
    data: DiscoveryRequestUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> DiscoveryRequestResponse:
    result: DiscoveryRequestResponse = await discovery_service.update(
        db, request_id, current_user.organization_id, data
    )
    await db.commit()
    return result


@router.delete("/{request_id}", status_code=204)
async def delete_discovery_request(
    request_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> None:
    await discovery_service.delete(db, request_id, current_user.organization_id)
    await db.commit()
