"""의뢰인 라우터.

Client Router — CRUD endpoints for clients.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import PageParams, get_current_user, page_params
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.client import ClientCreate, ClientResponse, ClientStatus, ClientUpdate
from lexiflow.services.client_service import client_service
from lexiflow.utils.pagination import Paginated

router: APIRouter = APIRouter()


@router.get("", response_model=Paginated[ClientResponse])
async def list_clients(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
    paging: Annotated[PageParams, Depends(page_params)],
    status: Annotated[ClientStatus | None, Query(description="의뢰인 상태 필터")] = None,
    industry: Annotated[str | None, Query(description="업종 필터")] = None,
) -> Paginated[ClientResponse]:
    return await client_service.find_page(
        db, current_user.organization_id, paging.page, paging.limit,
        {"status": status, "industry": industry},
    )


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> ClientResponse:
    return await client_service.find_one(db, client_id, current_user.organization_id)


@router.post("", response_model=ClientResponse, status_code=201)
async def create_client(
    data: ClientCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> ClientResponse:
    result: ClientResponse = await client_service.create(db, current_user.organization_id, data)
    await db.commit()
    return result


@router.patch("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: UUID,
    data: ClientUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> ClientResponse:
    result: ClientResponse = await client_service.update(
        db, client_id, current_user.organization_id, data
    )
    await db.commit()
    return result


@router.delete("/{client_id}", status_code=204)
async def delete_client(
    client_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> None:
    """의뢰인을 삭제합니다 — 연결된 사건의 client_id는 NULL로 설정.

    Delete a client; linked cases keep their client_name and lose client_id.
    """
    await client_service.delete(db, client_id, current_user.organization_id)
    await db.commit()
