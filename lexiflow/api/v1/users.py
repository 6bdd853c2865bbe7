"""사용자 관리 라우터 — 관리자 전용.

User Router — user profile management, restricted to administrators.

Permission Matrix (역할별 권한 설계):
    - 목록/조회/생성/수정/삭제: Administrator only
    - 본인 프로필 조회는 /auth/me 사용 (Own profile via /auth/me)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import PageParams, page_params, require_admin
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.user import UserCreate, UserResponse, UserRole, UserUpdate
from lexiflow.services.user_service import user_service
from lexiflow.utils.exceptions import BadRequestError
from lexiflow.utils.pagination import Paginated

router: APIRouter = APIRouter()


@router.get("", response_model=Paginated[UserResponse])
async def list_users(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(require_admin)],
    paging: Annotated[PageParams, Depends(page_params)],
    role: Annotated[UserRole | None, Query(description="역할 필터")] = None,
    is_active: Annotated[bool | None, Query(description="활성 상태 필터")] = None,
) -> Paginated[UserResponse]:
    """조직 사용자 목록을 이름순으로 조회합니다 (List users by name)."""
    return await user_service.find_page(
        db, current_user.organization_id, paging.page, paging.limit,
        {"role": role, "is_active": is_active},
    )


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(require_admin)],
) -> UserResponse:
    return await user_service.find_one(db, user_id, current_user.organization_id)


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    data: UserCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(require_admin)],
) -> UserResponse:
    """조직에 새 사용자를 추가합니다 — 이메일 중복 시 409.

    Add a user to the caller's organization. Duplicate emails are rejected.
    """
    result: UserResponse = await user_service.create(db, current_user.organization_id, data)
    await db.commit()
    return result


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    data: UserUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(require_admin)],
) -> UserResponse:
    result: UserResponse = await user_service.update(
        db, user_id, current_user.organization_id, data
    )
    await db.commit()
    return result


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(require_admin)],
) -> None:
    """사용자를 삭제합니다 — 본인 계정은 삭제 불가.

    Delete a user. Administrators cannot delete their own account.
    """
    if user_id == current_user.id:
        raise BadRequestError("Cannot delete your own account")
    await user_service.delete(db, user_id, current_user.organization_id)
    await db.commit()
