"""인증 라우터 — 로그인, 토큰 갱신, 내 정보.

Auth Router — login, token refresh and current-user endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import get_current_user
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.auth import LoginRequest, RefreshRequest, TokenResponse
from lexiflow.schemas.user import UserResponse
from lexiflow.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """이메일/비밀번호 로그인 — 액세스/리프레시 토큰 발급.

    Email/password login. Issues an access and refresh token pair.
    """
    result: TokenResponse = await auth_service.login(db, data)
    await db.commit()
    return result


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token(
    data: RefreshRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """토큰 갱신 — 리프레시 토큰으로 새 토큰 쌍 발급.

    Issue a new token pair using a refresh token.
    """
    return await auth_service.refresh_tokens(db, data)


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> UserResponse:
    """현재 사용자 프로필 조회 (Current user's profile)."""
    return UserResponse.model_validate(current_user)
