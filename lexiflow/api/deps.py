"""FastAPI 의존성 주입 모듈 — 인증, 권한, 페이지네이션.

FastAPI dependency injection module — authentication, authorization and
list pagination parameters.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    3. 페이로드의 "sub" 필드로 DB에서 사용자를 조회하고 활성 상태 확인
       (User is fetched by the "sub" claim and must be active)

Authorization Flow (require_level):
    사용자 역할 레벨이 max_level보다 크면(권한이 낮으면) 403 Forbidden
    (Returns 403 when the user's role level exceeds max_level)
"""

from dataclasses import dataclass
from typing import Annotated, Awaitable, Callable
from uuid import UUID

import jwt
from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.config import settings
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.repositories.user_repository import user_repository
from lexiflow.utils.exceptions import ForbiddenError, UnauthorizedError
from lexiflow.utils.jwt import decode_token

# HTTP Bearer 토큰 추출기 (Extracts JWT from Authorization: Bearer <token>)
security: HTTPBearer = HTTPBearer()


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserProfile:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode the access token and return the authenticated user profile.

    Raises:
        UnauthorizedError: 토큰이 유효하지 않거나 만료됨, 사용자 없음/비활성
                           (Invalid or expired token, missing or inactive user)
    """
    try:
        payload: dict = decode_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Token has expired")
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid or expired token")

    # 토큰 타입 검증 — Reject refresh tokens used as access tokens
    if payload.get("type") != "access":
        raise UnauthorizedError("Invalid token type")

    try:
        user_id: UUID = UUID(str(payload.get("sub")))
    except ValueError:
        raise UnauthorizedError("Invalid token")

    user: UserProfile | None = await user_repository.get_by_id(db, user_id)
    if user is None or not user.is_active:
        raise UnauthorizedError("User not found or inactive")

    return user


def require_level(max_level: int) -> Callable[..., Awaitable[UserProfile]]:
    """역할 레벨 기반 권한 검사 의존성 팩토리.

    Dependency factory enforcing a maximum role level. Lower level means
    higher authority.

    Level hierarchy:
        1 = Administrator
        2 = Senior Partner
        3 = Associate
        4 = Paralegal

    Args:
        max_level: 허용되는 최대 역할 레벨 (Maximum allowed role level, inclusive)
    """
    async def _check(
        current_user: Annotated[UserProfile, Depends(get_current_user)],
    ) -> UserProfile:
        if current_user.level > max_level:
            raise ForbiddenError()
        return current_user
    return _check


# 편의 의존성 — Pre-configured level dependencies
require_admin = require_level(1)    # Administrator만 허용 (Administrator only)
require_partner = require_level(2)  # Administrator + Senior Partner


@dataclass
class PageParams:
    page: int
    limit: int


def page_params(
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
) -> PageParams:
    """목록 페이지네이션 쿼리 파라미터 (List pagination query parameters)."""
    return PageParams(page=page, limit=limit)


