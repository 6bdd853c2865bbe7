"""인증 서비스 — 로그인, 토큰 갱신 비즈니스 로직.

Auth Service — business logic for login and token refresh.
Access and refresh tokens are stateless JWTs distinguished by their
"type" claim.
"""

from typing import Any
from uuid import UUID

import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.database import utcnow
from lexiflow.models.user import UserProfile
from lexiflow.repositories.user_repository import user_repository
from lexiflow.schemas.auth import LoginRequest, RefreshRequest, TokenResponse
from lexiflow.schemas.user import UserResponse
from lexiflow.utils.exceptions import UnauthorizedError
from lexiflow.utils.jwt import create_access_token, create_refresh_token, decode_token
from lexiflow.utils.password import verify_password


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling authentication business logic.
    """

    def _build_jwt_payload(self, user: UserProfile) -> dict[str, Any]:
        """JWT 토큰 페이로드를 생성합니다.

        Build the JWT token payload from the user profile.

        Args:
            user: 사용자 모델 (User profile instance)

        Returns:
            dict[str, Any]: JWT 페이로드 딕셔너리 (JWT payload dictionary)
        """
        return {
            "sub": str(user.id),
            "org": str(user.organization_id),
            "role": user.role,
        }

    def _generate_tokens(self, user: UserProfile) -> TokenResponse:
        payload: dict[str, Any] = self._build_jwt_payload(user)
        return TokenResponse(
            access_token=create_access_token(payload),
            refresh_token=create_refresh_token(payload),
            user=UserResponse.model_validate(user),
        )

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> TokenResponse:
        """이메일/비밀번호 로그인을 처리합니다.

        Process email/password login and record the login time.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 로그인 요청 데이터 (Login request data)

        Returns:
            TokenResponse: 토큰 응답 (Token response)

        Raises:
            UnauthorizedError: 잘못된 인증 정보 또는 비활성 계정
                               (Invalid credentials or deactivated account)
        """
        user: UserProfile | None = await user_repository.get_by_email(db, data.email)
        if user is None or not verify_password(data.password, user.password_hash):
            raise UnauthorizedError("Invalid email or password")

        if not user.is_active:
            raise UnauthorizedError("Account is deactivated")

        user = await user_repository.update(db, user.id, {"last_login_at": utcnow()})
        return self._generate_tokens(user)

    async def refresh_tokens(
        self,
        db: AsyncSession,
        data: RefreshRequest,
    ) -> TokenResponse:
        """리프레시 토큰으로 새 토큰 쌍을 발급합니다.

        Issue a new token pair using a refresh token.

        Raises:
            UnauthorizedError: 유효하지 않거나 만료된 리프레시 토큰일 때
                               (Invalid or expired refresh token)
        """
        try:
            payload: dict[str, Any] = decode_token(data.refresh_token)
        except jwt.ExpiredSignatureError:
            raise UnauthorizedError("Refresh token has expired")
        except jwt.InvalidTokenError:
            raise UnauthorizedError("Invalid refresh token")

        if payload.get("type") != "refresh":
            raise UnauthorizedError("Invalid token type")

        try:
            user_id: UUID = UUID(str(payload.get("sub")))
        except ValueError:
            raise UnauthorizedError("Invalid refresh token payload")

        user: UserProfile | None = await user_repository.get_by_id(db, user_id)
        if user is None or not user.is_active:
            raise UnauthorizedError("User not found or inactive")

        return self._generate_tokens(user)


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService()
