"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic request/response schema definitions.
Covers login, token refresh, and current user info.
"""

from pydantic import BaseModel

from lexiflow.schemas.user import UserResponse


class LoginRequest(BaseModel):
    """로그인 요청 스키마.

    Attributes:
        email: 로그인 이메일 (Login email)
        password: 비밀번호 — 평문, 서버에서 bcrypt 해시와 비교 (Plain text, compared to bcrypt hash)
    """

    email: str
    password: str


class TokenResponse(BaseModel):
    """JWT 토큰 발급 응답 스키마.

    Returned after successful login or token refresh.
    """

    access_token: str  # JWT 액세스 토큰 — 만료: 30분 기본 (Access token, default TTL: 30min)
    refresh_token: str  # JWT 리프레시 토큰 — 만료: 7일 기본 (Refresh token, default TTL: 7 days)
    token_type: str = "bearer"
    user: UserResponse


class RefreshRequest(BaseModel):
    """토큰 갱신 요청 스키마 (Exchange a refresh token for a new pair)."""

    refresh_token: str
