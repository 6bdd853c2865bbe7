"""JWT 토큰 생성 및 검증 유틸리티 모듈.

JWT token creation and verification utility module.

JWT Payload Structure:
    {
        "sub": "user_uuid",         # 사용자 ID (User identifier)
        "org": "organization_uuid", # 조직 ID (Organization identifier)
        "role": "Associate",        # 역할 이름 (Role name)
        "exp": 1234567890,          # 만료 시간 (Expiration)
        "type": "access"|"refresh"  # 토큰 유형 (Token type discriminator)
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any
import jwt

from lexiflow.config import settings


def _encode(data: dict[str, Any], lifetime: timedelta, token_type: str) -> str:
    to_encode: dict[str, Any] = data.copy()
    expire: datetime = datetime.now(timezone.utc) + lifetime
    to_encode.update({"exp": expire, "type": token_type})
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def create_access_token(data: dict[str, Any]) -> str:
    """JWT 액세스 토큰을 생성합니다.

    Generate a JWT access token that expires after
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES.

    Args:
        data: JWT 페이로드 데이터 (Payload, typically {"sub", "org", "role"})

    Returns:
        str: 인코딩된 JWT 문자열 (Encoded JWT token string)
    """
    return _encode(data, timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES), "access")


def create_refresh_token(data: dict[str, Any]) -> str:
    """JWT 리프레시 토큰을 생성합니다.

    Generate a JWT refresh token that expires after
    JWT_REFRESH_TOKEN_EXPIRE_DAYS.
    """
    return _encode(data, timedelta(days=settings.JWT_REFRESH_TOKEN_EXPIRE_DAYS), "refresh")


def decode_token(token: str) -> dict[str, Any]:
    """JWT 토큰을 디코딩하고 검증합니다.

    Decode and verify a JWT token string.

    Raises:
        jwt.ExpiredSignatureError: 토큰 만료 시 (When token has expired)
        jwt.InvalidTokenError: 유효하지 않은 토큰 (When token is invalid)
    """
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
