"""사용자 프로필 Pydantic 스키마 정의.

User profile request/response schemas.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from lexiflow.schemas.common import TenantResponse

UserRole = Literal["Senior Partner", "Associate", "Paralegal", "Administrator"]


class UserCreate(BaseModel):
    """사용자 생성 요청 스키마 — 관리자 전용 (Administrator only)."""

    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=8)
    full_name: str = Field(..., min_length=1, max_length=255)
    role: UserRole = "Associate"
    office: str | None = None


class UserUpdate(BaseModel):
    """사용자 수정 요청 스키마 (부분 업데이트, partial update)."""

    full_name: str | None = Field(None, min_length=1, max_length=255)
    role: UserRole | None = None
    office: str | None = None
    is_active: bool | None = None
    password: str | None = Field(None, min_length=8)


class UserResponse(TenantResponse):
    """사용자 응답 스키마 — 비밀번호 해시는 포함하지 않음 (Never exposes the hash)."""

    email: str
    full_name: str
    role: str
    office: str | None
    is_active: bool
    last_login_at: datetime | None
