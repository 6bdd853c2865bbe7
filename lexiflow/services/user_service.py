"""사용자 서비스 — 사용자 프로필 CRUD 비즈니스 로직.

User Service — business logic for user profile management.
Passwords are bcrypt-hashed before storage; emails are unique system-wide.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.models.user import UserProfile
from lexiflow.repositories.user_repository import user_repository
from lexiflow.schemas.user import UserResponse
from lexiflow.services.base import BaseCrudService
from lexiflow.utils.exceptions import DuplicateError
from lexiflow.utils.password import hash_password


class UserService(BaseCrudService[UserProfile, UserResponse]):
    """사용자 관련 비즈니스 로직을 처리하는 서비스.

    Service handling user profile business logic within an organization.
    """

    def __init__(self) -> None:
        super().__init__(user_repository, UserResponse, resource_name="User")

    async def _before_create(
        self,
        db: AsyncSession,
        organization_id: UUID,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """이메일 중복 확인 후 비밀번호를 해시합니다.

        Reject duplicate emails and replace the plain password with its hash.

        Raises:
            DuplicateError: 이미 사용 중인 이메일 (Email already registered)
        """
        existing: UserProfile | None = await user_repository.get_by_email(db, payload["email"])
        if existing is not None:
            raise DuplicateError("A user with this email already exists")

        payload["email"] = payload["email"].lower()
        payload["password_hash"] = hash_password(payload.pop("password"))
        return payload

    async def _before_update(
        self,
        db: AsyncSession,
        current: UserProfile,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        # 비밀번호 변경 시 해시로 교체 — Hash a new password if one was sent
        password: str | None = payload.pop("password", None)
        if password is not None:
            payload["password_hash"] = hash_password(password)
        return payload


# 싱글턴 인스턴스 — Singleton instance
user_service: UserService = UserService()
