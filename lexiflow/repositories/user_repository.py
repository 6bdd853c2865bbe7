"""사용자 레포지토리 — 사용자 CRUD 및 이메일 조회.

User Repository — CRUD and email lookup for user profiles.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.models.user import UserProfile
from lexiflow.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserProfile]):
    """사용자 테이블 레포지토리 (Repository for the users table)."""

    def __init__(self) -> None:
        super().__init__(UserProfile, default_order=UserProfile.full_name)

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> UserProfile | None:
        """이메일로 사용자를 조회합니다 — 대소문자 무시.

        Retrieve a user by email, case-insensitively.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 로그인 이메일 (Login email)

        Returns:
            UserProfile | None: 사용자 또는 None (User or None)
        """
        query: Select = select(UserProfile).where(func.lower(UserProfile.email) == email.lower())
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
