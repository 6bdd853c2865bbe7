"""조항 서비스 — 조항 CRUD 및 버전 관리.

Clause Service — clause CRUD with content version history.
Each content change stores the superseded text as a ClauseVersion and
increments the clause's version number.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.models.clause import Clause
from lexiflow.repositories.clause_repository import clause_repository
from lexiflow.schemas.clause import ClauseResponse, ClauseUpdate, ClauseVersionResponse
from lexiflow.services.base import BaseCrudService


class ClauseService(BaseCrudService[Clause, ClauseResponse]):
    """조항 관련 비즈니스 로직을 처리하는 서비스.

    Service handling clause library business logic.
    """

    def __init__(self) -> None:
        super().__init__(clause_repository, ClauseResponse, resource_name="Clause")

    async def update(
        self,
        db: AsyncSession,
        record_id: UUID,
        organization_id: UUID,
        data: ClauseUpdate,
        author: str | None = None,
    ) -> ClauseResponse:
        """조항을 수정하고, 본문이 바뀌면 이전 본문을 이력에 남깁니다.

        Update a clause. When `content` changes, the previous content is
        snapshotted and the version number is incremented.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조항 ID (Clause UUID)
            organization_id: 조직 ID (Organization UUID)
            data: 수정 데이터 (Update data)
            author: 변경 작성자 이름 (Editor display name)

        Returns:
            ClauseResponse: 수정된 조항 (Updated clause)

        Raises:
            NotFoundError: 조항을 찾을 수 없을 때 (Clause not found)
        """
        current: Clause = await self.get_model(db, record_id, organization_id)
        payload: dict[str, Any] = self._drop_null_required(data.model_dump(exclude_unset=True))

        new_content: str | None = payload.get("content")
        if new_content is not None and new_content != current.content:
            await clause_repository.add_version(db, current, author)
            payload["version"] = current.version + 1

        clause: Clause | None = await clause_repository.update(db, record_id, payload, organization_id)
        if clause is None:
            raise self._not_found()
        return self._to_response(clause)

    async def list_versions(
        self,
        db: AsyncSession,
        record_id: UUID,
        organization_id: UUID,
    ) -> list[ClauseVersionResponse]:
        """조항의 버전 이력을 최신순으로 조회합니다.

        List a clause's previous versions, newest first.

        Raises:
            NotFoundError: 조항을 찾을 수 없을 때 (Clause not found)
        """
        await self.get_model(db, record_id, organization_id)
        versions = await clause_repository.get_versions(db, record_id)
        return [ClauseVersionResponse.model_validate(v) for v in versions]


# 싱글턴 인스턴스 — Singleton instance
clause_service: ClauseService = ClauseService()
