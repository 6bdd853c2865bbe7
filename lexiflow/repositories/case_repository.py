"""사건 레포지토리 — 사건 CRUD 및 통계 쿼리.

Case Repository — CRUD and aggregate queries for cases.
Case detail eager-loads documents, tasks, time entries and discovery
requests.
"""

from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.models.case import Case
from lexiflow.repositories.base import BaseRepository


class CaseRepository(BaseRepository[Case]):
    """사건 테이블 레포지토리 (Repository for the cases table)."""

    def __init__(self) -> None:
        super().__init__(
            Case,
            eager=("documents", "tasks", "time_entries", "discovery_requests"),
        )

    async def count_by_status(
        self,
        db: AsyncSession,
        organization_id: UUID,
    ) -> dict[str, int]:
        """조직의 사건 수를 상태별로 집계합니다.

        Count an organization's cases grouped by status.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            organization_id: 조직 ID (Organization UUID)

        Returns:
            dict[str, int]: {상태: 건수} ({status: count})
        """
        query: Select = (
            select(Case.status, func.count())
            .where(Case.organization_id == organization_id)
            .group_by(Case.status)
        )
        result = await db.execute(query)
        return {status: count for status, count in result.all()}


# 싱글턴 인스턴스 — Singleton instance
case_repository: CaseRepository = CaseRepository()
