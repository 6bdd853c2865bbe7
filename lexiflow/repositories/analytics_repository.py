"""분석 이벤트 레포지토리 — 배치 저장 및 건수 조회.

Analytics Event Repository — batch inserts and counts.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.models.analytics import AnalyticsEvent
from lexiflow.repositories.base import BaseRepository


class AnalyticsEventRepository(BaseRepository[AnalyticsEvent]):
    def __init__(self) -> None:
        super().__init__(AnalyticsEvent)

    async def create_many(
        self,
        db: AsyncSession,
        rows: list[dict[str, Any]],
    ) -> int:
        """이벤트 배치를 한 번의 flush로 저장합니다.

        Insert a batch of events with a single flush.

        Returns:
            int: 저장된 이벤트 수 (Number of stored events)
        """
        db.add_all([AnalyticsEvent(**row) for row in rows])
        await db.flush()
        return len(rows)

    async def count(
        self,
        db: AsyncSession,
        organization_id: UUID,
    ) -> int:
        query: Select = (
            select(func.count())
            .select_from(AnalyticsEvent)
            .where(AnalyticsEvent.organization_id == organization_id)
        )
        return (await db.execute(query)).scalar() or 0


analytics_repository: AnalyticsEventRepository = AnalyticsEventRepository()
