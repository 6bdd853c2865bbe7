"""분석 이벤트 수집 서비스.

Analytics Service — stores event batches flushed by the frontend buffer.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.database import utcnow
from lexiflow.models.user import UserProfile
from lexiflow.repositories.analytics_repository import analytics_repository
from lexiflow.schemas.analytics import AnalyticsBatch, AnalyticsBatchResponse, AnalyticsCountResponse


class AnalyticsService:
    async def ingest(
        self,
        db: AsyncSession,
        user: UserProfile,
        batch: AnalyticsBatch,
    ) -> AnalyticsBatchResponse:
        """이벤트 배치를 저장합니다.

        Store a batch of events for the caller. Events without a client
        timestamp are stamped with the receipt time.
        """
        received = utcnow()
        rows: list[dict[str, Any]] = [
            {
                "organization_id": user.organization_id,
                "user_id": user.id,
                "name": event.name,
                "properties": event.properties,
                "occurred_at": event.occurred_at or received,
            }
            for event in batch.events
        ]
        accepted: int = await analytics_repository.create_many(db, rows)
        return AnalyticsBatchResponse(accepted=accepted)

    async def count(self, db: AsyncSession, organization_id: UUID) -> AnalyticsCountResponse:
        return AnalyticsCountResponse(total=await analytics_repository.count(db, organization_id))


analytics_service: AnalyticsService = AnalyticsService()
