"""분석 이벤트 수집 라우터.

Analytics Router — ingest endpoint for the frontend analytics buffer.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import get_current_user
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.analytics import AnalyticsBatch, AnalyticsBatchResponse, AnalyticsCountResponse
from lexiflow.services.analytics_service import analytics_service

router: APIRouter = APIRouter()


@router.post("/events", response_model=AnalyticsBatchResponse, status_code=202)
async def ingest_events(
    data: AnalyticsBatch,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> AnalyticsBatchResponse:
    """이벤트 배치를 저장합니다 (Store a flushed batch of events, 1..500)."""
    result: AnalyticsBatchResponse = await analytics_service.ingest(db, current_user, data)
    await db.commit()
    return result


@router.get("/events/count", response_model=AnalyticsCountResponse)
async def count_events(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> AnalyticsCountResponse:
    return await analytics_service.count(db, current_user.organization_id)
