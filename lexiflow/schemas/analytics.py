"""분석 이벤트 Pydantic 스키마 정의.

Analytics ingest schemas — one request carries a flushed buffer of events.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class AnalyticsEventIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    properties: dict[str, Any] = {}
    occurred_at: datetime | None = None


class AnalyticsBatch(BaseModel):
    events: list[AnalyticsEventIn] = Field(..., min_length=1, max_length=500)


class AnalyticsBatchResponse(BaseModel):
    accepted: int


class AnalyticsCountResponse(BaseModel):
    total: int
