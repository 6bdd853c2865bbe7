"""청구(타임 엔트리) Pydantic 스키마 정의.

Time entry request/response schemas.
"""

from datetime import date
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from lexiflow.schemas.common import TenantResponse

TimeEntryStatus = Literal["Unbilled", "Billed"]


class TimeEntryCreate(BaseModel):
    """타임 엔트리 생성 요청 스키마.

    Attributes:
        duration: 작업 시간(분), 1 이상 (Minutes worked, at least 1)
        rate: 시간당 요율 (Hourly rate)
        total: 청구 금액 — 생략 시 duration / 60 * rate 로 계산
               (Billed amount; computed from duration and rate when omitted)
    """

    case_id: UUID
    entry_date: date
    duration: int = Field(..., ge=1)
    description: str = Field(..., min_length=1)
    rate: float = Field(..., ge=0)
    total: float | None = Field(None, ge=0)
    status: TimeEntryStatus = "Unbilled"


class TimeEntryUpdate(BaseModel):
    entry_date: date | None = None
    duration: int | None = Field(None, ge=1)
    description: str | None = Field(None, min_length=1)
    rate: float | None = Field(None, ge=0)
    total: float | None = Field(None, ge=0)
    status: TimeEntryStatus | None = None


class TimeEntryResponse(TenantResponse):
    case_id: UUID
    user_id: UUID | None
    entry_date: date
    duration: int
    description: str
    rate: float
    total: float
    status: str
