"""조항 Pydantic 스키마 정의.

Clause library schemas.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from lexiflow.schemas.common import TenantResponse

RiskRating = Literal["Low", "Medium", "High"]


class ClauseCreate(BaseModel):
    """조항 생성 요청 스키마 (Clause creation request)."""

    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1)
    risk_rating: RiskRating = "Low"


class ClauseUpdate(BaseModel):
    """조항 수정 요청 스키마.

    Changing `content` snapshots the previous text into the version history.
    """

    name: str | None = Field(None, min_length=1, max_length=255)
    category: str | None = Field(None, min_length=1, max_length=100)
    content: str | None = Field(None, min_length=1)
    risk_rating: RiskRating | None = None
    usage_count: int | None = Field(None, ge=0)


class ClauseResponse(TenantResponse):
    name: str
    category: str
    content: str
    version: int
    usage_count: int
    risk_rating: str


class ClauseVersionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    clause_id: UUID
    version: int
    content: str
    author: str | None
    created_at: datetime
