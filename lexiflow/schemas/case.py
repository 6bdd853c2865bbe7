"""사건 Pydantic 스키마 정의.

Case request/response schemas, including the detail view with eager-loaded
associations and the status statistics response.
"""

from datetime import date
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from lexiflow.schemas.billing import TimeEntryResponse
from lexiflow.schemas.common import TenantResponse
from lexiflow.schemas.discovery import DiscoveryRequestResponse
from lexiflow.schemas.document import DocumentResponse
from lexiflow.schemas.task import TaskResponse

CaseStatus = Literal["Discovery", "Trial", "Settled", "Closed", "Appeal"]
MatterType = Literal["Litigation", "M&A", "IP", "Real Estate", "General"]
BillingModel = Literal["Hourly", "Fixed", "Contingency", "Hybrid"]


class CaseCreate(BaseModel):
    """사건 생성 요청 스키마.

    Attributes:
        title: 사건명 (Case title)
        client_name: 의뢰인 표시 이름 (Client display name)
        client_id: 의뢰인 레코드 UUID — 같은 조직이어야 함 (Must belong to the caller's org)
        status: 사건 상태 (Lifecycle status, default "Discovery")
    """

    title: str = Field(..., min_length=1, max_length=500)
    client_name: str = Field(..., min_length=1, max_length=255)
    client_id: UUID | None = None
    opposing_counsel: str | None = None
    status: CaseStatus = "Discovery"
    filing_date: date | None = None
    description: str | None = None
    value: float | None = Field(None, ge=0)
    matter_type: MatterType | None = None
    jurisdiction: str | None = None
    court: str | None = None
    docket_number: str | None = None
    billing_model: BillingModel | None = None
    judge: str | None = None


class CaseUpdate(BaseModel):
    """사건 수정 요청 스키마 (부분 업데이트, partial update)."""

    title: str | None = Field(None, min_length=1, max_length=500)
    client_name: str | None = Field(None, min_length=1, max_length=255)
    client_id: UUID | None = None
    opposing_counsel: str | None = None
    status: CaseStatus | None = None
    filing_date: date | None = None
    description: str | None = None
    value: float | None = Field(None, ge=0)
    matter_type: MatterType | None = None
    jurisdiction: str | None = None
    court: str | None = None
    docket_number: str | None = None
    billing_model: BillingModel | None = None
    judge: str | None = None


class CaseResponse(TenantResponse):
    title: str
    client_name: str
    client_id: UUID | None
    created_by: UUID | None
    opposing_counsel: str | None
    status: str
    filing_date: date | None
    description: str | None
    value: float | None
    matter_type: str | None
    jurisdiction: str | None
    court: str | None
    docket_number: str | None
    billing_model: str | None
    judge: str | None


class CaseDetailResponse(CaseResponse):
    """사건 상세 응답 — 연관 레코드 포함 (Case with its associations)."""

    documents: list[DocumentResponse] = []
    tasks: list[TaskResponse] = []
    time_entries: list[TimeEntryResponse] = []
    discovery_requests: list[DiscoveryRequestResponse] = []


class CaseStatsResponse(BaseModel):
    """사건 통계 응답 — 상태별 건수 (Case counts per status)."""

    total: int
    by_status: dict[str, int]
