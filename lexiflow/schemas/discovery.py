"""디스커버리 요청 Pydantic 스키마 정의.

Discovery request schemas.
"""

from datetime import date
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from lexiflow.schemas.common import TenantResponse

DiscoveryType = Literal["Production", "Interrogatory", "Admission", "Deposition"]
DiscoveryStatus = Literal["Draft", "Served", "Responded", "Overdue", "Closed"]


class DiscoveryRequestCreate(BaseModel):
    case_id: UUID
    request_type: DiscoveryType
    propounding_party: str = Field(..., min_length=1)
    responding_party: str = Field(..., min_length=1)
    service_date: date | None = None
    due_date: date | None = None
    status: DiscoveryStatus = "Draft"
    title: str = Field(..., min_length=1, max_length=500)
    description: str | None = None
    response_preview: str | None = None


class DiscoveryRequestUpdate(BaseModel):
    request_type: DiscoveryType | None = None
    propounding_party: str | None = None
    responding_party: str | None = None
    service_date: date | None = None
    due_date: date | None = None
    status: DiscoveryStatus | None = None
    title: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = None
    response_preview: str | None = None


class DiscoveryRequestResponse(TenantResponse):
    case_id: UUID
    request_type: str
    propounding_party: str
    responding_party: str
    service_date: date | None
    due_date: date | None
    status: str
    title: str
    description: str | None
    response_preview: str | None
