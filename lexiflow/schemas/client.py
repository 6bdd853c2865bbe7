"""의뢰인 Pydantic 스키마 정의.

Client request/response schemas.
"""

from typing import Literal

from pydantic import BaseModel, Field

from lexiflow.schemas.common import TenantResponse

ClientStatus = Literal["Active", "Prospect", "Former"]


class ClientCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    industry: str | None = None
    status: ClientStatus = "Active"
    total_billed: float = Field(0, ge=0)
    risk_score: int | None = Field(None, ge=0, le=100)
    contact_email: str | None = None
    phone: str | None = None


class ClientUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    industry: str | None = None
    status: ClientStatus | None = None
    total_billed: float | None = Field(None, ge=0)
    risk_score: int | None = Field(None, ge=0, le=100)
    contact_email: str | None = None
    phone: str | None = None


class ClientResponse(TenantResponse):
    name: str
    industry: str | None
    status: str
    total_billed: float
    risk_score: int | None
    contact_email: str | None
    phone: str | None
