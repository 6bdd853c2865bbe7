"""판사/상대방 변호인 프로필 Pydantic 스키마 정의.

Judge and opposing counsel profile schemas. Rates are percentages.
"""

from pydantic import BaseModel, Field

from lexiflow.schemas.common import TenantResponse


class JudgeProfileCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    court: str = Field(..., min_length=1, max_length=255)
    grant_rate_dismiss: float | None = Field(None, ge=0, le=100)
    grant_rate_summary: float | None = Field(None, ge=0, le=100)
    avg_case_duration: int | None = Field(None, ge=0)
    tendencies: list[str] = []


class JudgeProfileUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    court: str | None = Field(None, min_length=1, max_length=255)
    grant_rate_dismiss: float | None = Field(None, ge=0, le=100)
    grant_rate_summary: float | None = Field(None, ge=0, le=100)
    avg_case_duration: int | None = Field(None, ge=0)
    tendencies: list[str] | None = None


class JudgeProfileResponse(TenantResponse):
    name: str
    court: str
    grant_rate_dismiss: float | None
    grant_rate_summary: float | None
    avg_case_duration: int | None
    tendencies: list[str]


class OpposingCounselProfileCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    firm: str = Field(..., min_length=1, max_length=255)
    settlement_rate: float | None = Field(None, ge=0, le=100)
    trial_rate: float | None = Field(None, ge=0, le=100)
    avg_settlement_variance: float | None = None


class OpposingCounselProfileUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    firm: str | None = Field(None, min_length=1, max_length=255)
    settlement_rate: float | None = Field(None, ge=0, le=100)
    trial_rate: float | None = Field(None, ge=0, le=100)
    avg_settlement_variance: float | None = None


class OpposingCounselProfileResponse(TenantResponse):
    name: str
    firm: str
    settlement_rate: float | None
    trial_rate: float | None
    avg_settlement_variance: float | None
