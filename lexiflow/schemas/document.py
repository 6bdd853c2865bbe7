"""문서 Pydantic 스키마 정의.

Document request/response schemas.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from lexiflow.schemas.common import TenantResponse

SourceModule = Literal["Evidence", "Discovery", "Billing", "General"]
DocumentStatus = Literal["Draft", "Final", "Signed", "Pending OCR"]


class DocumentCreate(BaseModel):
    case_id: UUID
    title: str = Field(..., min_length=1, max_length=500)
    doc_type: str = "General"
    content: str | None = None
    summary: str | None = None
    risk_score: int | None = Field(None, ge=0, le=100)
    tags: list[str] = []
    source_module: SourceModule = "General"
    status: DocumentStatus = "Draft"
    is_encrypted: bool = False
    shared_with_client: bool = False
    file_size: str | None = None


class DocumentUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=500)
    doc_type: str | None = None
    content: str | None = None
    summary: str | None = None
    risk_score: int | None = Field(None, ge=0, le=100)
    tags: list[str] | None = None
    source_module: SourceModule | None = None
    status: DocumentStatus | None = None
    is_encrypted: bool | None = None
    shared_with_client: bool | None = None
    file_size: str | None = None


class DocumentResponse(TenantResponse):
    case_id: UUID
    uploaded_by: UUID | None
    title: str
    doc_type: str
    content: str | None
    summary: str | None
    risk_score: int | None
    tags: list[str]
    source_module: str
    status: str
    is_encrypted: bool
    shared_with_client: bool
    file_size: str | None
    version: int


class DocumentVersionResponse(BaseModel):
    """문서 버전 스냅샷 응답 (Snapshot of a superseded document revision)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    document_id: UUID
    version: int
    title: str
    content: str | None
    changed_by: UUID | None
    author: str | None
    created_at: datetime
