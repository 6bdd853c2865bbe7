"""감사 로그 Pydantic 스키마 정의.

Audit log entry schemas. Entries are append-only: there is no update schema.
"""

from uuid import UUID

from pydantic import BaseModel, Field

from lexiflow.schemas.common import TenantResponse


class AuditLogCreate(BaseModel):
    action: str = Field(..., min_length=1, max_length=100)
    resource: str = Field(..., min_length=1, max_length=255)


class AuditLogResponse(TenantResponse):
    user_id: UUID | None
    user_name: str | None
    action: str
    resource: str
    ip: str | None
