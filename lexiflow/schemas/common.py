"""공통 Pydantic 스키마 정의.

Common Pydantic schema building blocks shared across resources.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ORMResponse(BaseModel):
    """ORM 객체에서 생성되는 응답 스키마의 베이스.

    Base for response schemas built directly from ORM instances.

    Attributes:
        id: 레코드 UUID (Record identifier)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime


class TenantResponse(ORMResponse):
    """조직 소유 레코드 응답 베이스 (Base for tenant-owned records)."""

    organization_id: UUID
