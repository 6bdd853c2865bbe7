"""관할 서비스 — 전역 참조 데이터.

Jurisdiction Service — global reference data; codes are unique.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.models.jurisdiction import Jurisdiction
from lexiflow.repositories.jurisdiction_repository import jurisdiction_repository
from lexiflow.schemas.jurisdiction import JurisdictionResponse
from lexiflow.services.base import BaseCrudService
from lexiflow.utils.exceptions import DuplicateError


class JurisdictionService(BaseCrudService[Jurisdiction, JurisdictionResponse]):
    def __init__(self) -> None:
        super().__init__(jurisdiction_repository, JurisdictionResponse, resource_name="Jurisdiction")

    async def _before_create(
        self,
        db: AsyncSession,
        organization_id: UUID,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        payload["code"] = payload["code"].upper()
        if await jurisdiction_repository.exists(db, {"code": payload["code"]}):
            raise DuplicateError("A jurisdiction with this code already exists")
        return payload


jurisdiction_service: JurisdictionService = JurisdictionService()
