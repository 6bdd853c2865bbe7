"""타임 엔트리 서비스 — 청구 시간 기록 및 금액 계산.

Time Entry Service — billable time CRUD.
`total` is derived as duration / 60 * rate (rounded to cents) unless the
caller sends an explicit total.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.models.billing import TimeEntry
from lexiflow.repositories.case_repository import case_repository
from lexiflow.repositories.time_entry_repository import time_entry_repository
from lexiflow.schemas.ai import RefineResponse
from lexiflow.schemas.billing import TimeEntryResponse
from lexiflow.services.ai_service import ai_service
from lexiflow.services.base import BaseCrudService

_CENTS = Decimal("0.01")


def compute_total(duration_minutes: int, rate: Decimal | float) -> Decimal:
    """청구 금액 계산 — Billed amount for a duration (minutes) at an hourly rate."""
    amount: Decimal = Decimal(duration_minutes) / Decimal(60) * Decimal(str(rate))
    return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)


class TimeEntryService(BaseCrudService[TimeEntry, TimeEntryResponse]):
    """타임 엔트리 비즈니스 로직 서비스 (Time entry business logic)."""

    def __init__(self) -> None:
        super().__init__(
            time_entry_repository,
            TimeEntryResponse,
            resource_name="Time entry",
            references={"case_id": (case_repository, "Case")},
        )

    async def _before_create(
        self,
        db: AsyncSession,
        organization_id: UUID,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        if payload.get("total") is None:
            payload["total"] = compute_total(payload["duration"], payload["rate"])
        return payload

    async def _before_update(
        self,
        db: AsyncSession,
        current: TimeEntry,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        # 시간/요율 변경 시 금액 재계산 — Recompute total when duration or rate changes
        if "total" not in payload and ("duration" in payload or "rate" in payload):
            payload["total"] = compute_total(
                payload.get("duration", current.duration),
                payload.get("rate", current.rate),
            )
        return payload

    async def refine_description(
        self,
        db: AsyncSession,
        record_id: UUID,
        organization_id: UUID,
    ) -> RefineResponse:
        """AI로 작업 설명을 다듬어 저장합니다.

        Rewrite the entry's description with the AI refinement client and
        store the result. The description is left unchanged when the AI
        call falls back to the original text.

        Raises:
            NotFoundError: 타임 엔트리를 찾을 수 없을 때 (Time entry not found)
        """
        entry: TimeEntry = await self.get_model(db, record_id, organization_id)
        result: RefineResponse = await ai_service.refine(entry.description, "time_entry")
        if result.refined_by_ai:
            await time_entry_repository.update(
                db, record_id, {"description": result.refined}, organization_id
            )
        return result


time_entry_service: TimeEntryService = TimeEntryService()
