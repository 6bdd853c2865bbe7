"""사건 서비스 — 사건 CRUD 및 통계 비즈니스 로직.

Case Service — business logic for case CRUD and statistics.
Case detail includes documents, tasks, time entries and discovery requests.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.models.case import CASE_STATUSES, Case
from lexiflow.repositories.case_repository import case_repository
from lexiflow.repositories.client_repository import client_repository
from lexiflow.schemas.case import CaseDetailResponse, CaseResponse, CaseStatsResponse
from lexiflow.services.base import BaseCrudService


class CaseService(BaseCrudService[Case, CaseResponse]):
    """사건 관련 비즈니스 로직을 처리하는 서비스.

    Service handling case business logic scoped to the organization.
    """

    def __init__(self) -> None:
        super().__init__(
            case_repository,
            CaseResponse,
            detail_schema=CaseDetailResponse,
            resource_name="Case",
            references={"client_id": (client_repository, "Client")},
        )

    async def get_stats(
        self,
        db: AsyncSession,
        organization_id: UUID,
    ) -> CaseStatsResponse:
        """조직의 사건 통계를 조회합니다.

        Count the organization's cases per status. Every known status is
        present in the result, with 0 when there are no cases in it.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            organization_id: 조직 ID (Organization UUID)

        Returns:
            CaseStatsResponse: 전체 및 상태별 건수 (Total and per-status counts)
        """
        counts: dict[str, int] = await case_repository.count_by_status(db, organization_id)
        by_status: dict[str, int] = {status: 0 for status in CASE_STATUSES}
        by_status.update(counts)
        return CaseStatsResponse(total=sum(counts.values()), by_status=by_status)


# 싱글턴 인스턴스 — Singleton instance
case_service: CaseService = CaseService()
