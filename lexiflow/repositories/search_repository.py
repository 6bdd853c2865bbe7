"""검색 기록 레포지토리.

Search Query Repository — history of queries forwarded to the provider.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.models.search import SearchQuery
from lexiflow.repositories.base import BaseRepository


class SearchQueryRepository(BaseRepository[SearchQuery]):
    def __init__(self) -> None:
        super().__init__(SearchQuery)

    async def get_recent(
        self,
        db: AsyncSession,
        organization_id: UUID,
        limit: int = 50,
    ) -> Sequence[SearchQuery]:
        """조직의 최근 검색 기록을 조회합니다 (Most recent queries of an organization)."""
        query: Select = (
            select(SearchQuery)
            .where(SearchQuery.organization_id == organization_id)
            .order_by(SearchQuery.created_at.desc())
            .limit(limit)
        )
        result = await db.execute(query)
        return result.scalars().all()


search_query_repository: SearchQueryRepository = SearchQueryRepository()
