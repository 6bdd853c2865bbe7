"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides a paginate helper and the `{data, pagination}` response envelope
shared by every list endpoint.
"""

import math
from typing import Any, Generic, Sequence, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class PaginationMeta(BaseModel):
    """페이지네이션 메타데이터.

    Pagination metadata for client-side pagination controls.

    Attributes:
        page: 현재 페이지 번호, 1부터 시작 (Current page, 1-indexed)
        limit: 페이지당 항목 수 (Items per page)
        total: 전체 항목 수 (Total item count)
        totalPages: 전체 페이지 수 (ceil(total / limit), 0 when empty)
    """

    page: int
    limit: int
    total: int
    totalPages: int


class Paginated(BaseModel, Generic[T]):
    """페이지네이션 응답 봉투 — {data, pagination}.

    Paginated response envelope.
    """

    data: list[T]
    pagination: PaginationMeta

    @classmethod
    def build(cls, items: Sequence[Any], total: int, page: int, limit: int) -> "Paginated[T]":
        """항목과 전체 개수로 응답을 구성합니다 (Build an envelope from a page of items)."""
        total_pages: int = math.ceil(total / limit) if limit > 0 else 0
        return cls(
            data=list(items),
            pagination=PaginationMeta(page=page, limit=limit, total=total, totalPages=total_pages),
        )


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page: int = 1,
    limit: int = 50,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy query, returning items and total count.
    Runs two queries: one for the total count (via subquery) and one for
    the actual page of results with OFFSET/LIMIT.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query to paginate)
        page: 요청 페이지 번호, 1부터 시작 (Page number, 1-indexed)
        limit: 페이지당 항목 수 (Items per page)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수)
    """
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    offset: int = (page - 1) * limit
    result = await db.execute(query.offset(offset).limit(limit))
    items: Sequence[Any] = result.scalars().all()

    return items, total
