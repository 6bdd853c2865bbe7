"""검색 프록시 서비스 — 외부 하이브리드/시맨틱 검색 제공자 연동.

Search Service — thin proxy to the external hybrid/semantic search provider.
No ranking or vector math happens here: request shapes are forwarded with
the caller's organization as a filter, and each executed query is recorded
in search history.
"""

import logging
import time
from typing import Any
from uuid import UUID

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.config import settings
from lexiflow.models.user import UserProfile
from lexiflow.repositories.search_repository import search_query_repository
from lexiflow.schemas.search import (
    HybridSearchRequest,
    SearchQueryResponse,
    SearchResult,
    SemanticSearchRequest,
)
from lexiflow.utils.exceptions import UpstreamError

logger = logging.getLogger(__name__)


def _to_result(item: dict[str, Any]) -> SearchResult:
    document_id: Any = item.get("document_id")
    return SearchResult(
        id=str(item["id"]),
        document_id=str(document_id) if document_id is not None else None,
        content=item.get("content") or "",
        similarity=float(item.get("similarity") or 0.0),
        metadata=item.get("metadata"),
    )


class SearchService:
    """검색 제공자 프록시 (Search provider proxy)."""

    def __init__(self) -> None:
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=settings.SEARCH_TIMEOUT_SECONDS)
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료 (Close the HTTP client)."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _forward(self, mode: str, payload: dict[str, Any]) -> list[SearchResult]:
        """제공자에 요청을 전달하고 결과를 변환합니다.

        POST the payload to `{SEARCH_PROVIDER_URL}/{mode}` and map the
        provider's results. The provider may answer with a bare list or
        with `{"results": [...]}`.

        Raises:
            UpstreamError: 연결 실패, 2xx 외 응답, 잘못된 응답 본문
                           (Connection failure, non-2xx status or malformed body)
        """
        headers: dict[str, str] = {}
        if settings.SEARCH_PROVIDER_API_KEY:
            headers["Authorization"] = f"Bearer {settings.SEARCH_PROVIDER_API_KEY}"
        url: str = f"{settings.SEARCH_PROVIDER_URL.rstrip('/')}/{mode}"

        try:
            client: httpx.AsyncClient = await self._get_client()
            response: httpx.Response = await client.post(url, json=payload, headers=headers)
            response.raise_for_status()
            body: Any = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("Search provider %s returned HTTP %s", mode, e.response.status_code)
            raise UpstreamError("Search provider unavailable") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Search provider %s request failed: %s", mode, e)
            raise UpstreamError("Search provider unavailable") from e

        items: Any = body.get("results", []) if isinstance(body, dict) else body
        try:
            return [_to_result(item) for item in items]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error("Search provider %s response malformed: %s", mode, e)
            raise UpstreamError("Search provider unavailable") from e

    async def _execute(
        self,
        db: AsyncSession,
        user: UserProfile,
        mode: str,
        query_text: str,
        payload: dict[str, Any],
    ) -> list[SearchResult]:
        payload["filters"] = {"organization_id": str(user.organization_id)}

        started: float = time.perf_counter()
        results: list[SearchResult] = await self._forward(mode, payload)
        elapsed_ms: float = round((time.perf_counter() - started) * 1000, 2)

        await search_query_repository.create(
            db,
            {
                "organization_id": user.organization_id,
                "user_id": user.id,
                "query_text": query_text,
                "mode": mode,
                "result_count": len(results),
                "execution_ms": elapsed_ms,
            },
        )
        return results

    async def semantic(
        self,
        db: AsyncSession,
        user: UserProfile,
        request: SemanticSearchRequest,
    ) -> list[SearchResult]:
        """시맨틱 검색 — 임베딩이 없으면 제공자를 호출하지 않고 빈 결과.

        Semantic search. A missing or empty embedding returns `[]` without
        calling the provider.
        """
        if not request.embedding:
            return []
        payload: dict[str, Any] = {
            "query": request.query,
            "embedding": request.embedding,
            "limit": request.limit,
            "threshold": request.threshold,
        }
        return await self._execute(db, user, "semantic", request.query, payload)

    async def hybrid(
        self,
        db: AsyncSession,
        user: UserProfile,
        request: HybridSearchRequest,
    ) -> list[SearchResult]:
        """하이브리드 검색 — 가중치/임계값을 그대로 전달.

        Hybrid (keyword + semantic) search; weights and threshold are
        forwarded unchanged. Same empty-embedding rule as semantic search.
        """
        if not request.embedding:
            return []
        payload: dict[str, Any] = request.model_dump(exclude={"threshold"})
        if request.threshold is not None:
            payload["threshold"] = request.threshold
        return await self._execute(db, user, "hybrid", request.query, payload)

    async def history(
        self,
        db: AsyncSession,
        organization_id: UUID,
        limit: int,
    ) -> list[SearchQueryResponse]:
        """조직의 최근 검색 기록 (Recent searches of the caller's organization)."""
        rows = await search_query_repository.get_recent(db, organization_id, limit)
        return [SearchQueryResponse.model_validate(row) for row in rows]


# 싱글턴 인스턴스 — Singleton instance
search_service: SearchService = SearchService()
