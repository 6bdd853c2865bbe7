"""검색 라우터 — 외부 검색 제공자 프록시.

Search Router — proxies semantic and hybrid search to the external
provider and exposes the organization's search history.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import get_current_user
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.search import (
    HybridSearchRequest,
    SearchQueryResponse,
    SearchResult,
    SemanticSearchRequest,
)
from lexiflow.services.search_service import search_service

router: APIRouter = APIRouter()


@router.post("/semantic", response_model=list[SearchResult])
async def semantic_search(
    data: SemanticSearchRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> list[SearchResult]:
    """시맨틱 검색 — 임베딩이 없으면 빈 결과.

    Semantic search. Returns an empty list when no embedding is supplied.
    """
    results: list[SearchResult] = await search_service.semantic(db, current_user, data)
    await db.commit()
    return results


@router.post("/hybrid", response_model=list[SearchResult])
async def hybrid_search(
    data: HybridSearchRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> list[SearchResult]:
    """하이브리드(키워드 + 시맨틱) 검색 (Hybrid keyword + semantic search)."""
    results: list[SearchResult] = await search_service.hybrid(db, current_user, data)
    await db.commit()
    return results


@router.get("/history", response_model=list[SearchQueryResponse])
async def search_history(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
    limit: Annotated[int, Query(ge=1, le=200)] = 50,
) -> list[SearchQueryResponse]:
    """조직의 최근 검색 기록 (Recent searches of the caller's organization)."""
    return await search_service.history(db, current_user.organization_id, limit)
