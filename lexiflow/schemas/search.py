"""검색 프록시 Pydantic 스키마 정의.

Search proxy request/response schemas. These only describe the request
shape forwarded to the external provider; no ranking happens locally.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SemanticSearchRequest(BaseModel):
    """시맨틱 검색 요청 (Semantic search request).

    Attributes:
        query: 검색어 (Query text, logged for history)
        limit: 최대 결과 수 (Max results)
        threshold: 최소 유사도 (Minimum similarity, 0~1)
        embedding: 쿼리 임베딩 — 비어 있으면 빈 결과 (Empty/missing returns no results)
    """

    query: str = Field(..., min_length=1)
    limit: int = Field(10, ge=1, le=100)
    threshold: float = Field(0.7, ge=0, le=1)
    embedding: list[float] | None = None


class HybridSearchRequest(BaseModel):
    """하이브리드(키워드 + 시맨틱) 검색 요청 (Hybrid search request)."""

    query: str = Field(..., min_length=1)
    limit: int = Field(10, ge=1, le=100)
    semantic_weight: float = Field(0.7, ge=0, le=1)
    keyword_weight: float = Field(0.3, ge=0, le=1)
    threshold: float | None = Field(None, ge=0, le=1)
    embedding: list[float] | None = None


class SearchResult(BaseModel):
    """검색 결과 항목 (One result returned by the provider)."""

    id: str
    document_id: str | None = None
    content: str = ""
    similarity: float = 0.0
    metadata: dict[str, Any] | None = None


class SearchQueryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID | None
    query_text: str
    mode: str
    result_count: int
    execution_ms: float
    created_at: datetime
