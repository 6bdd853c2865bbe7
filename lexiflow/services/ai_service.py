"""AI 텍스트 정제 서비스 — OpenAI 호환 chat completions 클라이언트.

AI Refinement Service — best-effort rewriting of billing narratives and
clause text through an OpenAI-compatible chat completions endpoint.

The call never fails the request: without an API key, or when the upstream
call errors, the original text is returned with refined_by_ai = False.
"""

import logging
from typing import Any

import httpx

from lexiflow.config import settings
from lexiflow.schemas.ai import RefineKind, RefineResponse

logger = logging.getLogger(__name__)

# 정제 종류별 시스템 프롬프트 — System prompt per refinement kind
SYSTEM_PROMPTS: dict[str, str] = {
    "time_entry": (
        "You are a legal billing assistant. Rewrite the time entry narrative "
        "so it is professional, specific and value-oriented for a client invoice. "
        "Keep every fact. Return only the rewritten narrative."
    ),
    "clause": (
        "You are a contracts attorney. Tighten the following clause for clarity "
        "and enforceability without changing its legal effect. "
        "Return only the revised clause."
    ),
    "general": (
        "Improve the clarity and professional tone of the following legal text "
        "without changing its meaning. Return only the revised text."
    ),
}


class AIRefinementService:
    """OpenAI 호환 API 비동기 클라이언트.

    Async client for an OpenAI-compatible chat completions API.
    The underlying httpx client is created lazily and reused.
    """

    def __init__(self) -> None:
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=settings.AI_TIMEOUT_SECONDS)
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료 (Close the HTTP client)."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _fallback(self, text: str) -> RefineResponse:
        return RefineResponse(original=text, refined=text, model=None, refined_by_ai=False)

    async def refine(self, text: str, kind: RefineKind = "general") -> RefineResponse:
        """텍스트를 AI로 정제합니다.

        Rewrite `text` with the configured model.

        Args:
            text: 원문 (Text to refine)
            kind: 정제 종류 (Refinement kind selecting the system prompt)

        Returns:
            RefineResponse: 정제 결과, 실패 시 원문 그대로
                            (Refined text, or the original on any failure)
        """
        if not settings.AI_API_KEY:
            return self._fallback(text)

        payload: dict[str, Any] = {
            "model": settings.AI_MODEL,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPTS.get(kind, SYSTEM_PROMPTS["general"])},
                {"role": "user", "content": text},
            ],
            "temperature": 0.2,
        }
        headers: dict[str, str] = {"Authorization": f"Bearer {settings.AI_API_KEY}"}
        url: str = f"{settings.AI_BASE_URL.rstrip('/')}/chat/completions"

        try:
            client: httpx.AsyncClient = await self._get_client()
            response: httpx.Response = await client.post(url, json=payload, headers=headers)
            response.raise_for_status()
            data: dict[str, Any] = response.json()
            content: str | None = data["choices"][0]["message"]["content"]
        except httpx.HTTPStatusError as e:
            logger.warning("AI refinement returned HTTP %s", e.response.status_code)
            return self._fallback(text)
        except httpx.HTTPError as e:
            logger.warning("AI refinement request failed: %s", e)
            return self._fallback(text)
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning("AI refinement response malformed: %s", e)
            return self._fallback(text)

        refined: str = (content or "").strip()
        if not refined:
            return self._fallback(text)
        return RefineResponse(
            original=text,
            refined=refined,
            model=data.get("model") or settings.AI_MODEL,
            refined_by_ai=True,
        )


# 싱글턴 인스턴스 — Singleton instance
ai_service: AIRefinementService = AIRefinementService()
