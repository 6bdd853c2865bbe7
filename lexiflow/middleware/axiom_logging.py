"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per request to Axiom: method, path, params,
masked request body, status code, duration, client IP and error detail.
Client-confidential fields (SSN, tax id, bank numbers) are masked along
with credentials. Without AXIOM_API_TOKEN / AXIOM_DATASET the middleware
is a pass-through.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from lexiflow.config import settings

logger = logging.getLogger(__name__)

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies and query params
# 짧은 약어(ssn, ein, dob)는 단어 단위로만 일치 — Short tokens only match whole snake_case words
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential"
    r"|social_security|tax_id|taxid|bank_account|routing_number|date_of_birth)"
    r"|(?:^|_)(ssn|ein|dob)(?:$|_)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = frozenset({"/health", "/docs", "/redoc", "/openapi.json"})

_MAX_DEPTH = 5
_MAX_ITEMS = 20
_MAX_ERROR_LEN = 500


def _mask(data: Any, depth: int = 0) -> Any:
    """민감 필드 재귀 마스킹 — Recursively mask sensitive keys in dicts/lists."""
    if depth > _MAX_DEPTH:
        return "..."
    if isinstance(data, dict):
        return {
            key: "***" if _SENSITIVE_KEYS.search(str(key)) else _mask(value, depth + 1)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [_mask(item, depth + 1) for item in data[:_MAX_ITEMS]]
    if isinstance(data, str) and len(data) > 2000:
        return data[:2000] + "...(truncated)"
    return data


async def _read_json_body(request: Request) -> Any:
    """요청 본문을 JSON으로 읽어 마스킹 (Read and mask a JSON request body)."""
    if request.method not in ("POST", "PUT", "PATCH"):
        return None
    body: bytes = await request.body()
    if not body:
        return None
    try:
        return _mask(json.loads(body))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"


def _error_detail(body: bytes) -> str:
    """오류 응답 본문에서 사유 추출 (Extract the `detail` of an error response)."""
    try:
        data: Any = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:_MAX_ERROR_LEN]
    detail: Any = data.get("detail", data) if isinstance(data, dict) else data
    text: str = detail if isinstance(detail, str) else json.dumps(detail, default=str)
    return text if len(text) <= _MAX_ERROR_LEN else text[:_MAX_ERROR_LEN] + "..."


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs every API request and its outcome to Axiom.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    def _send(self, event: dict[str, Any]) -> None:
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception as exc:  # noqa: BLE001
            # 로깅 실패는 요청 처리에 영향 없음 — Log delivery failures never fail the request
            logger.warning("Axiom ingest failed: %s", exc)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 및 Axiom 미설정시 패스스루 — Skip excluded paths or when unconfigured
        if self._client is None or request.url.path in _SKIP_PATHS:
            return await call_next(request)

        started: float = time.perf_counter()
        event: dict[str, Any] = {
            "service": settings.APP_NAME,
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else None,
        }
        if request.query_params:
            event["query_params"] = _mask(dict(request.query_params))

        request_body: Any = await _read_json_body(request)
        if request_body is not None:
            event["request_body"] = request_body

        status_code: int = 500
        try:
            response: Response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body에서 사유 추출 후 재구성 — Capture error detail and rebuild the response
            if status_code >= 400:
                body: bytes = b""
                async for chunk in response.body_iterator:
                    body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = _error_detail(body)
                response = Response(
                    content=body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            if request.path_params:
                event["path_params"] = dict(request.path_params)
            event["status_code"] = status_code
            event["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            self._send(event)

        return response
