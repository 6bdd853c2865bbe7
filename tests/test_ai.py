"""AI 텍스트 정제 API 테스트 — 실패 시 원문 반환.

AI refinement API tests — the endpoint falls back to the original text
and never errors.
"""

import json

import httpx
from httpx import AsyncClient

from lexiflow.config import settings
from lexiflow.services.ai_service import SYSTEM_PROMPTS, ai_service
from tests.conftest import auth_header

URL = "/api/v1/ai/refine"


def _mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestRefine:
    async def test_fallback_without_key(self, client: AsyncClient, associate_token, monkeypatch):
        monkeypatch.setattr(settings, "AI_API_KEY", "")
        res = await client.post(URL, json={"text": "called client re settlement"}, headers=auth_header(associate_token))
        assert res.status_code == 200
        assert res.json() == {
            "original": "called client re settlement",
            "refined": "called client re settlement",
            "model": None,
            "refined_by_ai": False,
        }

    async def test_refined_by_model(self, client: AsyncClient, associate_token, monkeypatch):
        captured: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["auth"] = request.headers["Authorization"]
            captured["path"] = request.url.path
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={
                "model": "gpt-test",
                "choices": [{"message": {"content": "  The parties shall keep all terms confidential.  "}}],
            })

        monkeypatch.setattr(settings, "AI_API_KEY", "sk-test")
        monkeypatch.setattr(ai_service, "_client", _mock_client(handler))

        res = await client.post(URL, json={"text": "keep it secret", "kind": "clause"}, headers=auth_header(associate_token))
        data = res.json()
        assert data["refined_by_ai"] is True
        assert data["refined"] == "The parties shall keep all terms confidential."
        assert data["model"] == "gpt-test"

        assert captured["auth"] == "Bearer sk-test"
        assert captured["path"].endswith("/chat/completions")
        assert captured["body"]["messages"][0]["content"] == SYSTEM_PROMPTS["clause"]
        assert captured["body"]["messages"][1]["content"] == "keep it secret"

    async def test_upstream_error_falls_back(self, client: AsyncClient, associate_token, monkeypatch):
        monkeypatch.setattr(settings, "AI_API_KEY", "sk-test")
        monkeypatch.setattr(ai_service, "_client", _mock_client(lambda request: httpx.Response(500, json={})))

        res = await client.post(URL, json={"text": "draft memo"}, headers=auth_header(associate_token))
        assert res.status_code == 200
        assert res.json()["refined_by_ai"] is False
        assert res.json()["refined"] == "draft memo"

    async def test_malformed_response_falls_back(self, client: AsyncClient, associate_token, monkeypatch):
        monkeypatch.setattr(settings, "AI_API_KEY", "sk-test")
        monkeypatch.setattr(ai_service, "_client", _mock_client(lambda request: httpx.Response(200, json={"choices": []})))

        res = await client.post(URL, json={"text": "draft memo"}, headers=auth_header(associate_token))
        assert res.json()["refined_by_ai"] is False

    async def test_invalid_kind(self, client: AsyncClient, associate_token):
        res = await client.post(URL, json={"text": "x", "kind": "poetry"}, headers=auth_header(associate_token))
        assert res.status_code == 400
