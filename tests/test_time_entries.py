"""타임 엔트리 API 테스트 — 금액 계산, AI 설명 정제.

Time entry API tests — total computation and AI narrative refinement.
"""

import httpx
from httpx import AsyncClient

from lexiflow.config import settings
from lexiflow.services.ai_service import ai_service
from lexiflow.services.time_entry_service import compute_total
from tests.conftest import auth_header

URL = "/api/v1/time-entries"


async def _create(client: AsyncClient, token: str, case_id: str, **fields) -> dict:
    body = {
        "case_id": case_id,
        "entry_date": "2024-03-15",
        "duration": 90,
        "description": "reviewed docs",
        "rate": 300,
    }
    body.update(fields)
    res = await client.post(URL, json=body, headers=auth_header(token))
    assert res.status_code == 201, res.text
    return res.json()


def test_compute_total_rounds_to_cents():
    assert str(compute_total(90, 300)) == "450.00"
    assert str(compute_total(50, 275)) == "229.17"
    assert str(compute_total(1, 0)) == "0.00"


class TestTimeEntryTotals:
    async def test_total_computed(self, client: AsyncClient, associate_token, associate_user, case):
        created = await _create(client, associate_token, case["id"])
        assert created["total"] == 450.0
        assert created["status"] == "Unbilled"
        assert created["user_id"] == str(associate_user.id)

    async def test_total_rounded(self, client: AsyncClient, associate_token, case):
        created = await _create(client, associate_token, case["id"], duration=50, rate=275)
        assert created["total"] == 229.17

    async def test_explicit_total_kept(self, client: AsyncClient, associate_token, case):
        """명시적 total은 계산값보다 우선."""
        created = await _create(client, associate_token, case["id"], total=400)
        assert created["total"] == 400.0

    async def test_update_duration_recomputes(self, client: AsyncClient, associate_token, case):
        headers = auth_header(associate_token)
        created = await _create(client, associate_token, case["id"])
        res = await client.patch(f"{URL}/{created['id']}", json={"duration": 120}, headers=headers)
        assert res.status_code == 200
        assert res.json()["total"] == 600.0

    async def test_update_rate_recomputes(self, client: AsyncClient, associate_token, case):
        headers = auth_header(associate_token)
        created = await _create(client, associate_token, case["id"])
        res = await client.patch(f"{URL}/{created['id']}", json={"rate": 200}, headers=headers)
        assert res.json()["total"] == 300.0

    async def test_update_status_keeps_total(self, client: AsyncClient, associate_token, case):
        headers = auth_header(associate_token)
        created = await _create(client, associate_token, case["id"], total=400)
        res = await client.patch(f"{URL}/{created['id']}", json={"status": "Billed"}, headers=headers)
        assert res.json()["status"] == "Billed"
        assert res.json()["total"] == 400.0

    async def test_invalid_duration(self, client: AsyncClient, associate_token, case):
        res = await client.post(URL, json={
            "case_id": case["id"], "entry_date": "2024-03-15",
            "duration": 0, "description": "x", "rate": 100,
        }, headers=auth_header(associate_token))
        assert res.status_code == 400

    async def test_filter_by_status(self, client: AsyncClient, associate_token, case):
        headers = auth_header(associate_token)
        await _create(client, associate_token, case["id"])
        await _create(client, associate_token, case["id"], status="Billed")
        res = await client.get(URL, params={"status": "Billed"}, headers=headers)
        data = res.json()["data"]
        assert len(data) == 1
        assert data[0]["status"] == "Billed"


class TestTimeEntryRefine:
    async def test_refine_without_ai_key(self, client: AsyncClient, associate_token, case, monkeypatch):
        """AI 키가 없으면 원문 유지."""
        monkeypatch.setattr(settings, "AI_API_KEY", "")
        headers = auth_header(associate_token)
        created = await _create(client, associate_token, case["id"])

        res = await client.post(f"{URL}/{created['id']}/refine", headers=headers)
        assert res.status_code == 200
        assert res.json()["refined_by_ai"] is False
        assert res.json()["refined"] == "reviewed docs"

        fetched = await client.get(f"{URL}/{created['id']}", headers=headers)
        assert fetched.json()["description"] == "reviewed docs"

    async def test_refine_updates_description(self, client: AsyncClient, associate_token, case, monkeypatch):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={
                "model": "gpt-test",
                "choices": [{"message": {"content": "Reviewed and analyzed discovery documents."}}],
            })

        monkeypatch.setattr(settings, "AI_API_KEY", "test-key")
        monkeypatch.setattr(ai_service, "_client", httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        headers = auth_header(associate_token)
        created = await _create(client, associate_token, case["id"])

        res = await client.post(f"{URL}/{created['id']}/refine", headers=headers)
        assert res.json()["refined_by_ai"] is True
        assert res.json()["model"] == "gpt-test"

        fetched = await client.get(f"{URL}/{created['id']}", headers=headers)
        assert fetched.json()["description"] == "Reviewed and analyzed discovery documents."

    async def test_refine_not_found(self, client: AsyncClient, associate_token):
        res = await client.post(f"{URL}/00000000-0000-0000-0000-000000000000/refine", headers=auth_header(associate_token))
        assert res.status_code == 404
