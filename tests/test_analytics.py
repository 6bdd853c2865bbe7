"""분석 이벤트 수집 API 테스트.

Analytics ingest API tests.
"""

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/api/v1/analytics/events"


class TestAnalyticsIngest:
    async def test_ingest_batch(self, client: AsyncClient, associate_token):
        headers = auth_header(associate_token)
        res = await client.post(URL, json={"events": [
            {"name": "page_view", "properties": {"path": "/cases"}},
            {"name": "case_opened", "properties": {"case": "abc"}, "occurred_at": "2024-05-01T10:00:00Z"},
        ]}, headers=headers)
        assert res.status_code == 202
        assert res.json() == {"accepted": 2}

        count = await client.get(f"{URL}/count", headers=headers)
        assert count.json() == {"total": 2}

    async def test_count_is_tenant_scoped(self, client: AsyncClient, associate_token, other_token):
        await client.post(URL, json={"events": [{"name": "login"}]}, headers=auth_header(associate_token))
        count = await client.get(f"{URL}/count", headers=auth_header(other_token))
        assert count.json() == {"total": 0}

    async def test_empty_batch_rejected(self, client: AsyncClient, associate_token):
        res = await client.post(URL, json={"events": []}, headers=auth_header(associate_token))
        assert res.status_code == 400

    async def test_oversized_batch_rejected(self, client: AsyncClient, associate_token):
        events = [{"name": f"e{i}"} for i in range(501)]
        res = await client.post(URL, json={"events": events}, headers=auth_header(associate_token))
        assert res.status_code == 400
