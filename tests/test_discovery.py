"""디스커버리 요청 API 테스트.

Discovery request API tests — ordering by due date, filters and validation.
"""

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/api/v1/discovery-requests"


def _body(case_id: str, **fields) -> dict:
    body = {
        "case_id": case_id,
        "request_type": "Production",
        "propounding_party": "Plaintiff",
        "responding_party": "Defendant",
        "title": "Request for production",
    }
    body.update(fields)
    return body


class TestDiscoveryRequests:
    async def test_create_then_fetch(self, client: AsyncClient, associate_token, case):
        headers = auth_header(associate_token)
        res = await client.post(URL, json=_body(case["id"], service_date="2024-01-10", due_date="2024-02-09"), headers=headers)
        assert res.status_code == 201
        created = res.json()
        assert created["status"] == "Draft"

        fetched = (await client.get(f"{URL}/{created['id']}", headers=headers)).json()
        assert fetched["due_date"] == "2024-02-09"
        assert fetched["request_type"] == "Production"

    async def test_list_ordered_by_due_date(self, client: AsyncClient, associate_token, case):
        """마감일 오름차순, 마감일 없는 요청은 마지막."""
        headers = auth_header(associate_token)
        await client.post(URL, json=_body(case["id"], title="Later", due_date="2024-06-01"), headers=headers)
        await client.post(URL, json=_body(case["id"], title="No date"), headers=headers)
        await client.post(URL, json=_body(case["id"], title="Sooner", due_date="2024-03-01"), headers=headers)

        res = await client.get(URL, headers=headers)
        assert [r["title"] for r in res.json()["data"]] == ["Sooner", "Later", "No date"]

    async def test_filter_by_status(self, client: AsyncClient, associate_token, case):
        headers = auth_header(associate_token)
        await client.post(URL, json=_body(case["id"], title="Served one", status="Served"), headers=headers)
        await client.post(URL, json=_body(case["id"], title="Draft one"), headers=headers)
        res = await client.get(URL, params={"status": "Served"}, headers=headers)
        assert [r["title"] for r in res.json()["data"]] == ["Served one"]

    async def test_invalid_request_type(self, client: AsyncClient, associate_token, case):
        res = await client.post(URL, json=_body(case["id"], request_type="Subpoena"), headers=auth_header(associate_token))
        assert res.status_code == 400

    async def test_update_status(self, client: AsyncClient, associate_token, case):
        headers = auth_header(associate_token)
        created = (await client.post(URL, json=_body(case["id"]), headers=headers)).json()
        res = await client.patch(f"{URL}/{created['id']}", json={
            "status": "Responded", "response_preview": "Objection, overbroad.",
        }, headers=headers)
        assert res.status_code == 200
        assert res.json()["status"] == "Responded"
        assert res.json()["response_preview"] == "Objection, overbroad."
