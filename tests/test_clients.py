"""의뢰인 API 테스트.

Client API tests — CRUD, status filter and the SET NULL link from cases.
"""

import uuid

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/api/v1/clients"


class TestClients:
    async def test_create_then_fetch(self, client: AsyncClient, associate_token):
        res = await client.post(URL, json={
            "name": "Globex",
            "industry": "Energy",
            "status": "Prospect",
            "total_billed": 1200.75,
            "risk_score": 40,
            "contact_email": "legal@globex.com",
        }, headers=auth_header(associate_token))
        assert res.status_code == 201
        created = res.json()

        fetched = (await client.get(f"{URL}/{created['id']}", headers=auth_header(associate_token))).json()
        assert fetched["name"] == "Globex"
        assert fetched["status"] == "Prospect"
        assert fetched["total_billed"] == 1200.75
        assert fetched["contact_email"] == "legal@globex.com"

    async def test_defaults(self, client: AsyncClient, associate_token):
        res = await client.post(URL, json={"name": "Hooli"}, headers=auth_header(associate_token))
        assert res.json()["status"] == "Active"
        assert res.json()["total_billed"] == 0

    async def test_filter_by_status(self, client: AsyncClient, associate_token):
        headers = auth_header(associate_token)
        await client.post(URL, json={"name": "A", "status": "Active"}, headers=headers)
        await client.post(URL, json={"name": "B", "status": "Former"}, headers=headers)
        res = await client.get(URL, params={"status": "Former"}, headers=headers)
        assert [c["name"] for c in res.json()["data"]] == ["B"]

    async def test_list_sorted_by_name(self, client: AsyncClient, associate_token):
        headers = auth_header(associate_token)
        for name in ("Zeta", "Alpha", "Mu"):
            await client.post(URL, json={"name": name}, headers=headers)
        res = await client.get(URL, headers=headers)
        assert [c["name"] for c in res.json()["data"]] == ["Alpha", "Mu", "Zeta"]

    async def test_update(self, client: AsyncClient, associate_token):
        headers = auth_header(associate_token)
        created = (await client.post(URL, json={"name": "Umbrella"}, headers=headers)).json()
        res = await client.patch(f"{URL}/{created['id']}", json={"risk_score": 85}, headers=headers)
        assert res.status_code == 200
        assert res.json()["risk_score"] == 85
        assert res.json()["name"] == "Umbrella"

    async def test_delete_unlinks_cases(self, client: AsyncClient, associate_token):
        """의뢰인 삭제 시 사건의 client_id는 NULL."""
        headers = auth_header(associate_token)
        created = (await client.post(URL, json={"name": "Wayne Enterprises"}, headers=headers)).json()
        case = (await client.post("/api/v1/cases", json={
            "title": "Wayne matter", "client_name": "Wayne Enterprises", "client_id": created["id"],
        }, headers=headers)).json()

        res = await client.delete(f"{URL}/{created['id']}", headers=headers)
        assert res.status_code == 204

        fetched = (await client.get(f"/api/v1/cases/{case['id']}", headers=headers)).json()
        assert fetched["client_id"] is None
        assert fetched["client_name"] == "Wayne Enterprises"

    async def test_not_found(self, client: AsyncClient, associate_token):
        headers = auth_header(associate_token)
        missing = uuid.uuid4()
        assert (await client.get(f"{URL}/{missing}", headers=headers)).status_code == 404
        assert (await client.patch(f"{URL}/{missing}", json={"name": "X"}, headers=headers)).status_code == 404
        assert (await client.delete(f"{URL}/{missing}", headers=headers)).status_code == 404
