"""조항 라이브러리 API 테스트 — 버전 관리.

Clause API tests — CRUD and content version history.
"""

import uuid

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/api/v1/clauses"


async def _create(client: AsyncClient, token: str, **fields) -> dict:
    body = {"name": "Indemnification", "category": "Liability", "content": "Party A shall indemnify Party B."}
    body.update(fields)
    res = await client.post(URL, json=body, headers=auth_header(token))
    assert res.status_code == 201, res.text
    return res.json()


class TestClauseCrud:
    async def test_create_defaults(self, client: AsyncClient, associate_token):
        created = await _create(client, associate_token)
        assert created["version"] == 1
        assert created["usage_count"] == 0
        assert created["risk_rating"] == "Low"

    async def test_filter_by_category(self, client: AsyncClient, associate_token):
        await _create(client, associate_token, name="Confidentiality", category="Privacy")
        await _create(client, associate_token, name="Limitation", category="Liability")
        res = await client.get(URL, params={"category": "Privacy"}, headers=auth_header(associate_token))
        assert [c["name"] for c in res.json()["data"]] == ["Confidentiality"]

    async def test_delete(self, client: AsyncClient, associate_token):
        headers = auth_header(associate_token)
        created = await _create(client, associate_token)
        await client.patch(f"{URL}/{created['id']}", json={"content": "Revised text."}, headers=headers)
        assert (await client.delete(f"{URL}/{created['id']}", headers=headers)).status_code == 204
        assert (await client.get(f"{URL}/{created['id']}", headers=headers)).status_code == 404


class TestClauseVersioning:
    async def test_content_change_creates_version(self, client: AsyncClient, associate_token):
        """본문 변경 시 이전 본문이 이력에 남고 버전 증가."""
        headers = auth_header(associate_token)
        created = await _create(client, associate_token, content="Original text.")

        res = await client.patch(f"{URL}/{created['id']}", json={"content": "Second text."}, headers=headers)
        assert res.status_code == 200
        assert res.json()["version"] == 2
        assert res.json()["content"] == "Second text."

        await client.patch(f"{URL}/{created['id']}", json={"content": "Third text."}, headers=headers)

        versions = await client.get(f"{URL}/{created['id']}/versions", headers=headers)
        assert versions.status_code == 200
        data = versions.json()
        assert [v["version"] for v in data] == [2, 1]
        assert [v["content"] for v in data] == ["Second text.", "Original text."]
        assert data[0]["author"] == "Test Associate"

    async def test_non_content_change_keeps_version(self, client: AsyncClient, associate_token):
        headers = auth_header(associate_token)
        created = await _create(client, associate_token)

        res = await client.patch(f"{URL}/{created['id']}", json={"risk_rating": "High", "usage_count": 7}, headers=headers)
        assert res.json()["version"] == 1
        assert res.json()["usage_count"] == 7

        same = await client.patch(f"{URL}/{created['id']}", json={"content": created["content"]}, headers=headers)
        assert same.json()["version"] == 1

        versions = await client.get(f"{URL}/{created['id']}/versions", headers=headers)
        assert versions.json() == []

    async def test_versions_not_found(self, client: AsyncClient, associate_token):
        res = await client.get(f"{URL}/{uuid.uuid4()}/versions", headers=auth_header(associate_token))
        assert res.status_code == 404

    async def test_versions_other_org(self, client: AsyncClient, associate_token, other_token):
        created = await _create(client, associate_token)
        res = await client.get(f"{URL}/{created['id']}/versions", headers=auth_header(other_token))
        assert res.status_code == 404
