"""공통 동작 테스트 — 헬스 체크, 페이지네이션, 검증 오류, 인증.

Cross-cutting behaviour: health check, pagination envelope, validation
errors and authentication.
"""

from httpx import AsyncClient

from lexiflow.utils.jwt import create_refresh_token
from tests.conftest import auth_header

CLIENTS = "/api/v1/clients"


async def test_health(client: AsyncClient):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


class TestPagination:
    async def test_envelope(self, client: AsyncClient, associate_token):
        headers = auth_header(associate_token)
        for name in ("Alpha LLC", "Beta Inc", "Gamma Co"):
            await client.post(CLIENTS, json={"name": name}, headers=headers)

        first = (await client.get(CLIENTS, params={"limit": 2}, headers=headers)).json()
        assert first["pagination"] == {"page": 1, "limit": 2, "total": 3, "totalPages": 2}
        assert [c["name"] for c in first["data"]] == ["Alpha LLC", "Beta Inc"]

        second = (await client.get(CLIENTS, params={"limit": 2, "page": 2}, headers=headers)).json()
        assert [c["name"] for c in second["data"]] == ["Gamma Co"]

    async def test_empty_list(self, client: AsyncClient, associate_token):
        body = (await client.get(CLIENTS, headers=auth_header(associate_token))).json()
        assert body["data"] == []
        assert body["pagination"] == {"page": 1, "limit": 50, "total": 0, "totalPages": 0}

    async def test_limit_bounds(self, client: AsyncClient, associate_token):
        headers = auth_header(associate_token)
        assert (await client.get(CLIENTS, params={"limit": 0}, headers=headers)).status_code == 400
        assert (await client.get(CLIENTS, params={"limit": 201}, headers=headers)).status_code == 400
        assert (await client.get(CLIENTS, params={"page": 0}, headers=headers)).status_code == 400
        assert (await client.get(CLIENTS, params={"limit": 200}, headers=headers)).status_code == 200


class TestErrors:
    async def test_validation_error_shape(self, client: AsyncClient, associate_token):
        res = await client.post(CLIENTS, json={}, headers=auth_header(associate_token))
        assert res.status_code == 400
        detail = res.json()["detail"]
        assert isinstance(detail, list)
        assert detail[0]["loc"][-1] == "name"

    async def test_missing_token(self, client: AsyncClient):
        res = await client.get(CLIENTS)
        assert res.status_code in (401, 403)

    async def test_garbage_token(self, client: AsyncClient):
        res = await client.get(CLIENTS, headers=auth_header("not-a-jwt"))
        assert res.status_code == 401

    async def test_refresh_token_rejected_as_access(self, client: AsyncClient, associate_user):
        token = create_refresh_token({"sub": str(associate_user.id)})
        res = await client.get(CLIENTS, headers=auth_header(token))
        assert res.status_code == 401
