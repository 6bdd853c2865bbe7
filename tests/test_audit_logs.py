"""감사 로그 API 테스트.

Audit log API tests — actor/IP capture and read permissions.
"""

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/api/v1/audit-logs"


class TestAuditLogs:
    async def test_create_records_actor(self, client: AsyncClient, associate_token, associate_user):
        res = await client.post(URL, json={"action": "VIEW", "resource": "Case/123"}, headers=auth_header(associate_token))
        assert res.status_code == 201
        data = res.json()
        assert data["user_id"] == str(associate_user.id)
        assert data["user_name"] == "Test Associate"
        assert data["ip"] == "127.0.0.1"

    async def test_associate_cannot_read(self, client: AsyncClient, associate_token):
        res = await client.get(URL, headers=auth_header(associate_token))
        assert res.status_code == 403

    async def test_partner_lists_with_filter(self, client: AsyncClient, associate_token, partner_token):
        headers = auth_header(associate_token)
        await client.post(URL, json={"action": "VIEW", "resource": "Case/1"}, headers=headers)
        await client.post(URL, json={"action": "EXPORT", "resource": "Document/7"}, headers=headers)

        res = await client.get(URL, params={"action": "EXPORT"}, headers=auth_header(partner_token))
        assert res.status_code == 200
        body = res.json()
        assert body["pagination"]["total"] == 1
        assert body["data"][0]["resource"] == "Document/7"

    async def test_admin_gets_entry(self, client: AsyncClient, associate_token, admin_token):
        created = (await client.post(URL, json={"action": "DELETE", "resource": "Task/3"}, headers=auth_header(associate_token))).json()
        res = await client.get(f"{URL}/{created['id']}", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json()["action"] == "DELETE"

    async def test_entries_are_append_only(self, client: AsyncClient, associate_token, admin_token):
        created = (await client.post(URL, json={"action": "VIEW", "resource": "Case/1"}, headers=auth_header(associate_token))).json()
        res = await client.patch(f"{URL}/{created['id']}", json={"action": "EDIT"}, headers=auth_header(admin_token))
        assert res.status_code == 405

    async def test_tenant_isolation(self, client: AsyncClient, associate_token, other_token):
        created = (await client.post(URL, json={"action": "VIEW", "resource": "Case/1"}, headers=auth_header(associate_token))).json()
        res = await client.get(f"{URL}/{created['id']}", headers=auth_header(other_token))
        assert res.status_code == 404
