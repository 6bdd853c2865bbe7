"""사용자 관리 API 테스트 — 관리자 전용 권한.

User management API tests — administrator-only access.
"""

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/api/v1/users"

NEW_USER = {
    "email": "New.Associate@Test.com",
    "password": "welcome123!",
    "full_name": "Nora Park",
    "role": "Associate",
    "office": "Chicago",
}


class TestUserManagement:
    async def test_admin_creates_user(self, client: AsyncClient, admin_token, org):
        res = await client.post(URL, json=NEW_USER, headers=auth_header(admin_token))
        assert res.status_code == 201
        data = res.json()
        assert data["email"] == "new.associate@test.com"
        assert data["organization_id"] == str(org.id)
        assert data["is_active"] is True
        assert "password" not in data
        assert "password_hash" not in data

    async def test_created_user_can_login(self, client: AsyncClient, admin_token):
        await client.post(URL, json=NEW_USER, headers=auth_header(admin_token))
        res = await client.post("/api/v1/auth/login", json={
            "email": "new.associate@test.com", "password": "welcome123!",
        })
        assert res.status_code == 200
        assert res.json()["user"]["full_name"] == "Nora Park"

    async def test_duplicate_email(self, client: AsyncClient, admin_token, associate_user):
        """대소문자만 다른 이메일도 중복."""
        res = await client.post(URL, json={**NEW_USER, "email": "ASSOCIATE@test.com"}, headers=auth_header(admin_token))
        assert res.status_code == 409

    async def test_non_admin_forbidden(self, client: AsyncClient, associate_token, partner_token):
        assert (await client.get(URL, headers=auth_header(associate_token))).status_code == 403
        assert (await client.post(URL, json=NEW_USER, headers=auth_header(partner_token))).status_code == 403

    async def test_list_filtered_by_role(self, client: AsyncClient, admin_token, associate_user, paralegal_user, other_user):
        res = await client.get(URL, params={"role": "Paralegal"}, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert [u["email"] for u in res.json()["data"]] == ["paralegal@test.com"]

    async def test_list_scoped_to_org(self, client: AsyncClient, admin_token, other_user):
        res = await client.get(URL, headers=auth_header(admin_token))
        emails = [u["email"] for u in res.json()["data"]]
        assert "admin@test.com" in emails
        assert "admin@rival.com" not in emails

    async def test_update_role_and_deactivate(self, client: AsyncClient, admin_token, associate_user):
        headers = auth_header(admin_token)
        res = await client.patch(f"{URL}/{associate_user.id}", json={"role": "Senior Partner", "is_active": False}, headers=headers)
        assert res.status_code == 200
        assert res.json()["role"] == "Senior Partner"
        assert res.json()["is_active"] is False

        login = await client.post("/api/v1/auth/login", json={
            "email": "associate@test.com", "password": "password123!",
        })
        assert login.status_code == 401

    async def test_change_password(self, client: AsyncClient, admin_token, associate_user):
        await client.patch(f"{URL}/{associate_user.id}", json={"password": "rotated-secret"}, headers=auth_header(admin_token))
        res = await client.post("/api/v1/auth/login", json={
            "email": "associate@test.com", "password": "rotated-secret",
        })
        assert res.status_code == 200

    async def test_delete_user(self, client: AsyncClient, admin_token):
        headers = auth_header(admin_token)
        created = (await client.post(URL, json=NEW_USER, headers=headers)).json()
        assert (await client.delete(f"{URL}/{created['id']}", headers=headers)).status_code == 204
        assert (await client.get(f"{URL}/{created['id']}", headers=headers)).status_code == 404

    async def test_cannot_delete_self(self, client: AsyncClient, admin_token, admin_user):
        res = await client.delete(f"{URL}/{admin_user.id}", headers=auth_header(admin_token))
        assert res.status_code == 400

    async def test_other_org_user_not_found(self, client: AsyncClient, admin_token, other_user):
        res = await client.get(f"{URL}/{other_user.id}", headers=auth_header(admin_token))
        assert res.status_code == 404
