"""인증 API 테스트 — 로그인, 토큰 갱신, /me 엔드포인트.

Auth API tests — login, token refresh and /me, with invalid-token edge cases.
"""

from httpx import AsyncClient

from lexiflow.utils.jwt import create_refresh_token
from tests.conftest import auth_header

AUTH = "/api/v1/auth"


class TestLogin:
    """로그인 테스트."""

    async def test_login_success(self, client: AsyncClient, admin_user):
        """로그인 성공 — 토큰 쌍과 사용자 정보 반환."""
        res = await client.post(f"{AUTH}/login", json={
            "email": "admin@test.com",
            "password": "admin12345!",
        })
        assert res.status_code == 200
        data = res.json()
        assert data["access_token"]
        assert data["refresh_token"]
        assert data["token_type"] == "bearer"
        assert data["user"]["email"] == "admin@test.com"
        assert data["user"]["role"] == "Administrator"
        assert data["user"]["last_login_at"] is not None
        assert "password_hash" not in data["user"]

    async def test_login_email_case_insensitive(self, client: AsyncClient, admin_user):
        """이메일 대소문자 무시."""
        res = await client.post(f"{AUTH}/login", json={
            "email": "ADMIN@Test.com",
            "password": "admin12345!",
        })
        assert res.status_code == 200

    async def test_login_wrong_password(self, client: AsyncClient, admin_user):
        """잘못된 비밀번호로 로그인 실패."""
        res = await client.post(f"{AUTH}/login", json={
            "email": "admin@test.com",
            "password": "wrong_password",
        })
        assert res.status_code == 401

    async def test_login_nonexistent_user(self, client: AsyncClient, org):
        """존재하지 않는 사용자로 로그인 실패."""
        res = await client.post(f"{AUTH}/login", json={
            "email": "nobody@test.com",
            "password": "whatever123",
        })
        assert res.status_code == 401

    async def test_login_inactive_user(self, client: AsyncClient, db, associate_user):
        """비활성 계정 로그인 실패."""
        associate_user.is_active = False
        await db.flush()
        res = await client.post(f"{AUTH}/login", json={
            "email": "associate@test.com",
            "password": "password123!",
        })
        assert res.status_code == 401

    async def test_login_missing_fields(self, client: AsyncClient):
        """필드 누락 시 400."""
        res = await client.post(f"{AUTH}/login", json={"email": "admin@test.com"})
        assert res.status_code == 400


class TestRefresh:
    """토큰 갱신 테스트."""

    async def test_refresh_success(self, client: AsyncClient, admin_user):
        """리프레시 토큰으로 새 토큰 쌍 발급."""
        login = await client.post(f"{AUTH}/login", json={
            "email": "admin@test.com",
            "password": "admin12345!",
        })
        refresh_token = login.json()["refresh_token"]

        res = await client.post(f"{AUTH}/refresh", json={"refresh_token": refresh_token})
        assert res.status_code == 200
        data = res.json()
        assert data["access_token"]
        assert data["user"]["id"] == str(admin_user.id)

        me = await client.get(f"{AUTH}/me", headers=auth_header(data["access_token"]))
        assert me.status_code == 200

    async def test_refresh_with_access_token_rejected(self, client: AsyncClient, admin_token):
        """액세스 토큰으로 갱신 시도 시 401."""
        res = await client.post(f"{AUTH}/refresh", json={"refresh_token": admin_token})
        assert res.status_code == 401

    async def test_refresh_garbage_token(self, client: AsyncClient):
        """형식이 잘못된 토큰 401."""
        res = await client.post(f"{AUTH}/refresh", json={"refresh_token": "not-a-jwt"})
        assert res.status_code == 401

    async def test_refresh_inactive_user(self, client: AsyncClient, db, associate_user):
        """비활성 사용자의 리프레시 토큰은 거부."""
        token = create_refresh_token({
            "sub": str(associate_user.id),
            "org": str(associate_user.organization_id),
            "role": associate_user.role,
        })
        associate_user.is_active = False
        await db.flush()
        res = await client.post(f"{AUTH}/refresh", json={"refresh_token": token})
        assert res.status_code == 401


class TestMe:
    """내 정보 조회 테스트."""

    async def test_me(self, client: AsyncClient, associate_user, associate_token):
        res = await client.get(f"{AUTH}/me", headers=auth_header(associate_token))
        assert res.status_code == 200
        data = res.json()
        assert data["id"] == str(associate_user.id)
        assert data["organization_id"] == str(associate_user.organization_id)
        assert data["role"] == "Associate"

    async def test_me_without_token(self, client: AsyncClient):
        """토큰 없이 접근 시 거부."""
        res = await client.get(f"{AUTH}/me")
        assert res.status_code in (401, 403)

    async def test_me_with_refresh_token(self, client: AsyncClient, associate_user):
        """리프레시 토큰을 액세스 토큰으로 사용 시 401."""
        token = create_refresh_token({"sub": str(associate_user.id)})
        res = await client.get(f"{AUTH}/me", headers=auth_header(token))
        assert res.status_code == 401

    async def test_me_invalid_token(self, client: AsyncClient):
        res = await client.get(f"{AUTH}/me", headers=auth_header("invalid.token.value"))
        assert res.status_code == 401
