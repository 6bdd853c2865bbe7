"""테스트 인프라 — 테스트 DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — test database, session and httpx client fixtures.
The database URL comes from TEST_DATABASE_URL and defaults to a temporary
SQLite file (aiosqlite). Schema is created once per session and every
table is emptied after each test.
"""

import os
import tempfile
import uuid
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from lexiflow.database import Base, get_db
from lexiflow.main import app
from lexiflow.models import *  # noqa: F401,F403 — register all models with metadata
from lexiflow.utils.jwt import create_access_token
from lexiflow.utils.password import hash_password

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
_SQLITE_PATH = Path(tempfile.gettempdir()) / f"lexiflow_test_{uuid.uuid4().hex}.db"
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", f"sqlite+aiosqlite:///{_SQLITE_PATH}")

_schema_created = False


@pytest.fixture(scope="session", autouse=True)
def test_database_file():
    """세션 종료 시 임시 SQLite 파일을 삭제합니다."""
    yield
    if _SQLITE_PATH.exists():
        _SQLITE_PATH.unlink()


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 첫 호출 시 스키마를 생성합니다."""
    global _schema_created
    eng = create_async_engine(TEST_DATABASE_URL, echo=False)

    if eng.dialect.name == "sqlite":
        # SQLite는 FK 제약을 연결마다 켜야 함
        @event.listens_for(eng.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    if not _schema_created:
        async with eng.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        _schema_created = True

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        await session.rollback()

    # 테스트 후 모든 데이터 정리 — 자식 테이블부터 삭제
    async with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            await conn.execute(table.delete())


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def _make_org(db: AsyncSession, name: str):
    from lexiflow.models.organization import Organization
    o = Organization(name=name)
    db.add(o)
    await db.flush()
    await db.refresh(o)
    return o


async def make_user(db: AsyncSession, org, role: str, email: str, password: str = "password123!"):
    """테스트 사용자를 생성합니다."""
    from lexiflow.models.user import UserProfile
    user = UserProfile(
        organization_id=org.id,
        email=email,
        full_name=f"Test {role}",
        role=role,
        password_hash=hash_password(password),
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def org(db: AsyncSession):
    """테스트 조직을 생성합니다."""
    return await _make_org(db, "Test Firm LLP")


@pytest_asyncio.fixture
async def other_org(db: AsyncSession):
    """테넌트 격리 검증용 두 번째 조직."""
    return await _make_org(db, "Rival Partners")


@pytest_asyncio.fixture
async def admin_user(db: AsyncSession, org):
    return await make_user(db, org, "Administrator", "admin@test.com", "admin12345!")


@pytest_asyncio.fixture
async def partner_user(db: AsyncSession, org):
    return await make_user(db, org, "Senior Partner", "partner@test.com")


@pytest_asyncio.fixture
async def associate_user(db: AsyncSession, org):
    return await make_user(db, org, "Associate", "associate@test.com")


@pytest_asyncio.fixture
async def paralegal_user(db: AsyncSession, org):
    return await make_user(db, org, "Paralegal", "paralegal@test.com")


@pytest_asyncio.fixture
async def other_user(db: AsyncSession, other_org):
    """다른 조직의 관리자."""
    return await make_user(db, other_org, "Administrator", "admin@rival.com")


def make_token(user) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({
        "sub": str(user.id),
        "org": str(user.organization_id),
        "role": user.role,
    })


@pytest.fixture
def admin_token(admin_user) -> str:
    return make_token(admin_user)


@pytest.fixture
def partner_token(partner_user) -> str:
    return make_token(partner_user)


@pytest.fixture
def associate_token(associate_user) -> str:
    return make_token(associate_user)


@pytest.fixture
def paralegal_token(paralegal_user) -> str:
    return make_token(paralegal_user)


@pytest.fixture
def other_token(other_user) -> str:
    return make_token(other_user)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def case(client: AsyncClient, associate_token):
    """API로 생성한 테스트 사건."""
    res = await client.post("/api/v1/cases", json={
        "title": "Acme v. Globex",
        "client_name": "Acme Corp",
        "status": "Discovery",
        "matter_type": "Litigation",
    }, headers=auth_header(associate_token))
    assert res.status_code == 201
    return res.json()
