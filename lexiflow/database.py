"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, session factory, and ORM base class
for the PostgreSQL database connection via asyncpg.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone
import uuid

from sqlalchemy import JSON, DateTime, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from lexiflow.config import settings


def _engine_options(url: str) -> dict:
    """드라이버별 엔진 옵션 — Pool/connect options per driver.

    asyncpg 풀 옵션은 aiosqlite 등 다른 드라이버에서 허용되지 않음
    (asyncpg pool options are rejected by other drivers such as aiosqlite).
    """
    if url.startswith("postgresql+asyncpg"):
        return {
            "pool_pre_ping": True,
            "pool_size": 5,
            "max_overflow": 10,
            # PgBouncer 트랜잭션 모드에서 prepared statement 비활성화
            # Disable prepared statement caches for transaction-mode pooling
            "connect_args": {"statement_cache_size": 0},
        }
    return {"pool_pre_ping": True}


# 비동기 데이터베이스 엔진 — Async database engine
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    **_engine_options(settings.DATABASE_URL),
)

# 비동기 세션 팩토리 — Async session factory
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


def utcnow() -> datetime:
    """현재 UTC 시각 — Current timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    """

    pass


class TimestampMixin:
    """UUID 기본키 + 감사 타임스탬프 믹스인.

    Mixin providing the UUID primary key and created_at/updated_at audit
    timestamps shared by every table.
    """

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session.
    The session is automatically closed after the request completes.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


# JSON 컬럼 타입 — PostgreSQL에서는 JSONB, 그 외 드라이버는 일반 JSON
# JSON column type: JSONB on PostgreSQL, generic JSON elsewhere
JSONType = JSON().with_variant(JSONB(), "postgresql")
