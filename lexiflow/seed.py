"""초기 데이터 시드 스크립트 — 조직, 관리자 계정, 관할 참조 데이터 생성.

Seed script — creates the initial organization, an administrator and the
jurisdiction reference data. Run once to bootstrap an empty database.

Usage:
    python -m lexiflow.seed

Creates:
    - 1개 조직: "LexiFlow Demo Firm" (1 organization)
    - 1개 관리자 계정: admin@lexiflow.local / admin12345 (1 Administrator)
    - 연방/주 관할 목록 (Federal and state jurisdictions)
"""

import asyncio

from sqlalchemy import select

from lexiflow.database import Base, async_session, engine
from lexiflow.models import Jurisdiction, Organization, UserProfile
from lexiflow.utils.password import hash_password

# (name, code, type, parent_code, court_level)
JURISDICTIONS: list[tuple[str, str, str, str | None, str | None]] = [
    ("United States Federal", "US-FED", "Federal", None, None),
    ("Supreme Court of the United States", "US-SCOTUS", "Federal", "US-FED", "Supreme"),
    ("Ninth Circuit Court of Appeals", "US-CA9", "Federal", "US-FED", "Appellate"),
    ("Second Circuit Court of Appeals", "US-CA2", "Federal", "US-FED", "Appellate"),
    ("Northern District of California", "US-CAND", "Federal", "US-CA9", "District"),
    ("Southern District of New York", "US-NYSD", "Federal", "US-CA2", "District"),
    ("California", "CA", "State", None, None),
    ("New York", "NY", "State", None, None),
    ("Texas", "TX", "State", None, None),
    ("Delaware", "DE", "State", None, None),
    ("Delaware Court of Chancery", "DE-CHANCERY", "State", "DE", "Trial"),
]


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data. Creates missing tables first.

    Idempotent: 조직이 이미 있으면 조직/관리자는 건너뛰고, 관할은 코드 기준으로 없는 것만 추가
    (Skips org/admin when an organization exists; jurisdictions are added by missing code).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        existing_org = (await db.execute(select(Organization).limit(1))).scalar_one_or_none()
        if existing_org is None:
            org: Organization = Organization(name="LexiFlow Demo Firm", domain="lexiflow.local")
            db.add(org)
            await db.flush()  # flush로 org.id 생성 (Flush to generate org.id)

            admin: UserProfile = UserProfile(
                organization_id=org.id,
                email="admin@lexiflow.local",
                full_name="System Administrator",
                role="Administrator",
                password_hash=hash_password("admin12345"),
                is_active=True,
            )
            db.add(admin)
            print(f"Seeded: org={org.id}, admin=admin@lexiflow.local/admin12345")
        else:
            print("Organization already present. Skipping org/admin.")

        known: set[str] = set((await db.execute(select(Jurisdiction.code))).scalars().all())
        added: int = 0
        for name, code, jurisdiction_type, parent_code, court_level in JURISDICTIONS:
            if code in known:
                continue
            db.add(Jurisdiction(
                name=name,
                code=code,
                jurisdiction_type=jurisdiction_type,
                parent_code=parent_code,
                court_level=court_level,
            ))
            added += 1

        await db.commit()
        print(f"Jurisdictions added: {added}")


if __name__ == "__main__":
    asyncio.run(seed())
