"""조항 레포지토리 — 조항 CRUD 및 버전 이력 조회.

Clause Repository — CRUD for clauses and access to their version history.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.models.clause import Clause, ClauseVersion
from lexiflow.repositories.base import BaseRepository


class ClauseRepository(BaseRepository[Clause]):
    """조항 테이블 레포지토리 (Repository for the clauses table)."""

    def __init__(self) -> None:
        super().__init__(Clause, default_order=Clause.name)

    async def add_version(
        self,
        db: AsyncSession,
        clause: Clause,
        author: str | None,
    ) -> ClauseVersion:
        """현재 본문을 버전 이력에 스냅샷으로 저장합니다.

        Snapshot the clause's current content into the version history.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            clause: 변경 직전의 조항 (Clause before the edit is applied)
            author: 변경 작성자 이름 (Name of the editor)

        Returns:
            ClauseVersion: 생성된 버전 스냅샷 (The stored snapshot)
        """
        snapshot = ClauseVersion(
            clause_id=clause.id,
            version=clause.version,
            content=clause.content,
            author=author,
        )
        db.add(snapshot)
        await db.flush()
        return snapshot

    async def get_versions(
        self,
        db: AsyncSession,
        clause_id: UUID,
    ) -> Sequence[ClauseVersion]:
        """조항의 버전 이력을 최신순으로 조회합니다.

        List a clause's version history, newest first.
        """
        query: Select = (
            select(ClauseVersion)
            .where(ClauseVersion.clause_id == clause_id)
            .order_by(ClauseVersion.version.desc())
        )
        result = await db.execute(query)
        return result.scalars().all()


# 싱글턴 인스턴스 — Singleton instance
clause_repository: ClauseRepository = ClauseRepository()
