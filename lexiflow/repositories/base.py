"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic Create, Read, Update, Delete operations with organization
scoping and declarative eager loading of associations.

Usage:
    class CaseRepository(BaseRepository[Case]):
        def __init__(self) -> None:
            super().__init__(Case, eager=("documents", "tasks"))
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lexiflow.database import Base
from lexiflow.utils.pagination import paginate

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.
    All queries are scoped by organization_id when the model has that
    column; models without it (global reference data) ignore the scope.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
        eager: 상세 조회 시 selectinload 할 관계 이름 목록
               (Relationship names eager-loaded on detail lookups)
        default_order: 목록 기본 정렬 컬럼 (Default list ordering)
    """

    def __init__(
        self,
        model: type[ModelType],
        eager: Sequence[str] = (),
        default_order: Any | None = None,
    ) -> None:
        """레포지토리를 초기화합니다.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
            eager: 상세 조회 시 즉시 로딩할 관계 (Associations to eager-load)
            default_order: 기본 정렬, None이면 created_at 내림차순
                           (Default ordering; None means newest first)
        """
        self.model: type[ModelType] = model
        self.eager: tuple[str, ...] = tuple(eager)
        self.default_order: Any = (
            default_order if default_order is not None else model.created_at.desc()
        )

    @property
    def is_tenant_scoped(self) -> bool:
        """모델이 organization_id 컬럼을 가지는지 여부 (Whether the model is tenant-owned)."""
        return hasattr(self.model, "organization_id")

    def _scoped(self, query: Select, organization_id: UUID | None) -> Select:
        # 모델에 organization_id 컬럼이 있고, 필터가 제공된 경우 조직 범위 적용
        # Apply org scope if model has organization_id and filter is provided
        if organization_id is not None and self.is_tenant_scoped:
            query = query.where(self.model.organization_id == organization_id)
        return query

    def _with_eager(self, query: Select) -> Select:
        if self.eager:
            query = query.options(
                *(selectinload(getattr(self.model, name)) for name in self.eager)
            )
        return query

    def build_list_query(
        self,
        organization_id: UUID | None = None,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Select:
        """목록 조회용 SELECT 쿼리를 구성합니다.

        Build the SELECT used by list operations: tenant scope, equality
        filters on known columns (None values are skipped), and ordering.

        Args:
            organization_id: 조직 범위 필터 (Organization scope filter)
            filters: 추가 필터 딕셔너리 {'컬럼명': 값}
                     (Additional filter dict {'column_name': value})
            order_by: 정렬 기준 컬럼 (Column to order by)

        Returns:
            Select: 구성된 쿼리 (The composed query)
        """
        query: Select = self._scoped(select(self.model), organization_id)

        # 동적 필터 적용 — Dynamic filter application
        if filters:
            for column_name, value in filters.items():
                if hasattr(self.model, column_name) and value is not None:
                    query = query.where(getattr(self.model, column_name) == value)

        return query.order_by(order_by if order_by is not None else self.default_order)

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: UUID,
        organization_id: UUID | None = None,
        with_associations: bool = False,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its UUID.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 UUID (UUID of the record to retrieve)
            organization_id: 조직 범위 필터, None이면 조직 필터 미적용
                             (Organization scope filter; None skips org filtering)
            with_associations: True이면 선언된 관계를 즉시 로딩
                               (Eager-load the declared associations)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        query = self._scoped(query, organization_id)
        if with_associations:
            # 세션에 이미 있는 객체의 컬렉션도 새로 로딩 (Reload collections of objects already in the session)
            query = self._with_eager(query).execution_options(populate_existing=True)

        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        organization_id: UUID | None = None,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 모든 레코드를 조회합니다.

        Retrieve all records matching the given filters.

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of matching records)
        """
        query: Select = self.build_list_query(organization_id, filters, order_by)
        result = await db.execute(query)
        return result.scalars().all()

    async def get_paginated(
        self,
        db: AsyncSession,
        page: int,
        limit: int,
        organization_id: UUID | None = None,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> tuple[Sequence[ModelType], int]:
        """페이지네이션이 적용된 레코드 목록을 조회합니다.

        Retrieve one page of records matching the given filters.

        Returns:
            tuple[Sequence[ModelType], int]: (레코드 목록, 전체 개수)
                                             (List of records, total count)
        """
        query: Select = self.build_list_query(organization_id, filters, order_by)
        return await paginate(db, query, page, limit)

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record. Conflicts are left to database constraints.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: UUID,
        update_data: dict[str, Any],
        organization_id: UUID | None = None,
    ) -> ModelType | None:
        """기존 레코드를 업데이트합니다.

        Partially update an existing record by its UUID.

        Returns:
            ModelType | None: 업데이트된 레코드, 대상이 없으면 None
                              (Updated record, or None when nothing matched)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id, organization_id)
        if db_obj is None:
            return None

        # exclude_unset으로 전달된 필드만 업데이트 (None 값도 허용)
        # Update all fields passed via exclude_unset (allows setting to None)
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        record_id: UUID,
        organization_id: UUID | None = None,
    ) -> bool:
        """레코드를 삭제합니다.

        Delete a record by its UUID.

        Returns:
            bool: 삭제 성공 여부 (Whether a row was deleted)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id, organization_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        return True

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching the given filters exists.
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
