"""기본 CRUD 서비스 — 엔티티별 서비스의 부모 클래스.

Base CRUD Service — parent class for per-entity services.
Implements the create / find_all / find_one / update / delete contract on
top of a BaseRepository. Per entity only the repository, the response
schemas, the filterable columns and the referenced records vary.

Usage:
    class DocumentService(BaseCrudService[Document, DocumentResponse]):
        def __init__(self) -> None:
            super().__init__(
                document_repository,
                DocumentResponse,
                resource_name="Document",
                references={"case_id": (case_repository, "Case")},
            )
"""

from typing import Any, Generic, Mapping, TypeVar
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.repositories.base import BaseRepository, ModelType
from lexiflow.utils.exceptions import BadRequestError, NotFoundError
from lexiflow.utils.pagination import Paginated

ResponseType = TypeVar("ResponseType", bound=BaseModel)


class BaseCrudService(Generic[ModelType, ResponseType]):
    """제네릭 CRUD 서비스.

    Generic CRUD service scoped to the caller's organization.

    Attributes:
        repository: 데이터 접근 레포지토리 (Backing repository)
        response_schema: 목록/단건 응답 스키마 (Response schema)
        detail_schema: 연관 레코드를 포함한 상세 응답 스키마
                       (Detail schema rendered with eager-loaded associations)
        resource_name: 오류 메시지용 리소스 이름 (Name used in error messages)
        references: {FK 컬럼: (레포지토리, 이름)} — 같은 조직 소속 검증
                    ({fk column: (repository, label)} checked for same-org ownership)
    """

    def __init__(
        self,
        repository: BaseRepository[ModelType],
        response_schema: type[ResponseType],
        detail_schema: type[BaseModel] | None = None,
        resource_name: str = "Resource",
        references: Mapping[str, tuple[BaseRepository, str]] | None = None,
    ) -> None:
        self.repository: BaseRepository[ModelType] = repository
        self.response_schema: type[ResponseType] = response_schema
        self.detail_schema: type[BaseModel] | None = detail_schema
        self.resource_name: str = resource_name
        self.references: dict[str, tuple[BaseRepository, str]] = dict(references or {})

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    async def _before_create(
        self,
        db: AsyncSession,
        organization_id: UUID,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """생성 직전 훅 — 기본 구현은 그대로 반환 (Pre-create hook)."""
        return payload

    async def _before_update(
        self,
        db: AsyncSession,
        current: ModelType,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """수정 직전 훅 — 기본 구현은 그대로 반환 (Pre-update hook)."""
        return payload

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _to_response(self, obj: ModelType) -> ResponseType:
        return self.response_schema.model_validate(obj)

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.resource_name} not found")

    async def _check_references(
        self,
        db: AsyncSession,
        organization_id: UUID,
        payload: dict[str, Any],
    ) -> None:
        """참조 FK가 같은 조직의 레코드를 가리키는지 확인합니다.

        Verify that referenced records exist within the caller's organization.

        Raises:
            BadRequestError: 참조 레코드가 없거나 다른 조직 소속일 때
                             (Referenced record missing or owned by another org)
        """
        for field, (repository, label) in self.references.items():
            value = payload.get(field)
            if value is None:
                continue
            found = await repository.get_by_id(db, value, organization_id)
            if found is None:
                raise BadRequestError(f"{label} not found")

    def _drop_null_required(self, payload: dict[str, Any]) -> dict[str, Any]:
        # NOT NULL 컬럼에 대한 명시적 null은 무시 — explicit nulls for NOT NULL columns are ignored
        columns = self.repository.model.__table__.columns
        return {
            key: value
            for key, value in payload.items()
            if value is not None or key not in columns or columns[key].nullable
        }

    # ------------------------------------------------------------------
    # CRUD contract
    # ------------------------------------------------------------------
    async def create(
        self,
        db: AsyncSession,
        organization_id: UUID,
        data: BaseModel,
        extra: dict[str, Any] | None = None,
    ) -> ResponseType:
        """새 레코드를 생성합니다.

        Create a record owned by the caller's organization.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            organization_id: 호출자 조직 ID (Caller's organization UUID)
            data: 생성 요청 스키마 (Creation request schema)
            extra: 요청 본문 외의 서버 측 필드 (Server-side fields, e.g. created_by)

        Returns:
            ResponseType: 생성된 레코드 응답 (Created record response)
        """
        payload: dict[str, Any] = data.model_dump()
        payload.update(extra or {})
        if self.repository.is_tenant_scoped:
            payload["organization_id"] = organization_id

        await self._check_references(db, organization_id, payload)
        payload = await self._before_create(db, organization_id, payload)

        obj: ModelType = await self.repository.create(db, payload)
        return self._to_response(obj)

    async def find_all(
        self,
        db: AsyncSession,
        organization_id: UUID,
        filters: dict[str, Any] | None = None,
    ) -> list[ResponseType]:
        """조건에 맞는 레코드 목록을 조회합니다 (equality filters, org-scoped)."""
        rows = await self.repository.get_all(db, organization_id, filters)
        return [self._to_response(row) for row in rows]

    async def find_page(
        self,
        db: AsyncSession,
        organization_id: UUID,
        page: int,
        limit: int,
        filters: dict[str, Any] | None = None,
    ) -> Paginated[ResponseType]:
        """페이지네이션이 적용된 목록을 조회합니다.

        List one page of records as a `{data, pagination}` envelope.
        """
        rows, total = await self.repository.get_paginated(
            db, page, limit, organization_id, filters
        )
        return Paginated[self.response_schema].build(
            [self._to_response(row) for row in rows], total, page, limit
        )

    async def get_model(
        self,
        db: AsyncSession,
        record_id: UUID,
        organization_id: UUID,
        with_associations: bool = False,
    ) -> ModelType:
        """ORM 레코드를 조회하고 없으면 404 (Fetch the ORM row or raise 404)."""
        obj: ModelType | None = await self.repository.get_by_id(
            db, record_id, organization_id, with_associations=with_associations
        )
        if obj is None:
            raise self._not_found()
        return obj

    async def find_one(
        self,
        db: AsyncSession,
        record_id: UUID,
        organization_id: UUID,
    ) -> BaseModel:
        """단일 레코드를 조회합니다.

        Retrieve one record; the detail schema (with associations) is used
        when the service declares one.

        Raises:
            NotFoundError: 레코드가 없을 때 (Record not found)
        """
        detailed: bool = self.detail_schema is not None
        obj: ModelType = await self.get_model(db, record_id, organization_id, with_associations=detailed)
        if detailed:
            return self.detail_schema.model_validate(obj)
        return self._to_response(obj)

    async def update(
        self,
        db: AsyncSession,
        record_id: UUID,
        organization_id: UUID,
        data: BaseModel,
    ) -> ResponseType:
        """레코드를 부분 수정합니다.

        Partially update a record; only fields present in the request are
        applied.

        Raises:
            NotFoundError: 레코드가 없을 때 (Record not found)
        """
        current: ModelType = await self.get_model(db, record_id, organization_id)

        payload: dict[str, Any] = self._drop_null_required(data.model_dump(exclude_unset=True))
        await self._check_references(db, organization_id, payload)
        payload = await self._before_update(db, current, payload)

        obj: ModelType | None = await self.repository.update(db, record_id, payload, organization_id)
        if obj is None:
            raise self._not_found()
        return self._to_response(obj)

    async def delete(
        self,
        db: AsyncSession,
        record_id: UUID,
        organization_id: UUID,
    ) -> None:
        """레코드를 삭제합니다.

        Raises:
            NotFoundError: 삭제된 행이 없을 때 (No row was deleted)
        """
        deleted: bool = await self.repository.delete(db, record_id, organization_id)
        if not deleted:
            raise self._not_found()
