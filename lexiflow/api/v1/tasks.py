"""업무 라우터.

Task Router — CRUD endpoints for tasks, optionally linked to a case and
assigned to a user of the same organization.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lexiflow.api.deps import PageParams, get_current_user, page_params
from lexiflow.database import get_db
from lexiflow.models.user import UserProfile
from lexiflow.schemas.task import TaskCreate, TaskPriority, TaskResponse, TaskStatus, TaskUpdate
from lexiflow.services.task_service import task_service
from lexiflow.utils.pagination import Paginated

router: APIRouter = APIRouter()


@router.get("", response_model=Paginated[TaskResponse])
async def list_tasks(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
    paging: Annotated[PageParams, Depends(page_params)],
    case_id: Annotated[UUID | None, Query(description="사건 ID 필터")] = None,
    assignee_id: Annotated[UUID | None, Query(description="담당자 ID 필터")] = None,
    status: Annotated[TaskStatus | None, Query(description="상태 필터")] = None,
    priority: Annotated[TaskPriority | None, Query(description="우선순위 필터")] = None,
) -> Paginated[TaskResponse]:
    filters: dict = {
        "case_id": case_id,
        "assignee_id": assignee_id,
        "status": status,
        "priority": priority,
    }
    return await task_service.find_page(
        db, current_user.organization_id, paging.page, paging.limit, filters
    )


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> TaskResponse:
    return await task_service.find_one(db, task_id, current_user.organization_id)


@router.post("", response_model=TaskResponse, status_code=201)
async def create_task(
    data: TaskCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> TaskResponse:
    result: TaskResponse = await task_service.create(db, current_user.organization_id, data)
    await db.commit()
    return result


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: UUID,
    data: TaskUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> TaskResponse:
    result: TaskResponse = await task_service.update(
        db, task_id, current_user.organization_id, data
    )
    await db.commit()
    return result


@router.delete("/{task_id}", status_code=204)
async def delete_task(
    task_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> None:
    await task_service.delete(db, task_id, current_user.organization_id)
    await db.commit()
