"""업무 Pydantic 스키마 정의.

Task request/response schemas.
"""

from datetime import date
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from lexiflow.schemas.common import TenantResponse

TaskStatus = Literal["Pending", "In Progress", "Review", "Done"]
TaskPriority = Literal["High", "Medium", "Low"]


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    description: str | None = None
    case_id: UUID | None = None
    assignee_id: UUID | None = None
    status: TaskStatus = "Pending"
    priority: TaskPriority = "Medium"
    due_date: date | None = None
    sla_warning: bool = False
    automated_trigger: str | None = None


class TaskUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = None
    case_id: UUID | None = None
    assignee_id: UUID | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    due_date: date | None = None
    sla_warning: bool | None = None
    automated_trigger: str | None = None


class TaskResponse(TenantResponse):
    title: str
    description: str | None
    case_id: UUID | None
    assignee_id: UUID | None
    status: str
    priority: str
    due_date: date | None
    sla_warning: bool
    automated_trigger: str | None
