"""업무 서비스.

Task Service — CRUD over tasks; the optional case and assignee must belong
to the caller's organization.
"""

from lexiflow.models.task import Task
from lexiflow.repositories.case_repository import case_repository
from lexiflow.repositories.task_repository import task_repository
from lexiflow.repositories.user_repository import user_repository
from lexiflow.schemas.task import TaskResponse
from lexiflow.services.base import BaseCrudService


class TaskService(BaseCrudService[Task, TaskResponse]):
    def __init__(self) -> None:
        super().__init__(
            task_repository,
            TaskResponse,
            resource_name="Task",
            references={
                "case_id": (case_repository, "Case"),
                "assignee_id": (user_repository, "Assignee"),
            },
        )


task_service: TaskService = TaskService()
