"""업무 레포지토리.

Task Repository — generic CRUD over the tasks table.
"""

from lexiflow.models.task import Task
from lexiflow.repositories.base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    def __init__(self) -> None:
        super().__init__(Task)


task_repository: TaskRepository = TaskRepository()
