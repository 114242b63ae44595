import logging
from dataclasses import dataclass
from uuid import uuid4

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    title: str | None = None
    description: str | None = None
    is_completed: bool = False


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        # El id siempre lo genera el servidor.
        task = Task(
            id=uuid4(),
            title=cmd.title or "",
            description=cmd.description or "",
            is_completed=cmd.is_completed,
        )
        self._repository.insert(task)
        logger.info(f"Tarea {task.id} creada")
        return task
