import logging
from dataclasses import dataclass
from uuid import UUID

from core.domain.exceptions import TaskNotFoundError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    title: str | None = None
    description: str | None = None
    is_completed: bool = False


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: UUID, cmd: UpdateTaskCommand) -> Task:
        """
        Actualiza título, descripción y estado de la tarea `task_id`.

        No relee la fila: devuelve lo que se escribió.

        Raises:
            TaskNotFoundError: si no existe ninguna tarea con ese id.
        """
        task = Task(
            id=task_id,
            title=cmd.title or "",
            description=cmd.description or "",
            is_completed=cmd.is_completed,
        )
        if not self._repository.update(task):
            logger.warning(f"Tarea {task_id} no encontrada al actualizar")
            raise TaskNotFoundError(task_id)

        logger.info(f"Tarea {task_id} actualizada")
        return task
