import logging
from dataclasses import dataclass
from uuid import UUID

from core.domain.exceptions import TaskNotFoundError
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeleteTaskCommand:
    id: UUID


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: DeleteTaskCommand) -> None:
        if not self._repository.delete(cmd.id):
            logger.warning(f"Tarea {cmd.id} no encontrada al eliminar")
            raise TaskNotFoundError(cmd.id)
        logger.info(f"Tarea {cmd.id} eliminada")
