import logging

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class ListTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Task]:
        tasks = self._repository.select_all()
        logger.info(f"Obtenidas {len(tasks)} tareas de la base de datos")
        return tasks
