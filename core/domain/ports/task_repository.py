from abc import ABC, abstractmethod
from uuid import UUID

from core.domain.models.task import Task


class TaskRepository(ABC):
    """
    Puerto de acceso a la tabla de tareas.

    Cada operación ejecuta una única sentencia sobre su propia conexión.
    Los errores del driver se traducen a StoreError.
    """

    @abstractmethod
    def insert(self, task: Task) -> None:
        raise NotImplementedError

    @abstractmethod
    def select_all(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def update(self, task: Task) -> bool:
        """Retorna False si ninguna fila tiene `task.id`."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: UUID) -> bool:
        """Retorna False si ninguna fila tiene `task_id`."""
        raise NotImplementedError
