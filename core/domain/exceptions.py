from uuid import UUID


class TaskNotFoundError(ValueError):
    def __init__(self, task_id: UUID) -> None:
        super().__init__(f"Tarea con id {task_id} no encontrada")
        self.task_id = task_id


class StoreError(Exception):
    """Fallo de infraestructura al acceder a la base de datos."""


class StoreConfigurationError(StoreError):
    """No hay cadena de conexión configurada."""
