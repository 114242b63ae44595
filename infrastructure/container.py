from functools import lru_cache

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.config import Settings
from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository
from infrastructure.sqlalchemy.repository.task_repository import (
    SqlAlchemyTaskRepository,
)


@lru_cache
def get_task_repository(settings: Settings) -> TaskRepository:
    # El repositorio no guarda conexiones; se reutiliza entre requests.
    if settings.orm == "sqlalchemy":
        return SqlAlchemyTaskRepository(settings.database_url)
    # Default to Peewee
    return PeeweeTaskRepository(settings.database_url)


def get_create_task_use_case(settings: Settings) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=get_task_repository(settings))


def get_update_task_use_case(settings: Settings) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=get_task_repository(settings))


def get_delete_task_use_case(settings: Settings) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=get_task_repository(settings))


def get_list_tasks_use_case(settings: Settings) -> ListTasksUseCase:
    return ListTasksUseCase(repository=get_task_repository(settings))
