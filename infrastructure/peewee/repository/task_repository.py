import logging
from contextlib import contextmanager
from typing import Iterator
from uuid import UUID

from peewee import Database, ImproperlyConfigured, PeeweeException

from core.domain.exceptions import StoreConfigurationError, StoreError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel, bind_task_model
from infrastructure.peewee.session.db import create_database

logger = logging.getLogger(__name__)


class PeeweeTaskRepository(TaskRepository):
    """
    Implementación de TaskRepository usando Peewee.

    Cada operación abre una conexión dedicada y la cierra al salir,
    tanto si termina bien como si falla.
    """

    def __init__(self, database_url: str | None) -> None:
        self._db: Database | None = None
        self._model: type[TaskModel] = TaskModel
        if not database_url:
            return

        try:
            self._db = create_database(database_url)
        except (PeeweeException, ImproperlyConfigured, RuntimeError) as e:
            raise StoreError(f"URL de base de datos inválida: {e}") from e

        self._model = bind_task_model(self._db)
        # Sin migraciones: la tabla se crea si no existe.
        with self._connection() as db:
            db.create_tables([self._model], safe=True)

    @contextmanager
    def _connection(self) -> Iterator[Database]:
        if self._db is None:
            raise StoreConfigurationError("DATABASE_URL no está configurada")
        try:
            with self._db.connection_context():
                yield self._db
        except (PeeweeException, ImproperlyConfigured) as e:
            raise StoreError(str(e)) from e

    def insert(self, task: Task) -> None:
        with self._connection() as db, db.atomic():
            self._model.insert(
                id=task.id,
                title=task.title,
                description=task.description,
                is_completed=task.is_completed,
            ).execute()

    def select_all(self) -> list[Task]:
        model = self._model
        with self._connection():
            return [
                Task(
                    id=row.id,
                    title=row.title,
                    description=row.description,
                    is_completed=row.is_completed,
                )
                for row in model.select(
                    model.id, model.title, model.description, model.is_completed
                )
            ]

    def update(self, task: Task) -> bool:
        model = self._model
        with self._connection() as db, db.atomic():
            rows = (
                model.update(
                    title=task.title,
                    description=task.description,
                    is_completed=task.is_completed,
                )
                .where(model.id == task.id)
                .execute()
            )
        logger.debug(f"UPDATE {model._meta.table_name} id={task.id}: {rows} filas")
        return rows > 0

    def delete(self, task_id: UUID) -> bool:
        model = self._model
        with self._connection() as db, db.atomic():
            rows = model.delete().where(model.id == task_id).execute()
        logger.debug(f"DELETE {model._meta.table_name} id={task_id}: {rows} filas")
        return rows > 0
