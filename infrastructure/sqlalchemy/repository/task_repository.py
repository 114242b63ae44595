from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from core.domain.exceptions import StoreConfigurationError, StoreError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.sqlalchemy.model.models import TaskModel
from infrastructure.sqlalchemy.session.db import (
    build_engine,
    build_session_factory,
    init_db,
)


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, database_url: str | None) -> None:
        self._session_factory: sessionmaker | None = None
        if not database_url:
            return

        try:
            engine = build_engine(database_url)
            init_db(engine)
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e
        self._session_factory = build_session_factory(engine)

    def _session(self) -> Session:
        if self._session_factory is None:
            raise StoreConfigurationError("DATABASE_URL no está configurada")
        return self._session_factory()

    def insert(self, task: Task) -> None:
        session = self._session()
        try:
            session.add(
                TaskModel(
                    id=task.id,
                    title=task.title,
                    description=task.description,
                    is_completed=task.is_completed,
                )
            )
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StoreError(str(e)) from e
        finally:
            session.close()

    def select_all(self) -> list[Task]:
        session = self._session()
        try:
            task_models = session.query(TaskModel).all()
            return [
                Task(
                    id=task_model.id,
                    title=task_model.title,
                    description=task_model.description,
                    is_completed=task_model.is_completed,
                )
                for task_model in task_models
            ]
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e
        finally:
            session.close()

    def update(self, task: Task) -> bool:
        session = self._session()
        try:
            rows = (
                session.query(TaskModel)
                .filter(TaskModel.id == task.id)
                .update(
                    {
                        TaskModel.title: task.title,
                        TaskModel.description: task.description,
                        TaskModel.is_completed: task.is_completed,
                    },
                    synchronize_session=False,
                )
            )
            session.commit()
            return rows > 0
        except SQLAlchemyError as e:
            session.rollback()
            raise StoreError(str(e)) from e
        finally:
            session.close()

    def delete(self, task_id: UUID) -> bool:
        session = self._session()
        try:
            rows = (
                session.query(TaskModel)
                .filter(TaskModel.id == task_id)
                .delete(synchronize_session=False)
            )
            session.commit()
            return rows > 0
        except SQLAlchemyError as e:
            session.rollback()
            raise StoreError(str(e)) from e
        finally:
            session.close()
