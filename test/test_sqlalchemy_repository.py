import os
import tempfile
import unittest
from uuid import uuid4

from core.domain.exceptions import StoreConfigurationError, StoreError
from core.domain.models.task import Task

try:
    from infrastructure.sqlalchemy.repository.task_repository import (
        SqlAlchemyTaskRepository,
    )

    HAS_SQLALCHEMY = True
except ModuleNotFoundError:
    HAS_SQLALCHEMY = False


@unittest.skipUnless(HAS_SQLALCHEMY, "SQLAlchemy no está disponible en este entorno")
class SqlAlchemyTaskRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.db_path = os.path.join(self._tmpdir.name, "tasks.db")
        self.repo = SqlAlchemyTaskRepository(f"sqlite:///{self.db_path}")

    def tearDown(self) -> None:
        self._tmpdir.cleanup()

    def test_insert_and_select_all(self) -> None:
        task = Task(id=uuid4(), title="Tarea SQL", description="desc", is_completed=True)

        self.repo.insert(task)

        self.assertEqual(self.repo.select_all(), [task])

    def test_insert_duplicate_id_raises_store_error(self) -> None:
        task = Task(id=uuid4(), title="once")
        self.repo.insert(task)

        with self.assertRaises(StoreError):
            self.repo.insert(task)

    def test_update(self) -> None:
        task = Task(id=uuid4(), title="before")
        self.repo.insert(task)

        changed = Task(id=task.id, title="after", description="d", is_completed=True)

        self.assertTrue(self.repo.update(changed))
        self.assertEqual(self.repo.select_all(), [changed])

    def test_update_missing(self) -> None:
        self.assertFalse(self.repo.update(Task(id=uuid4(), title="ghost")))
        self.assertEqual(self.repo.select_all(), [])

    def test_delete(self) -> None:
        task = Task(id=uuid4(), title="Eliminar SQL")
        self.repo.insert(task)

        self.assertTrue(self.repo.delete(task.id))
        self.assertFalse(self.repo.delete(task.id))
        self.assertEqual(self.repo.select_all(), [])

    def test_missing_url(self) -> None:
        repo = SqlAlchemyTaskRepository(None)

        with self.assertRaises(StoreConfigurationError):
            repo.select_all()
        with self.assertRaises(StoreConfigurationError):
            repo.delete(uuid4())


@unittest.skipUnless(HAS_SQLALCHEMY, "SQLAlchemy no está disponible en este entorno")
class SharedTableAcrossAdaptersTests(unittest.TestCase):
    """Cambiar ORM sobre una base existente no debe perder las filas."""

    def setUp(self) -> None:
        from infrastructure.peewee.repository.task_repository import (
            PeeweeTaskRepository,
        )

        self._tmpdir = tempfile.TemporaryDirectory()
        url = f"sqlite:///{os.path.join(self._tmpdir.name, 'tasks.db')}"
        self.peewee_repo = PeeweeTaskRepository(url)
        self.sqlalchemy_repo = SqlAlchemyTaskRepository(url)

    def tearDown(self) -> None:
        self._tmpdir.cleanup()

    def test_peewee_row_updated_and_deleted_by_sqlalchemy(self) -> None:
        task = Task(id=uuid4(), title="a")
        self.peewee_repo.insert(task)

        changed = Task(id=task.id, title="b", is_completed=True)

        self.assertEqual(self.sqlalchemy_repo.select_all(), [task])
        self.assertTrue(self.sqlalchemy_repo.update(changed))
        self.assertEqual(self.peewee_repo.select_all(), [changed])
        self.assertTrue(self.sqlalchemy_repo.delete(task.id))
        self.assertEqual(self.peewee_repo.select_all(), [])

    def test_sqlalchemy_row_updated_and_deleted_by_peewee(self) -> None:
        task = Task(id=uuid4(), title="a", description="d")
        self.sqlalchemy_repo.insert(task)

        changed = Task(id=task.id, title="b", description="d", is_completed=True)

        self.assertEqual(self.peewee_repo.select_all(), [task])
        self.assertTrue(self.peewee_repo.update(changed))
        self.assertEqual(self.sqlalchemy_repo.select_all(), [changed])
        self.assertTrue(self.peewee_repo.delete(task.id))
        self.assertEqual(self.sqlalchemy_repo.select_all(), [])


if __name__ == "__main__":
    unittest.main()
