import dataclasses

import pytest

from infrastructure.config import Settings
from infrastructure.container import get_task_repository
from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository
from infrastructure.sqlalchemy.repository.task_repository import (
    SqlAlchemyTaskRepository,
)

_ENV_VARS = [
    "DATABASE_URL",
    "ORM",
    "TASKS_ACCESS_KEY",
    "API_PREFIX",
    "CORS_ORIGINS",
    "CORS_ALLOW_CREDENTIALS",
    "CORS_ALLOW_METHODS",
    "CORS_ALLOW_HEADERS",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.from_env()

    assert settings.database_url is None
    assert settings.orm == "peewee"
    assert settings.access_key is None
    assert settings.api_prefix == ""
    assert settings.cors_origins == ("*",)
    assert settings.cors_allow_credentials is True


def test_reads_environment(clean_env):
    clean_env.setenv("DATABASE_URL", "sqlite:///tasks.db")
    clean_env.setenv("ORM", " SQLAlchemy ")
    clean_env.setenv("TASKS_ACCESS_KEY", "k")
    clean_env.setenv("API_PREFIX", "/api/")
    clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    clean_env.setenv("CORS_ALLOW_CREDENTIALS", "no")

    settings = Settings.from_env()

    assert settings.database_url == "sqlite:///tasks.db"
    assert settings.orm == "sqlalchemy"
    assert settings.access_key == "k"
    assert settings.api_prefix == "/api"
    assert settings.cors_origins == ("http://a.test", "http://b.test")
    assert settings.cors_allow_credentials is False


def test_empty_values_count_as_unset(clean_env):
    clean_env.setenv("DATABASE_URL", "")
    clean_env.setenv("TASKS_ACCESS_KEY", "")

    settings = Settings.from_env()

    assert settings.database_url is None
    assert settings.access_key is None


def test_unknown_orm_is_rejected(clean_env):
    clean_env.setenv("ORM", "mongo")

    with pytest.raises(ValueError, match="mongo"):
        Settings.from_env()


def test_settings_are_immutable():
    settings = Settings()

    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.database_url = "sqlite:///other.db"


@pytest.mark.parametrize(
    "orm, expected",
    [("peewee", PeeweeTaskRepository), ("sqlalchemy", SqlAlchemyTaskRepository)],
)
def test_container_selects_adapter(tmp_path, orm, expected):
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'tasks.db'}", orm=orm)

    repository = get_task_repository(settings)

    assert isinstance(repository, expected)
    assert get_task_repository(settings) is repository
