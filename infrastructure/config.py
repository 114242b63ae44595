import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

SUPPORTED_ORMS = ("peewee", "sqlalchemy")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_list(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Configuración inmutable de la API, leída una sola vez del entorno.

    Atributos:
        database_url:  URL de la base de datos. None si no está configurada.
        orm:           Adaptador de repositorio ('peewee' o 'sqlalchemy').
        access_key:    Clave de acceso requerida. None desactiva la comprobación.
        api_prefix:    Prefijo de las rutas de tareas (ej: '/api').
    """

    database_url: str | None = None
    orm: str = "peewee"
    access_key: str | None = None
    api_prefix: str = ""
    cors_origins: tuple[str, ...] = ("*",)
    cors_allow_credentials: bool = True
    cors_allow_methods: tuple[str, ...] = ("*",)
    cors_allow_headers: tuple[str, ...] = ("*",)

    def __post_init__(self) -> None:
        if self.orm not in SUPPORTED_ORMS:
            raise ValueError(
                f"ORM '{self.orm}' no soportado. Opciones: {', '.join(SUPPORTED_ORMS)}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL") or None,
            orm=os.getenv("ORM", "peewee").strip().lower(),
            access_key=os.getenv("TASKS_ACCESS_KEY") or None,
            api_prefix=os.getenv("API_PREFIX", "").rstrip("/"),
            cors_origins=_as_list(os.getenv("CORS_ORIGINS", "*")),
            cors_allow_credentials=_as_bool(os.getenv("CORS_ALLOW_CREDENTIALS", "true")),
            cors_allow_methods=_as_list(os.getenv("CORS_ALLOW_METHODS", "*")),
            cors_allow_headers=_as_list(os.getenv("CORS_ALLOW_HEADERS", "*")),
        )


@lru_cache
def get_settings() -> Settings:
    load_dotenv()
    return Settings.from_env()
