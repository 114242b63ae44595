from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from core.domain.models.task import Task


class TaskPayload(BaseModel):
    """
    Cuerpo JSON de POST /tasks y PUT /tasks/{id}.

    Todos los campos son opcionales. Un `id` presente se valida pero
    nunca se usa: lo reemplaza el servidor (create) o la ruta (update).
    Texto y estado son estrictos: "true" o 1 no valen como booleano.
    """

    id: UUID | None = None
    title: str | None = Field(default=None, strict=True)
    description: str | None = Field(default=None, strict=True)
    is_completed: bool = Field(default=False, alias="isCompleted", strict=True)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TaskSchema(BaseModel):
    """Representación JSON de una tarea en las respuestas."""

    id: UUID
    title: str
    description: str
    is_completed: bool = Field(alias="isCompleted")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, task: Task) -> "TaskSchema":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            is_completed=task.is_completed,
        )
