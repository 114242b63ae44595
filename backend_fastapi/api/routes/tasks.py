import logging
from contextlib import contextmanager
from typing import Iterator
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from backend_fastapi.api.deps import (
    create_task_payload,
    create_task_use_case,
    delete_task_use_case,
    list_tasks_use_case,
    require_access_key,
    update_task_payload,
    update_task_use_case,
)
from backend_fastapi.api.schemas import TaskPayload, TaskSchema
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.exceptions import (
    StoreConfigurationError,
    StoreError,
    TaskNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    dependencies=[Depends(require_access_key)],
)


@contextmanager
def _map_errors(store_error_detail: str) -> Iterator[None]:
    """Traduce los errores de dominio/infraestructura a HTTPException."""
    try:
        yield
    except TaskNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Task not found."
        )
    except StoreConfigurationError:
        logger.error("❌ Falta la cadena de conexión (DATABASE_URL)")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database connection string is not set.",
        )
    except StoreError:
        logger.exception(f"❌ {store_error_detail}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=store_error_detail,
        )


@router.post(
    "",
    response_model=TaskSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
)
def create_task(
    payload: TaskPayload = Depends(create_task_payload),
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> TaskSchema:
    """
    Crea una tarea nueva. El id lo genera el servidor.

    - **title**: Título (opcional, "" por defecto).
    - **description**: Descripción (opcional, "" por defecto).
    - **isCompleted**: Estado (opcional, false por defecto).
    """
    logger.info("CreateTask triggered")
    with _map_errors("Error saving task to database."):
        task = use_case.execute(
            CreateTaskCommand(
                title=payload.title,
                description=payload.description,
                is_completed=payload.is_completed,
            )
        )
    return TaskSchema.from_domain(task)


@router.get(
    "",
    response_model=list[TaskSchema],
    summary="List all tasks",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[TaskSchema]:
    """
    Devuelve todas las tareas, sin orden garantizado.
    """
    logger.info("GetTasks triggered")
    with _map_errors("Error fetching tasks from the database."):
        tasks = use_case.execute()
    return [TaskSchema.from_domain(task) for task in tasks]


@router.put(
    "/{task_id}",
    response_model=TaskSchema,
    summary="Update a task",
)
def update_task(
    task_id: UUID,
    payload: TaskPayload = Depends(update_task_payload),
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> TaskSchema:
    """
    Reemplaza título, descripción y estado de una tarea existente.

    - **task_id**: UUID de la tarea. Tiene prioridad sobre cualquier `id` del body.
    """
    logger.info(f"UpdateTask triggered with id: {task_id}")
    payload = payload.model_copy(update={"id": task_id})
    with _map_errors("Error updating task."):
        task = use_case.execute(
            payload.id,
            UpdateTaskCommand(
                title=payload.title,
                description=payload.description,
                is_completed=payload.is_completed,
            ),
        )
    return TaskSchema.from_domain(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
)
def delete_task(
    task_id: UUID,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> None:
    """
    Elimina una tarea.

    - **task_id**: UUID de la tarea a eliminar.
    """
    logger.info(f"DeleteTask triggered with id: {task_id}")
    with _map_errors("Error deleting task."):
        use_case.execute(DeleteTaskCommand(id=task_id))
