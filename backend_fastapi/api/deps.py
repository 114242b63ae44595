import logging
import secrets

from fastapi import Depends, Header, HTTPException, Query, Request, status
from pydantic import TypeAdapter, ValidationError

from backend_fastapi.api.schemas import TaskPayload
from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from infrastructure.config import Settings
from infrastructure.container import (
    get_create_task_use_case,
    get_delete_task_use_case,
    get_list_tasks_use_case,
    get_update_task_use_case,
)

logger = logging.getLogger(__name__)

_payload_adapter = TypeAdapter(TaskPayload | None)


def app_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_access_key(
    code: str | None = Query(default=None, include_in_schema=False),
    x_functions_key: str | None = Header(default=None, include_in_schema=False),
    settings: Settings = Depends(app_settings),
) -> None:
    """
    Exige la clave de acceso si hay una configurada.

    Se acepta en el query param `code` o en la cabecera `x-functions-key`.
    """
    if settings.access_key is None:
        return

    supplied = code or x_functions_key
    if supplied is None or not secrets.compare_digest(
        supplied.encode(), settings.access_key.encode()
    ):
        logger.warning("🔐 Request rechazado: clave de acceso ausente o inválida")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing access key.",
        )


async def _read_task_payload(request: Request, null_detail: str) -> TaskPayload:
    """
    Decodifica el cuerpo como TaskPayload.

    Nunca devuelve el error del parser al cliente, solo un mensaje fijo.
    `null_detail` es el mensaje cuando el body es el literal JSON null.
    """
    body = await request.body()
    logger.debug(f"Body recibido: {body!r}")

    try:
        payload = _payload_adapter.validate_json(body)
    except ValidationError as e:
        logger.error(f"Deserialización fallida ({e.error_count()} errores)")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed JSON."
        )

    if payload is None:
        logger.error("JSON inválido: la tarea es null")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=null_detail
        )
    return payload


async def create_task_payload(request: Request) -> TaskPayload:
    return await _read_task_payload(request, "Invalid task format in JSON.")


async def update_task_payload(request: Request) -> TaskPayload:
    return await _read_task_payload(request, "Invalid JSON.")


def create_task_use_case(
    settings: Settings = Depends(app_settings),
) -> CreateTaskUseCase:
    return get_create_task_use_case(settings)


def update_task_use_case(
    settings: Settings = Depends(app_settings),
) -> UpdateTaskUseCase:
    return get_update_task_use_case(settings)


def delete_task_use_case(
    settings: Settings = Depends(app_settings),
) -> DeleteTaskUseCase:
    return get_delete_task_use_case(settings)


def list_tasks_use_case(
    settings: Settings = Depends(app_settings),
) -> ListTasksUseCase:
    return get_list_tasks_use_case(settings)
