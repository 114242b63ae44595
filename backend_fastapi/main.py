import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend_fastapi.api.routes.tasks import router as tasks_router
from core.domain.exceptions import StoreError
from infrastructure.config import Settings, get_settings

logger = logging.getLogger(__name__)


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    # Errores al construir el repositorio (fuera de los handlers).
    logger.error(f"❌ Base de datos no disponible: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Error connecting to the database."},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Task API")
    app.state.settings = settings

    # Configure CORS for frontend from settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=list(settings.cors_allow_methods),
        allow_headers=list(settings.cors_allow_headers),
    )

    app.add_exception_handler(StoreError, _store_error_handler)
    app.include_router(tasks_router, prefix=settings.api_prefix)
    return app


app = create_app()
