"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from library_backend.api.admin import router as admin_router
from library_backend.api.catalogue import router as catalogue_router
from library_backend.api.cron import router as cron_router
from library_backend.api.rentals import router as rentals_router
from library_backend.app_logging import configure_logging
from library_backend.containers import AppContainer
from library_backend.domain.errors import (
    CopyUnavailableError,
    ElementNotFoundError,
    StorageError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Library Backend")
    app.state.container = container

    app.include_router(admin_router)
    app.include_router(cron_router)
    app.include_router(catalogue_router)
    app.include_router(rentals_router)

    @app.exception_handler(ElementNotFoundError)
    async def not_found(_request: Request, exc: ElementNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(CopyUnavailableError)
    async def copy_unavailable(
        _request: Request, exc: CopyUnavailableError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
        )

    @app.exception_handler(StorageError)
    async def storage_failure(request: Request, exc: StorageError) -> JSONResponse:
        logger.error(
            "Storage failure", extra={"path": request.url.path}, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Storage unavailable"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
