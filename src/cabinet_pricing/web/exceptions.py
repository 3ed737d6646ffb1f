"""Error handlers for the REST API."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cabinet_pricing.application.commands import ProjectNotFoundError
from cabinet_pricing.application.config import ConfigError
from cabinet_pricing.infrastructure.storage import StorageError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(ProjectNotFoundError)
    async def project_not_found_handler(
        request: Request, exc: ProjectNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Project not found: {exc.project_id}",
                "error_type": "not_found",
                "details": None,
            },
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error(f"Storage failure on {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=500,
            content={
                "error": exc.message,
                "error_type": "storage",
                "details": [{"key": exc.key}] if exc.key else None,
            },
        )
