"""Translation of application exceptions into HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pdftools.core.exceptions import AppError
from pdftools.schemas.base import StatusMessage

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render an application error with its status line."""
    if exc.status_code >= 500:
        logger.error(
            "Error handling %s %s: %s", request.method, request.url.path, exc
        )
    else:
        logger.warning(
            "Rejected %s %s: %s", request.method, request.url.path, exc
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": str(exc),
            "status": StatusMessage.error(str(exc)).model_dump(mode="json"),
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
