"""Exception handlers for the FastAPI app.

Every error body has the shape {"error", "message", "details"?}:
- TeamAuthException: its own status_code (403 PERMISSION_DENIED, 503 SERVICE_UNAVAILABLE)
- request validation: 422 VALIDATION_ERROR
- HTTPException: its status, HTTP_ERROR
- anything else: 500 INTERNAL_ERROR
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from teamauth.core.config import get_settings
from teamauth.domain.exceptions import TeamAuthException

logger = logging.getLogger(__name__)


def _error(status_code: int, error: str, message: Any, details: Any = None) -> JSONResponse:
    content: dict[str, Any] = {"error": error, "message": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def _on_teamauth_error(request: Request, exc: TeamAuthException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _on_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = []
    for err in exc.errors():
        err = dict(err)
        # ctx may hold the raised exception object
        if "ctx" in err:
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
        errors.append(err)
    return _error(422, "VALIDATION_ERROR", "Request validation failed", errors)


def _on_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, "HTTP_ERROR", exc.detail)


def _on_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s", request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TeamAuthException, _on_teamauth_error)
    app.add_exception_handler(RequestValidationError, _on_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, _on_http_error)
    app.add_exception_handler(Exception, _on_unhandled_error)
