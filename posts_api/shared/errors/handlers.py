"""
Centralized error handling for FastAPI.

Every failure raised while serving a request ends here and is turned
into one JSON error envelope:

    {"status": "fail" | "error", "message": str, "errors"?: [str], "stack"?: str}

Classification order (first match wins):
    1. Domain errors: status fixed by the error kind.
    2. Storage unique / foreign-key / not-null violations: 409 / 400 / 400.
    3. Storage unreachable: 503.
    4. Anything else: its own status if it carries one, else 500.

Stack traces are only exposed in development mode. In production the
fallback message is generic, except for framework 4xx errors.
"""

import logging
import traceback
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from posts_api.core.config import Environment
from posts_api.domain.posts.errors import DomainError, ValidationError
from posts_api.infrastructure.errors import (
    FOREIGN_KEY_VIOLATION,
    NOT_NULL_VIOLATION,
    UNIQUE_VIOLATION,
    StorageError,
)

HTTP_400 = 400
HTTP_409 = 409
HTTP_500 = 500
HTTP_503 = 503

LOG_MESSAGE = "Erro capturado"
INVALID_REQUEST_MESSAGE = "Dados inválidos"
INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"

# SQLSTATE -> (status, message)
_STORAGE_CONSTRAINTS: dict[str, tuple[int, str]] = {
    UNIQUE_VIOLATION: (HTTP_409, "Conflito: recurso já existe"),
    FOREIGN_KEY_VIOLATION: (
        HTTP_400,
        "Erro de referência: recurso relacionado não existe",
    ),
    NOT_NULL_VIOLATION: (HTTP_400, "Campos obrigatórios não preenchidos"),
}
_STORAGE_UNAVAILABLE = (HTTP_503, "Serviço temporariamente indisponível")


def _envelope_status(status_code: int) -> str:
    return "fail" if str(status_code).startswith("4") else "error"


def _format_stack(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def _from_request_validation(exc: RequestValidationError) -> ValidationError:
    """Normalize a framework body/query validation failure."""
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        reason = error.get("msg", "invalid")
        errors.append(f"{location}: {reason}" if location else reason)
    return ValidationError(INVALID_REQUEST_MESSAGE, errors)


class ErrorHandler:
    """Turns any exception into the JSON error envelope.

    Constructed once per application with an explicit runtime mode and
    logger; nothing is read from the process environment per request.

    Args:
        environment: Runtime mode. Development adds stack traces; production
            hides raw messages of unclassified failures.
        logger: Receives exactly one ERROR record per handled failure.
    """

    def __init__(self, environment: Environment, logger: logging.Logger) -> None:
        self._environment = environment
        self._logger = logger

    @property
    def is_development(self) -> bool:
        return self._environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self._environment == Environment.PRODUCTION

    async def __call__(self, request: Request, exc: Exception) -> Response:
        """Starlette exception handler entry point."""
        return self.build_response(request, exc)

    def build_response(self, request: Request, exc: Exception) -> JSONResponse:
        """Classify ``exc``, log it once and build the error response."""
        if isinstance(exc, RequestValidationError):
            exc = _from_request_validation(exc)

        status_code, body = self._classify(exc)

        if self.is_development:
            body["stack"] = _format_stack(exc)

        self._log(request, exc, status_code)
        headers = getattr(exc, "headers", None) if isinstance(exc, StarletteHTTPException) else None
        return JSONResponse(status_code=status_code, content=body, headers=headers)

    def _classify(self, exc: Exception) -> tuple[int, dict[str, Any]]:
        if isinstance(exc, DomainError):
            body: dict[str, Any] = {"status": exc.status, "message": exc.message}
            if isinstance(exc, ValidationError):
                body["errors"] = list(exc.errors)
            return exc.http_status, body

        if isinstance(exc, StorageError):
            mapped: Optional[tuple[int, str]] = _STORAGE_CONSTRAINTS.get(exc.code or "")
            if mapped is None and exc.is_connection_failure:
                mapped = _STORAGE_UNAVAILABLE
            if mapped is not None:
                status_code, message = mapped
                return status_code, {
                    "status": _envelope_status(status_code),
                    "message": message,
                }

        return self._fallback(exc)

    def _fallback(self, exc: Exception) -> tuple[int, dict[str, Any]]:
        is_framework_error = isinstance(exc, StarletteHTTPException)
        if is_framework_error:
            status_code = exc.status_code
            message = str(exc.detail)
        else:
            status_code = getattr(exc, "status_code", None) or HTTP_500
            message = str(exc) or type(exc).__name__

        # Framework 4xx details (unknown route, wrong method) are safe to show.
        if self.is_production and (not is_framework_error or status_code >= HTTP_500):
            message = INTERNAL_ERROR_MESSAGE

        return status_code, {"status": _envelope_status(status_code), "message": message}

    def _log(self, request: Request, exc: Exception, status_code: int) -> None:
        client = request.client
        self._logger.error(
            LOG_MESSAGE,
            extra={
                "context": {
                    "message": getattr(exc, "message", None) or str(exc),
                    "stack": _format_stack(exc) if self.is_development else None,
                    "url": request.url.path,
                    "method": request.method,
                    "ip": client.host if client else None,
                    "status_code": status_code,
                }
            },
        )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Catches failures that no exception handler claimed.

    Only failures raised before the response starts reach ``dispatch``;
    a failure while the body is streaming is left to the server, so a
    request never gets two responses.
    """

    def __init__(self, app: ASGIApp, error_handler: ErrorHandler) -> None:
        super().__init__(app)
        self._error_handler = error_handler

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return self._error_handler.build_response(request, exc)


def register_error_handlers(app: FastAPI, error_handler: ErrorHandler) -> None:
    """Route every failure of ``app`` through ``error_handler``.

    Args:
        app: The FastAPI application instance.
        error_handler: The configured handler.
    """
    app.add_exception_handler(DomainError, error_handler)
    app.add_exception_handler(StorageError, error_handler)
    app.add_exception_handler(RequestValidationError, error_handler)
    app.add_exception_handler(StarletteHTTPException, error_handler)
    app.add_middleware(ErrorHandlerMiddleware, error_handler=error_handler)
