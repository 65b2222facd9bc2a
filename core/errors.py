"""Application error definitions and FastAPI handlers."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppException(Exception):
    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST, code: str = "error"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)


class BadRequestException(AppException):
    def __init__(self, message: str = "Solicitud inválida"):
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, code="bad_request")


class NotFoundException(AppException):
    def __init__(self, message: str = "Registro no encontrado"):
        super().__init__(message=message, status_code=status.HTTP_404_NOT_FOUND, code="not_found")


class UnauthorizedException(AppException):
    def __init__(self, message: str = "Acceso denegado"):
        super().__init__(message=message, status_code=status.HTTP_401_UNAUTHORIZED, code="unauthorized")


def _format_error(detail: str, code: str):
    return {"msg": detail, "code": code}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        logger.info(exc.message, extra={"error_code": exc.code, "path": request.url.path})
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedException) else None
        return JSONResponse(
            status_code=exc.status_code,
            content=_format_error(exc.message, exc.code),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "validation_error", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_format_error("Faltan campos requeridos o tienen un formato inválido", "validation_error"),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "internal_error", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_format_error("Error interno del servidor", "internal_error"),
        )
