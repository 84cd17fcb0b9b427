# app/core/exceptions.py
"""
Errores de dominio y su traducción a respuestas HTTP.

Los servicios señalan "no existe" y "conflicto" lanzando las excepciones
tipadas de este módulo; ``register_exception_handlers`` instala en la
aplicación el único punto donde se convierten a códigos de estado:

- body inválido            -> 400 con lista de errores
- path inválido (id < 1)   -> 404, la ruta no coincide
- RequestedResourceNotFoundError    -> 404
- RequestedResourceHasConflictError -> 409
- cualquier otra excepción          -> 500 sin detalles internos, generado
  por ``unexpected_error_response`` dentro del middleware de requests para
  que conserve los headers de CORS y de versión
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.shared.schemas.common import (
    ErrorResponse, ValidationErrorItem, ValidationErrorResponse
)

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


class KatlaSportError(Exception):
    """Base de los errores de dominio"""

    default_message = "Domain error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class RequestedResourceNotFoundError(KatlaSportError):
    default_message = "The requested resource doesn't exist."


class RequestedResourceHasConflictError(KatlaSportError):
    default_message = "The requested resource has a conflict."


def _error_body(detail: str) -> dict:
    return ErrorResponse(detail=detail).model_dump()


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()

    # Un parámetro de ruta que no cumple la restricción equivale a que
    # ninguna ruta coincida
    if any((err.get("loc") or ("",))[0] == "path" for err in errors):
        logger.info(f"Route constraint rejected {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=_error_body("Not Found")
        )

    items = [
        ValidationErrorItem(
            loc=list(err.get("loc", ())),
            msg=str(err.get("msg", "")),
            type=str(err.get("type", ""))
        )
        for err in errors
    ]
    body = ValidationErrorResponse(detail="The request is invalid.", errors=items)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump()
    )


async def not_found_exception_handler(request: Request, exc: RequestedResourceNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=_error_body(exc.message)
    )


async def conflict_exception_handler(request: Request, exc: RequestedResourceHasConflictError):
    logger.warning(f"Conflict on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=_error_body(exc.message)
    )


def unexpected_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Scrubbed 500 for any exception that escapes the typed handlers"""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(UNEXPECTED_ERROR_MESSAGE)
    )


def register_exception_handlers(app: FastAPI):
    """Install the error mapping boundary on every route of ``app``"""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(RequestedResourceNotFoundError, not_found_exception_handler)
    app.add_exception_handler(RequestedResourceHasConflictError, conflict_exception_handler)
