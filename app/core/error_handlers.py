# app/core/error_handlers.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI):
    """
    Handlers globales.

    - RequestValidationError -> 400 con el detalle de cada campo
    - Exception -> 500 genérico, sin exponer detalles internos

    Los errores de dominio (HTTPException) usan el handler por defecto de FastAPI.
    """

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [
            {
                "field": ".".join(str(loc) for loc in error["loc"] if loc != "body"),
                "message": error["msg"],
                "type": error["type"]
            }
            for error in exc.errors()
        ]
        logger.warning(f"Request inválido en {request.url.path}: {errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": {
                    "error_code": "VALIDATION_ERROR",
                    "message": "Datos de la solicitud inválidos",
                    "errors": errors
                }
            }
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Error no controlado en {request.method} {request.url.path}: {exc}",
            exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": {
                    "error_code": "INTERNAL_ERROR",
                    "message": "Error interno del servidor"
                }
            }
        )
