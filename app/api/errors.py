import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

PRODUCT_VALIDATION_MESSAGE = "Validation failed: Name is required and price/stock must be positive."
PATH_VALIDATION_MESSAGE = "Validation failed: Product ID must be a valid integer."


def _raw_message(exc: SQLAlchemyError) -> str:
    """Return the driver's own error text when there is one."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(error["loc"][0] == "path" for error in errors):
        message = PATH_VALIDATION_MESSAGE
    else:
        message = PRODUCT_VALIDATION_MESSAGE

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": message, "errors": jsonable_encoder(errors)},
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": _raw_message(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map validation and storage failures onto 400 and 500 responses."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
