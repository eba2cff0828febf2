"""
Error taxonomy for the Inventory API and the handlers that render it.

Every failure leaves the API as a JSON object of the form {"error": "<message>"}
with a status code that matches the error kind. Internal details (tracebacks,
driver messages, constraint names) are logged, never returned.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("exceptions")


class InventoryError(Exception):
    """Base class for errors surfaced to API callers."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(InventoryError):
    """Malformed or missing input. The caller must fix the request."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "invalid request"


class NotFoundError(InventoryError):
    """A referenced entity does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "not found"


class ConflictError(InventoryError):
    """A uniqueness rule would be violated."""
    status_code = status.HTTP_409_CONFLICT
    default_message = "conflict"


class InternalError(InventoryError):
    """Store or unexpected failure. The message is always generic."""


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(InventoryError)
    async def inventory_error_handler(request: Request, exc: InventoryError):
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Only reached for bodies that are not a JSON object at all;
        # field-level checks raise ValidationError with their own message.
        logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
        return error_response(status.HTTP_400_BAD_REQUEST, "invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, InternalError.default_message)
