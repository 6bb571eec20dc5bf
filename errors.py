"""
Error kinds raised by the storefront services.

Each carries the HTTP status it is rendered with; the handlers registered
by `register_error_handlers` turn them into `{"error": ...}` payloads.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class StorefrontError(Exception):
    status_code = 500
    message = "Internal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(StorefrontError):
    status_code = 400
    message = "Invalid request"


class AuthorizationError(StorefrontError):
    status_code = 403
    message = "Unauthorized access"


class NotFoundError(StorefrontError):
    status_code = 404
    message = "Not found"


class ConflictError(StorefrontError):
    status_code = 409
    message = "Already exists"


class PersistenceError(StorefrontError):
    status_code = 500
    message = "Store operation failed"


class OrderFailedError(PersistenceError):
    message = "Failed to place order"


def _describe(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    if first.get("type") == "missing" and field:
        return f"{field} is required"
    return f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StorefrontError)
    async def storefront_error(request: Request, exc: StorefrontError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        body = {"error": exc.message}
        if isinstance(exc, OrderFailedError):
            body = {"success": False, "error": exc.message}
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        # A line item that cannot reference a product fails the order as a whole
        if any(tuple(e.get("loc", ()))[:2] == ("body", "items") for e in exc.errors()):
            logger.error("Order creation failed: %s", _describe(exc))
            failed = OrderFailedError()
            return JSONResponse(status_code=failed.status_code,
                                content={"success": False, "error": failed.message})
        return JSONResponse(status_code=400, content={"error": _describe(exc)})
