# inventory/api/errors.py
"""
Translate exceptions into the envelope every client reads:
  {"success": false, "message": "...", "error"?: "...", "errors"?: {field: msg}}
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from inventory.domain.errors import InternalError, InventoryError, ValidationError

logger = logging.getLogger(__name__)


def error_body(message: str, *, error: Optional[str] = None, errors: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "message": message}
    if error:
        body["error"] = error
    if errors:
        body["errors"] = errors
    return body


def _field_name(loc) -> str:
    # ("body", "price") -> "price"; ("body",) -> "body"
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


async def inventory_error_handler(request: Request, exc: InventoryError) -> JSONResponse:
    errors = exc.errors if isinstance(exc, ValidationError) else None
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, error=exc.error, errors=errors))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = {_field_name(e.get("loc", ())): e.get("msg", "Invalid value") for e in exc.errors()}
    logger.info("%s %s rejected body errors=%s", request.method, request.url.path, errors)
    return JSONResponse(status_code=400, content=error_body("Invalid request data", errors=errors))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(status_code=exc.status_code, content=error_body(message), headers=getattr(exc, "headers", None))


async def mongo_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.exception("%s %s database error", request.method, request.url.path)
    return await inventory_error_handler(request, InternalError("Database error", error=str(exc)))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s unexpected error", request.method, request.url.path)
    return await inventory_error_handler(request, InternalError("Internal server error", error=str(exc)))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InventoryError, inventory_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(PyMongoError, mongo_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
