# vehicle_registry/middleware/error_handlers.py
import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vehicle_registry.core.config import settings
from vehicle_registry.core.validation import FieldError

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    content = {"success": False, "message": exc.detail}
    errors = getattr(exc, "errors", None)
    if errors:
        content["errors"] = [error.model_dump() for error in errors]
    if getattr(exc, "error", None) is not None:
        content["error"] = exc.error
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for err in exc.errors():
        loc = [part for part in err.get("loc", ()) if part != "body"]
        # json decode errors are located by character offset
        field = loc[-1] if loc and isinstance(loc[-1], str) else "body"
        errors.append(FieldError(field=field, message=err.get("msg", "Invalid value")))
    logger.info(f"Malformed request to {request.url.path}: {[e.field for e in errors]}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Validation failed",
            "errors": [error.model_dump() for error in errors],
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}\n{traceback.format_exc()}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": "Something went wrong!",
            "error": {} if settings.is_production else str(exc),
        },
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
