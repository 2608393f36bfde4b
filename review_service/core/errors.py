"""
Error handling utilities

All application errors derive from ErrorResponse and are rendered as
``{"error": <message>, "details": {...}}`` by the registered handlers.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from review_service.core.logger import logger


class ErrorResponse(Exception):
    """Custom exception for application errors"""

    def __init__(self, message: str, status_code: int = 400, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ValidationError(ErrorResponse):
    """A submitted field is missing, malformed or out of range"""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=400, details=details)


class NotFoundError(ErrorResponse):
    """The addressed entity does not exist"""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=404, details=details)


class StoreError(ErrorResponse):
    """The persistence layer failed; the message is always generic"""

    def __init__(self, message: str = "Server error"):
        super().__init__(message, status_code=500)


class ErrorResponseModel(BaseModel):
    """Pydantic model for error responses"""
    error: str
    details: dict = None


async def error_response_handler(request: Request, exc: ErrorResponse):
    """Handler for ErrorResponse exceptions"""
    metadata = {
        "event": "error_response",
        "status_code": exc.status_code,
        "url": str(request.url),
        "method": request.method,
        **exc.details,
    }

    if exc.status_code >= 500:
        logger.error(f"Error: {exc.message}", metadata=metadata)
    else:
        logger.warning(f"Error: {exc.message}", metadata=metadata)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "details": exc.details}
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handler for HTTP errors raised by routing (unknown path, wrong method) and HTTPException"""
    logger.warning(
        f"HTTPException: {exc.detail}",
        metadata={
            "event": "http_exception",
            "status_code": exc.status_code,
            "url": str(request.url),
            "method": request.method,
        }
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "details": {}},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Handler for malformed request bodies rejected by FastAPI"""
    logger.warning(
        "Malformed request body",
        metadata={
            "event": "request_validation_error",
            "url": str(request.url),
            "method": request.method,
        }
    )

    return JSONResponse(
        status_code=422,
        content={"error": "Validation error", "details": {"errors": jsonable_errors(exc)}}
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Reduce pydantic error entries to JSON-safe location/message pairs"""
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
