# ads_online/core/exceptions.py
from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ads_online.core.logger import logger
from ads_online.schemas.error import ErrorResponse

DEFAULT_ERROR_MESSAGE = "Unexpected error"

class NotFoundException(HTTPException):
    """Referenced entity does not exist"""
    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=message)

class ForbiddenException(HTTPException):
    """Authenticated, but not the owner or an admin"""
    def __init__(self, message: str = "Access denied"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=message)

class BadRequestException(HTTPException):
    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)

class ImageUploadException(BadRequestException):
    """Missing, empty, oversized or unsupported image"""

class ImageDeletionException(HTTPException):
    """Stored image reference cannot be parsed back into an id"""
    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)

class UnauthorizedException(HTTPException):
    """Missing or wrong HTTP Basic credentials"""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=None,
            headers={"WWW-Authenticate": "Basic"},
        )

def error_response(status_code: int, message: str | None, headers: dict | None = None) -> JSONResponse:
    body = ErrorResponse(status=status_code, message=message or DEFAULT_ERROR_MESSAGE)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc, UnauthorizedException):
        # 401 goes out with an empty body
        return Response(status_code=exc.status_code, headers=exc.headers)

    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} - {exc.status_code}: {exc.detail}")
    return error_response(exc.status_code, exc.detail, getattr(exc, "headers", None))

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = ", ".join(_format_error(error) for error in exc.errors())
    logger.warning(f"Validation error: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)

async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, DEFAULT_ERROR_MESSAGE)

def _format_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    if location:
        return f"{location}: {error.get('msg')}"
    return str(error.get("msg"))

def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as {status, message}"""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
