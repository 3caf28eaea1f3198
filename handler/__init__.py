import logging
from fastapi import Request, responses, exceptions
from pydantic import ValidationError
from typing import Union
from starlette.exceptions import HTTPException as StarletteHTTPException
from error import ServerError

logger = logging.getLogger(__name__)


def value_error_handler(request: Request, exc: ValueError) -> responses.JSONResponse:
    return responses.JSONResponse(
        status_code=400,
        content={"error": exc.args[0]}
    )


def validation_error_handler(
    request: Request, exec: Union[ValidationError, exceptions.RequestValidationError]
) -> responses.JSONResponse:
    """Validation Error Handler

    This method is serves a custom error handler
    for all validation errors raised by pydantic
    """
    error = exec.errors()[0]
    field = error.get("loc")[-1]
    message = error.get("msg")

    error_msg = f"Invalid {field}: {message}"
    return responses.JSONResponse(
        status_code=400, content={"error": error_msg}
    )


def validation_http_exceptions_handler(
    request: Request, exec: StarletteHTTPException
) -> responses.JSONResponse:
    """Http exceptions handler, unknown routes included"""
    return responses.JSONResponse(
        status_code=exec.status_code, content={"error": exec.detail}
    )


def server_error_handler(request: Request, exec: ServerError) -> responses.JSONResponse:
    """Server error handler"""
    logger.info(
        "%s %s -> %s: %s", request.method, request.url.path, exec.status_code, exec.msg
    )
    return responses.JSONResponse(
        status_code=exec.status_code,
        content={"error": str(exec.msg)}
    )
