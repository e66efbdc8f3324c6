"""API error envelope

Every non-2xx response body has the shape
``{"error": {"code": ..., "message": ..., "details": [...]}}``.
"""

import logging
from typing import Dict
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from libs.result import Error

logger = logging.getLogger(__name__)

# Use case error code -> HTTP status
ERROR_STATUS_CODES: Dict[str, int] = {
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "CUSTOMER_EMAIL_TAKEN": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "USER_EMAIL_TAKEN": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "UNAUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "INVOICE_ACCESS_DENIED": status.HTTP_403_FORBIDDEN,
    "INVOICE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CUSTOMER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CUSTOMER_IN_USE": status.HTTP_409_CONFLICT,
}


class ApiError(Exception):
    def __init__(self, error: Error, status_code: int):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


class ClientError(ApiError):
    """4xx - the caller can fix the request"""

    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error, status_code)


class ServerError(ApiError):
    """5xx - storage or configuration failure; safe to retry the whole request"""

    def __init__(self, error: Error, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(error, status_code)


def raise_for_error(error: Error) -> None:
    """Translate a use case error into the matching ApiError"""
    status_code = ERROR_STATUS_CODES.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)


def error_body(error: Error) -> dict:
    body = {"code": error.code, "message": error.message}
    if error.details:
        body["details"] = jsonable_encoder(error.details)
    return {"error": body}


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: "
            f"{exc.error.code} ({exc.error.reason})"
        )
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.error))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    error = Error(
        code="VALIDATION_ERROR",
        message="The given data was invalid",
        details=details,
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_body(error),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
