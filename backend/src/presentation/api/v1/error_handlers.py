"""
Domain Exception Handlers
Map core exceptions to HTTP responses with a ``code`` and a ``message``
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from core.exceptions import (
    AuthenticationException,
    AuthorizationException,
    BookingSystemError,
    DomainException,
    EligibilityError,
    InvalidTransitionError,
    RepositoryException,
    ResourceNotFoundException,
    ValidationException,
    WageBelowMinimumError,
)


# Most specific first; the first isinstance match wins
STATUS_BY_EXCEPTION = (
    (EligibilityError, status.HTTP_409_CONFLICT),
    (InvalidTransitionError, status.HTTP_409_CONFLICT),
    (WageBelowMinimumError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ValidationException, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ResourceNotFoundException, status.HTTP_404_NOT_FOUND),
    (AuthorizationException, status.HTTP_403_FORBIDDEN),
    (AuthenticationException, status.HTTP_401_UNAUTHORIZED),
    (BookingSystemError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (RepositoryException, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(exc: DomainException) -> int:
    for exc_type, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def error_body(exc: DomainException) -> dict:
    body = {"code": exc.code, "message": exc.message}

    if isinstance(exc, WageBelowMinimumError):
        body["required_minimum"] = str(exc.required_minimum)
        body["shortfall"] = str(exc.shortfall)
    elif isinstance(exc, ValidationException):
        body["field"] = exc.field

    return body


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status_code = status_for(exc)

    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code} {exc}")
        # Storage details stay in the logs
        body = {"code": BookingSystemError.code, "message": BookingSystemError().message}
    else:
        logger.info(f"{request.method} {request.url.path} -> {status_code} {exc.code}")
        body = error_body(exc)

    return JSONResponse(status_code=status_code, content=body)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
