"""Mapping of domain and persistence errors to HTTP responses.

Every failure the API knows about is a client error (400). Not-found is
not an exception here: routes turn a ``None`` result into a 404 themselves.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from eventtalk.domain.error import DomainError


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Validation and identifier errors raised by domain services."""
    logfire.warn(
        "Request rejected",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


async def backend_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Failures from the database, passed through to the caller."""
    message = str(getattr(exc, "orig", None) or exc)
    logfire.error(
        "Persistence backend error",
        path=request.url.path,
        error=message,
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": message},
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are client errors like any other."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on an application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(SQLAlchemyError, backend_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
