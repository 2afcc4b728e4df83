"""
Centralized exception handling for the booking API.

This module provides:
- Base APIException class extending FastAPI's HTTPException.
- Domain-specific exceptions with appropriate status codes and headers.
- Exception handlers that render every error as a JSON body with `detail`.

Usage:
    - Raise specific exceptions in services or route handlers.
    - Call `register_exception_handlers(app)` once when building the app.
"""

from traceback import format_exception
from logging import getLogger
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


# ---------------------------------------------------------------------------
# Utility functions
# ---------------------------------------------------------------------------
def logException(e: Exception) -> None:
    """Log an exception with traceback using Uvicorn's error logger."""
    detail = "".join(format_exception(type(e), e, e.__traceback__))
    logger = getLogger("uvicorn.error")
    logger.error(detail)


# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------
class APIException(HTTPException):
    """
    Base class for all application-specific exceptions.

    Provides default handling of status_code, detail and headers. Subclasses
    may set `extra` to add fields next to `detail` in the response body.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    detail = None
    headers = None

    def __init__(self, *args, extra: Optional[Dict[str, Any]] = None, **kwargs):
        kwargs.setdefault("status_code", self.status_code)
        kwargs.setdefault("detail", self.detail)
        kwargs.setdefault("headers", self.headers)
        super().__init__(*args, **kwargs)
        self.extra = extra or {}


# ---------------------------------------------------------------------------
# Exception Classes
# ---------------------------------------------------------------------------
class TripNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Trip not found"
    headers = {"X-Error": "TripNotFound"}


class BookingNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Booking not found"
    headers = {"X-Error": "BookingNotFound"}


class InsufficientSeats(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Not enough seats available"
    headers = {"X-Error": "InsufficientSeats"}

    def __init__(self, available_seats: int):
        super().__init__(extra={"availableSeats": available_seats})
        self.available_seats = available_seats


class NotBookingOwner(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "Not authorized to cancel this booking"
    headers = {"X-Error": "NotBookingOwner"}


class MissingRouteParameters(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Origin and destination are required"
    headers = {"X-Error": "MissingRouteParameters"}


class InvalidTransportMode(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    headers = {"X-Error": "InvalidTransportMode"}

    def __init__(self, value: str):
        super().__init__(detail=f"Invalid transport type: {value}")


class InvalidDateRange(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    headers = {"X-Error": "InvalidDateRange"}

    def __init__(self, detail: str):
        super().__init__(detail=detail)


class EmailAlreadyRegistered(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Email already registered"
    headers = {"X-Error": "EmailAlreadyRegistered"}


class InvalidCredentials(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Incorrect email or password"
    headers = {"X-Error": "InvalidCredentials", "WWW-Authenticate": "Bearer"}


class InvalidToken(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Could not validate credentials"
    headers = {"X-Error": "InvalidToken", "WWW-Authenticate": "Bearer"}


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------
async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    body = {"detail": exc.detail}
    body.update(exc.extra)
    return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
        headers={"X-Error": "ValidationError"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logException(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
