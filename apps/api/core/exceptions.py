"""
API error types.

Every deliberate API error is an APIException: an HTTP status, a readable
``detail`` and a stable ``error_code`` clients can switch on. Measurement
errors keep the whole message list so a form can show all of them at once.
"""
import logging
from typing import Dict, List, Optional, Union

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from core.logging import log_context

logger = logging.getLogger(__name__)


class APIException(HTTPException):
    """HTTPException with a machine-readable error code."""

    status_code_default = status.HTTP_400_BAD_REQUEST
    error_code = "BAD_REQUEST"

    def __init__(
        self,
        detail: Union[str, List[str]],
        headers: Optional[Dict[str, str]] = None
    ):
        super().__init__(status_code=self.status_code_default, detail=detail, headers=headers)


class InvalidMeasurementError(APIException):
    """Weight, height or a supplied BMI failed validation."""

    status_code_default = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "VALIDATION_ERROR"

    def __init__(self, errors: List[str]):
        super().__init__(detail=list(errors))
        self.errors = list(errors)


class NotFoundError(APIException):
    status_code_default = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id):
        super().__init__(f"User not found: {user_id}")


class EmptyHistoryError(NotFoundError):
    """The user has no measurement to build a plan from."""

    def __init__(self):
        super().__init__("No measurements recorded yet")


class UnauthorizedError(APIException):
    status_code_default = status.HTTP_401_UNAUTHORIZED
    error_code = "UNAUTHORIZED"

    def __init__(self, detail: str = "Authentication required"):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenError(APIException):
    status_code_default = status.HTTP_403_FORBIDDEN
    error_code = "FORBIDDEN"

    def __init__(self, detail: str = "Access denied"):
        super().__init__(detail)


class EmailTakenError(APIException):
    """Another account already uses the email."""

    status_code_default = status.HTTP_409_CONFLICT
    error_code = "CONFLICT"

    def __init__(self, detail: str = "Email already in use"):
        super().__init__(detail)


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """Render APIException subclasses as ``{detail, error_code}``."""
    logger.info(
        f"{exc.error_code}: {request.method} {request.url.path}",
        extra=log_context(status_code=exc.status_code, error_code=exc.error_code),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "error_code": exc.error_code},
        headers=exc.headers,
    )
