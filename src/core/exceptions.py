"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (400, field-keyed like validation errors)
    HANDLE_TAKEN = "HANDLE_TAKEN"
    PROFILE_EXISTS = "PROFILE_EXISTS"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception.

    ``errors`` is a field-keyed mapping of user-facing messages
    (``{"handle": "That handle already exists"}``). It is rendered at the
    top level of the error body next to the standard envelope.
    """

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
        errors: dict[str, str] | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        self.errors = errors or {}
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class ProfileValidationError(AppException):
    """Request payload failed field validation."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Invalid input",
            status_code=400,
            details={"fields": sorted(errors)},
            errors=errors,
        )


class ProfileNotFoundError(AppException):
    """No profile matches the lookup."""

    def __init__(
        self,
        message: str = "There is no profile for this user",
        lookup: dict[str, str] | None = None,
    ) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=message,
            status_code=404,
            details=lookup,
            errors={"noprofile": message},
        )


class HandleTakenError(AppException):
    """Another profile already owns the handle."""

    def __init__(self, handle: str) -> None:
        super().__init__(
            error_code=ErrorCode.HANDLE_TAKEN,
            message="That handle already exists",
            status_code=400,
            details={"handle": handle},
            errors={"handle": "That handle already exists"},
        )


class ProfileAlreadyExistsError(AppException):
    """A concurrent request created the caller's profile first."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_EXISTS,
            message="A profile already exists for this user",
            status_code=400,
            details={"user_id": user_id},
            errors={"profile": "A profile already exists for this user"},
        )
