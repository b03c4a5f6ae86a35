"""Errors raised by university operations.

Each error knows its HTTP status and the JSON body it renders to, so the
API layer can translate any of them with a single exception handler.
"""

from typing import Any

NOT_FOUND_MESSAGE = "University Not Found"
MISSING_FIELDS_MESSAGE = "Missing required information"
ALPHA_TWO_CODE_MESSAGE = "Country abbreviation needs to be 2 characters long"
DUPLICATE_MESSAGE = "University already exists"


class UniversityError(Exception):
    """Base class for university errors."""

    status_code: int = 400

    def __init__(self, message: str, **extra: Any):
        self.message = message
        self.extra = extra
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error into a response body."""
        return {"error": self.message, **self.extra}


class UniversityValidationError(UniversityError):
    """Request data is missing or malformed."""

    status_code = 400


class UniversityConflictError(UniversityError):
    """A university with the same country, state/province and name exists."""

    status_code = 400

    def __init__(self, message: str = DUPLICATE_MESSAGE, **extra: Any):
        super().__init__(message, **extra)


class UniversityNotFoundError(UniversityError):
    """No university matches the given identifier."""

    status_code = 404

    def __init__(self, message: str = NOT_FOUND_MESSAGE, **extra: Any):
        super().__init__(message, **extra)
