"""
Error hierarchy for the Bootcamp API.

Every error raised by use cases, repositories and infrastructure clients that
should reach the client derives from BootcampAPIError and carries the HTTP
status it maps to. The global handlers in api.error_handlers turn these into
the {"success": false, "error": message} envelope.
"""


class BootcampAPIError(Exception):
    """Base exception for all errors surfaced to API clients."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class BadRequestError(BootcampAPIError):
    """Raised when the request is malformed or fails a business rule."""
    status_code = 400


class ConflictError(BadRequestError):
    """Raised when a record would violate a uniqueness rule (e.g. one bootcamp per publisher)."""


class FileTooLargeError(BadRequestError):
    """Raised when an uploaded file exceeds the configured size limit."""


class UnauthorizedError(BootcampAPIError):
    """Raised when the caller is not authenticated."""
    status_code = 401


class ForbiddenError(BootcampAPIError):
    """Raised when the caller's role is not allowed on a route."""
    status_code = 403


class OwnershipError(ForbiddenError):
    """Raised when the caller is neither the record owner nor an admin."""
    status_code = 401


class NotFoundError(BootcampAPIError):
    """Raised when a requested record does not exist."""
    status_code = 404


# -----------------------------------------------------------------------------
# Server errors
# -----------------------------------------------------------------------------


class InternalError(BootcampAPIError):
    """Raised for unexpected server-side failures."""
    status_code = 500


class DatabaseError(InternalError):
    """Raised when the document store fails."""


class GeocodingError(InternalError):
    """Raised when the geocoding service cannot be reached or errors."""
