"""Error types raised by the Spacetime services.

Every error carries the HTTP status it maps to and a client-safe message.
The handlers registered in ``spacetime.main`` turn them into
``{"message": ...}`` JSON responses.
"""


class SpacetimeError(Exception):
    """Base exception for all domain errors."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MemoryNotFoundError(SpacetimeError):
    """Raised when no memory matches the requested id."""

    status_code = 404

    def __init__(self, message: str = "Memory not found"):
        super().__init__(message)


class MemoryAccessDeniedError(SpacetimeError):
    """Raised when the caller may not read or modify a memory."""

    status_code = 403


class UploadRejectedError(SpacetimeError):
    """Raised when an uploaded file is missing, of the wrong type or too large."""

    status_code = 400
