"""Error taxonomy shared by services and the HTTP layer.

Every service failure surfaces as a ``FridgeError`` subclass carrying a stable
machine-readable ``kind`` and the HTTP status the API maps it to. Messages are
written for end users and never include storage identifiers.
"""

from fastapi import status


class FridgeError(Exception):
    """Base class for errors reported to API callers."""

    kind = "internal"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(FridgeError):
    """Missing or malformed input."""

    kind = "validation"
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthenticatedError(FridgeError):
    """Missing or rejected credential."""

    kind = "unauthenticated"
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(FridgeError):
    """Authenticated caller is not a member of the fridge."""

    kind = "forbidden"
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(FridgeError):
    """Fridge, item or food reference is absent."""

    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(FridgeError):
    """Request collides with existing state."""

    kind = "conflict"
    status_code = status.HTTP_409_CONFLICT


class InternalError(FridgeError):
    """Persistence or unexpected failure."""


class UniqueViolationError(Exception):
    """Raised by repositories when a unique constraint rejects a write."""

    def __init__(self, constraint: str | None = None) -> None:
        super().__init__(constraint or "unique constraint violated")
        self.constraint = constraint


class IdentityProviderError(Exception):
    """Raised by identity provider adapters when the provider rejects a call."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
