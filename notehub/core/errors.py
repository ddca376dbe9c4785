"""Error taxonomy shared by the service layer and the HTTP boundary.

Every ``NoteHubError`` carries the HTTP status it maps to; the handlers in
``notehub.main`` turn it into a ``{"message": ...}`` body.
"""

from fastapi import status


class NoteHubError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(NoteHubError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class Forbidden(NoteHubError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class PlanLimitExceeded(Forbidden):
    default_message = "Note limit reached"


class NotFound(NoteHubError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ValidationFailed(NoteHubError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class DuplicateTenant(ValidationFailed):
    default_message = "Organization name already taken"


class DuplicateUser(ValidationFailed):
    default_message = "Email already registered"


# ── Non-HTTP errors ──────────────────────────────────────────

class InvalidToken(Exception):
    """Signature mismatch, malformed token, missing claim or expiry."""


class ConfigurationError(RuntimeError):
    """Required process configuration is missing."""
