"""Error taxonomy for grocery list consolidation."""

from dataclasses import dataclass
from enum import Enum

from grocerylist.connectors.base import ConnectorError


class ErrorType(str, Enum):
    """Kinds of failure surfaced to the caller."""

    NETWORK = "network_error"
    AUTH = "authentication_error"
    NOT_FOUND = "not_found"
    VALIDATION = "validation_error"
    SERVER = "server_error"
    DISABLED = "disabled"
    UNKNOWN = "unknown_error"


ERROR_MESSAGES: dict[ErrorType, str] = {
    ErrorType.NETWORK: "Unable to connect to the server. Please check your internet connection.",
    ErrorType.AUTH: "You are not authorized to perform this action.",
    ErrorType.NOT_FOUND: "The requested resource was not found.",
    ErrorType.VALIDATION: "Please check your input and try again.",
    ErrorType.SERVER: "Something went wrong on our end. Please try again later.",
    ErrorType.DISABLED: "AI consolidation is not enabled.",
    ErrorType.UNKNOWN: "An unexpected error occurred. Please try again.",
}


@dataclass(frozen=True)
class EnhancementFailure:
    """A failed remote enhancement, as shown to the user."""

    message: str
    error_type: ErrorType
    status_code: int | None = None
    detail: str | None = None

    @classmethod
    def of(cls, error_type: ErrorType, **kwargs) -> "EnhancementFailure":
        return cls(message=ERROR_MESSAGES[error_type], error_type=error_type, **kwargs)


class SessionClosedError(Exception):
    """Raised when a closed consolidation session is used."""

    def __init__(self, message: str = "Consolidation session is closed", session_id: str | None = None):
        super().__init__(message)
        self.session_id = session_id


def _type_for_status(status_code: int | None) -> ErrorType:
    if status_code is None:
        return ErrorType.NETWORK
    if status_code in (401, 403):
        return ErrorType.AUTH
    if status_code == 404:
        return ErrorType.NOT_FOUND
    if status_code in (400, 422):
        return ErrorType.VALIDATION
    if status_code >= 500:
        return ErrorType.SERVER
    return ErrorType.UNKNOWN


def classify_error(exc: BaseException) -> EnhancementFailure:
    """Map an exception from the remote path to a user-facing failure."""
    if isinstance(exc, ConnectorError):
        return EnhancementFailure.of(
            _type_for_status(exc.status_code),
            status_code=exc.status_code,
            detail=str(exc),
        )
    return EnhancementFailure.of(ErrorType.UNKNOWN, detail=str(exc) or type(exc).__name__)
