from enum import Enum
from typing import Optional


class ImprovementErrorKind(str, Enum):
    INVALID_INPUT = "InvalidInput"
    MISSING_CREDENTIAL = "MissingCredential"
    TRANSPORT_ERROR = "TransportError"
    EMPTY_RESPONSE = "EmptyResponse"
    UNKNOWN_ERROR = "UnknownError"


class ImprovementError(Exception):
    """Base for all improvement failures."""

    kind = ImprovementErrorKind.UNKNOWN_ERROR
    default_message = "Unknown error occurred"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(ImprovementError):
    """The prompt is empty after trimming."""

    kind = ImprovementErrorKind.INVALID_INPUT
    default_message = "Original prompt cannot be empty"


class MissingCredentialError(ImprovementError):
    """No API key was supplied for the remote path."""

    kind = ImprovementErrorKind.MISSING_CREDENTIAL
    default_message = "API key is required"


class TransportError(ImprovementError):
    """The chat-completions endpoint answered with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the endpoint.
        reason: HTTP reason phrase, possibly empty.
    """

    kind = ImprovementErrorKind.TRANSPORT_ERROR

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"API request failed: {status_code} {reason}".rstrip())


class EmptyResponseError(ImprovementError):
    """The endpoint answered but carried no usable completion text."""

    kind = ImprovementErrorKind.EMPTY_RESPONSE
    default_message = "No improved prompt received from API"


class UnknownImprovementError(ImprovementError):
    """Network failure or any other unexpected exception."""
