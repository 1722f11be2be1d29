"""Error taxonomy for publish and metadata calls."""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of everything that can go wrong in a publish attempt."""

    EMPTY_INPUT = "empty_input"
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_RESPONSE = "malformed_response"
    APPLICATION_FAILURE = "application_failure"
    PERSISTENCE_FAILURE = "persistence_failure"


class PublishError(Exception):
    """Base class for errors raised by the remote provider client."""

    kind: ErrorKind = ErrorKind.TRANSPORT_FAILURE

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class TransportFailure(PublishError):
    """The publish call never produced a response."""

    kind = ErrorKind.TRANSPORT_FAILURE


class MalformedResponse(PublishError):
    """The response body could not be read as a publish result."""

    kind = ErrorKind.MALFORMED_RESPONSE
