"""Exceptions raised by the submission workflow."""

from typing import Any


class SubmissionError(Exception):
    """Base exception for all submission workflow errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ValidationError(SubmissionError):
    """Raised when local input is empty or malformed.

    Never reaches the network. ``errors`` maps field names to messages so
    they can be displayed next to the offending input.
    """

    def __init__(self, message: str, errors: dict[str, str] | None = None, *args, **kwargs):
        self.errors = dict(errors or {})
        super().__init__(message, *args, **kwargs)


class PreconditionError(SubmissionError):
    """Raised when an action is attempted out of order.

    Submitting before the email is verified, removing the last subentity,
    or starting a second request while one is in flight.
    """

    pass


class ClientError(SubmissionError):
    """Base exception for failures talking to a remote service."""

    pass


class NetworkError(ClientError):
    """Raised when the transport fails before a response is received."""

    pass


class UpstreamError(ClientError):
    """Raised when a remote service returns a non-2xx response."""

    def __init__(self, message: str, status_code: int, body: Any = None, *args, **kwargs):
        self.status_code = status_code
        self.body = body if body is not None else {}
        super().__init__(message, *args, **kwargs)
