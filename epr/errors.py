"""
Exceptions raised by the EPR client library.

Library code raises these and never handles them; the command surface
(``epr.cli``) reports them and exits non-zero.
"""
from typing import Any, Iterable, Optional


class EprError(Exception):
    """Base exception for EPR client errors."""
    pass


class UnknownFieldError(EprError):
    """Raised when a requested field is not a declared Event attribute."""

    def __init__(self, fields: Iterable[str], message: Optional[str] = None):
        self.fields = sorted(set(fields))
        if message is None:
            message = f"unknown field(s): {', '.join(self.fields)}"
        super().__init__(message)


class ConfigError(EprError):
    """Raised when EPR_* settings hold invalid values."""
    pass


class ProjectionError(EprError):
    """Raised when a JSONPath expression cannot be parsed."""
    pass


class TransportError(EprError):
    """Raised when the registry could not be reached."""
    pass


class ServiceError(EprError):
    """
    Raised when the registry answered with a failure.

    Attributes:
        status_code: HTTP status of the response
        payload: Error payload returned by the service (body text or
            the GraphQL ``errors`` list)
    """

    def __init__(self, message: str, status_code: int, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class DecodeError(EprError):
    """Raised when a response body cannot be parsed into Event records."""
    pass


class EncodeError(EprError):
    """Raised when results cannot be serialized to JSON."""
    pass
