"""Error types for the QFV client.

Every failure surfaced by the library is a ``QFVError``. The concrete
subclass tells the caller what went wrong, and ``kind`` carries the same
information as an enumeration for callers that prefer to branch on a value.
"""

from enum import Enum
from typing import Any, Dict, Optional

from .status_codes import status_message


class ErrorKind(Enum):
    """Classification of client failures."""
    AUTHENTICATION_MISSING = "authentication_missing"
    INVALID_ARGUMENT = "invalid_argument"
    INVALID_RESPONSE = "invalid_response"
    REMOTE_FAULT = "remote_fault"
    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"
    NOT_IMPLEMENTED = "not_implemented"
    CONFIGURATION = "configuration"


class QFVError(Exception):
    """Base exception class for the QFV client.

    Args:
        message: Human readable description, may be absent
        code: Numeric code reported by the service or transport
        details: Diagnostic context (endpoint, status, body excerpt)
    """

    kind: ErrorKind = ErrorKind.TRANSPORT_ERROR

    def __init__(self, message: Optional[str] = None, code: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message or '')

    def __str__(self) -> str:
        if self.message and self.code is not None:
            return f"{self.message} (code {self.code})"
        if self.message:
            return self.message
        if self.code is not None:
            return f"{self.kind.value} (code {self.code})"
        return self.kind.value

    def to_dict(self) -> Dict[str, Any]:
        """Summarize the error for logging or display."""
        return {
            'error_type': type(self).__name__,
            'kind': self.kind.value,
            'message': self.message,
            'code': self.code,
            'details': dict(self.details),
        }


class AuthenticationMissingError(QFVError):
    """Customer, username or password was not set before a call."""
    kind = ErrorKind.AUTHENTICATION_MISSING


class InvalidArgumentError(QFVError, ValueError):
    """A caller-supplied enumerated parameter is outside its allowed set."""
    kind = ErrorKind.INVALID_ARGUMENT


class InvalidResponseError(QFVError):
    """The response body is not the document the client expected."""
    kind = ErrorKind.INVALID_RESPONSE


class RemoteFaultError(QFVError):
    """The service answered with a Fault document."""
    kind = ErrorKind.REMOTE_FAULT


class HTTPStatusError(QFVError):
    """The service answered with a non-success HTTP status."""
    kind = ErrorKind.HTTP_ERROR

    def __init__(self, status_code: int, message: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        if message is None:
            message = status_message(status_code)
        super().__init__(message, code=status_code, details=details)

    @property
    def status_code(self) -> int:
        return self.code


class TransportError(QFVError):
    """The HTTP request could not be completed."""
    kind = ErrorKind.TRANSPORT_ERROR


class OperationNotImplementedError(QFVError, NotImplementedError):
    """The operation is not supported by this client version."""
    kind = ErrorKind.NOT_IMPLEMENTED

    def __init__(self, operation: str, details: Optional[Dict[str, Any]] = None):
        self.operation = operation
        super().__init__(f"{operation} is not implemented", details=details)


class ConfigurationError(QFVError, ValueError):
    """Error raised when configuration is invalid."""
    kind = ErrorKind.CONFIGURATION
