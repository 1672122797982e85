"""Core modules for the QFV client.

Configuration, logging and the error taxonomy shared by every layer.
"""

from .config_manager import APIConfig, AppConfig, ConfigManager, CredentialsConfig, LoggingConfig
from .error_handler import (
    QFVError,
    ErrorKind,
    AuthenticationMissingError,
    InvalidArgumentError,
    InvalidResponseError,
    RemoteFaultError,
    HTTPStatusError,
    TransportError,
    OperationNotImplementedError,
    ConfigurationError
)
from .logging_manager import LoggingManager
from .status_codes import HTTP_STATUS_MESSAGES, status_message

__all__ = [
    "APIConfig",
    "AppConfig",
    "ConfigManager",
    "CredentialsConfig",
    "LoggingConfig",
    "QFVError",
    "ErrorKind",
    "AuthenticationMissingError",
    "InvalidArgumentError",
    "InvalidResponseError",
    "RemoteFaultError",
    "HTTPStatusError",
    "TransportError",
    "OperationNotImplementedError",
    "ConfigurationError",
    "LoggingManager",
    "HTTP_STATUS_MESSAGES",
    "status_message"
]
