"""QFV - FleetVisor Third Party Interface client

Subscriptions, mailbox retrieval and asset lookups against the FleetVisor
(Qualcomm QFV) TPI REST service.
"""

__version__ = "1.0.0"
__author__ = "QFV Client Team"
__description__ = "FleetVisor Third Party Interface client"

from .client import QFVClient
from .core.config_manager import AppConfig, ConfigManager
from .core.error_handler import (
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

__all__ = [
    "QFVClient",
    "AppConfig",
    "ConfigManager",
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
    "__version__"
]
