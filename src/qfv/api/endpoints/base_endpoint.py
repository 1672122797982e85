"""
Base Endpoint Class for the QFV TPI Client

Common functionality for all endpoint groups: calling a remote method with
standardized logging, validating enumerated arguments, interpreting the
integer success marker, and refusing unsupported operations.
"""

import logging
from typing import Any, Collection, Dict, Optional
from xml.etree.ElementTree import Element

from ..client import TPICaller
from ..response_handler import integer_result
from ...core.error_handler import (
    InvalidArgumentError,
    InvalidResponseError,
    OperationNotImplementedError,
    QFVError
)


SUCCESS_MARKER = 1


class BaseEndpoint:
    """
    Base class for TPI endpoint groups.

    Provides:
    - Caller integration with per-operation logging
    - Validation of enumerated arguments against closed sets
    - Integer and boolean result interpretation
    - The not-implemented contract for unsupported operations
    """

    def __init__(self, caller: TPICaller):
        """
        Initialize endpoint with a caller

        Args:
            caller: Configured TPICaller instance
        """
        self.caller = caller
        self.logger = logging.getLogger(f"{__name__.rsplit('.', 1)[0]}.{self.__class__.__name__}")

    def _call(self, method: str, operation: str, parameters: Optional[Dict[str, Any]] = None) -> Element:
        """
        Call a remote method, logging failures before re-raising them

        Args:
            method: Remote method name
            operation: Client operation name, for logs
            parameters: Method parameters
        """
        try:
            document = self.caller.call(method, parameters or {})
        except QFVError as e:
            self._log_error(e, operation)
            raise
        self.logger.info(f"Successfully completed {operation}")
        return document

    def _log_error(self, error: QFVError, operation: str):
        self.logger.error(
            f"{error.kind.value} during {operation}: {error}",
            extra={'operation': operation, 'endpoint_class': self.__class__.__name__}
        )

    @staticmethod
    def _validate_choice(value: Any, allowed: Collection[Any], name: str) -> Any:
        """
        Check that ``value`` is one of ``allowed``

        Raises:
            InvalidArgumentError: If it is not
        """
        if value not in allowed:
            raise InvalidArgumentError(
                f"Invalid {name}.",
                details={'argument': name, 'value': value, 'allowed': list(allowed)}
            )
        return value

    def _integer_result(self, document: Element, operation: str) -> int:
        """Integer a method returned; InvalidResponseError if there is none"""
        value = integer_result(document)
        if value is None:
            error = InvalidResponseError(
                f"{operation} did not return an integer",
                details={'operation': operation, 'root': document.tag}
            )
            self._log_error(error, operation)
            raise error
        return value

    @staticmethod
    def _is_success(document: Element) -> bool:
        """True when the response body is the literal success marker"""
        return integer_result(document) == SUCCESS_MARKER

    def _not_implemented(self, operation: str):
        """Refuse an unsupported operation without touching the network"""
        self.logger.warning(f"{operation} is not supported by this client")
        raise OperationNotImplementedError(operation)
