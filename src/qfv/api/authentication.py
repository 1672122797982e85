"""
Authentication Management for the QFV TPI Client

The TPI service authenticates every request through three query parameters:
customer, username and password. This module holds them for the lifetime of
a client and merges them into each request.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.error_handler import AuthenticationMissingError


def _as_text(value: Any) -> str:
    """Credential text; None clears the value"""
    return '' if value is None else str(value)


@dataclass
class Credentials:
    """Customer, username and password for the TPI service"""
    customer: str = ''
    username: str = ''
    password: str = ''

    def is_complete(self) -> bool:
        return bool(self.customer and self.username and self.password)

    def as_parameters(self) -> Dict[str, str]:
        return {
            'customer': self.customer,
            'username': self.username,
            'password': self.password
        }

    def __repr__(self) -> str:
        return (
            f"Credentials(customer={self.customer!r}, username={self.username!r}, "
            f"password={'***' if self.password else ''!r})"
        )


class AuthenticationManager:
    """Stores credentials and applies them to request parameters"""

    CREDENTIAL_KEYS = ('customer', 'username', 'password')

    def __init__(
        self,
        customer: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None
    ):
        self.credentials = Credentials()
        self.logger = logging.getLogger(__name__)

        if customer is not None:
            self.set_customer(customer)
        if username is not None:
            self.set_username(username)
        if password is not None:
            self.set_password(password)

    def configure(self, auth_config: Dict[str, Any]):
        """Configure credentials from a mapping with customer/username/password keys"""
        for key in self.CREDENTIAL_KEYS:
            value = auth_config.get(key)
            if value is None:
                continue
            if hasattr(value, 'get_secret_value'):
                value = value.get_secret_value()
            setattr(self.credentials, key, str(value))

    def set_customer(self, customer: Optional[str]):
        self.credentials.customer = _as_text(customer)

    def set_username(self, username: Optional[str]):
        self.credentials.username = _as_text(username)

    def set_password(self, password: Optional[str]):
        self.credentials.password = _as_text(password)

    def require_credentials(self) -> Credentials:
        """
        Return the stored credentials

        Raises:
            AuthenticationMissingError: If customer, username or password is empty
        """
        if not self.credentials.is_complete():
            missing = [key for key in self.CREDENTIAL_KEYS if not getattr(self.credentials, key)]
            self.logger.error(f"Cannot call the TPI service, missing credentials: {missing}")
            raise AuthenticationMissingError(
                'No customer, username or password was set.',
                details={'missing': missing}
            )
        return self.credentials

    def apply_authentication(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge credentials into request parameters

        Credentials always override caller-supplied values with the same keys.
        """
        credentials = self.require_credentials()
        merged = dict(parameters)
        merged.update(credentials.as_parameters())
        return merged

    @classmethod
    def redact(cls, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """Copy of parameters with the password masked, for logging"""
        return {
            key: ('***' if key == 'password' else value)
            for key, value in parameters.items()
        }
