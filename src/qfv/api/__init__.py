"""
QFV TPI API Package

HTTP caller, request building, response classification and the endpoint
groups of the FleetVisor Third Party Interface.
"""

from .client import TPICaller
from .authentication import AuthenticationManager, Credentials
from .request_builder import RequestBuilder
from .response_handler import ResponseHandler, ResponseParser, decode_fault, integer_result
from .endpoints.base_endpoint import BaseEndpoint
from .endpoints.subscription_endpoints import SubscriptionEndpoints
from .endpoints.mailbox_endpoints import MailboxEndpoints
from .endpoints.asset_endpoints import AssetEndpoints
from .endpoints.messaging_endpoints import MessagingEndpoints

__all__ = [
    'TPICaller',
    'AuthenticationManager',
    'Credentials',
    'RequestBuilder',
    'ResponseHandler',
    'ResponseParser',
    'decode_fault',
    'integer_result',
    'BaseEndpoint',
    'SubscriptionEndpoints',
    'MailboxEndpoints',
    'AssetEndpoints',
    'MessagingEndpoints'
]
