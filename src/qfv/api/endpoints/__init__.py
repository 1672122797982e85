"""
API Endpoints Package for the QFV TPI Client

Contains endpoint classes for the groups of TPI remote methods.
"""

from .base_endpoint import BaseEndpoint
from .subscription_endpoints import SubscriptionEndpoints
from .mailbox_endpoints import MailboxEndpoints
from .asset_endpoints import AssetEndpoints
from .messaging_endpoints import MessagingEndpoints

__all__ = [
    'BaseEndpoint',
    'SubscriptionEndpoints',
    'MailboxEndpoints',
    'AssetEndpoints',
    'MessagingEndpoints'
]
