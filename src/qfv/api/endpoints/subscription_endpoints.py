"""
Subscription Endpoints for the QFV TPI Client

Creating, listing and stopping data subscriptions. A subscription makes the
service collect one data type into the user's mailbox.
"""

from typing import List

from .base_endpoint import BaseEndpoint
from ...fleet.decoders import decode_subscriptions
from ...fleet.records import Subscription


DATA_TYPES = (
    'Positions',
    'Messages',
    'MessageStatusUpdates',
    'DriverEvents',
    'DriverTotals',
    'TrailerEvents',
    'ETAEvents',
)
SUBSCRIPTION_TYPES = ('Regular', 'SingleRequest')


class SubscriptionEndpoints(BaseEndpoint):
    """
    Subscription management endpoints.

    Only one subscription per data type is allowed for a user; the service
    ignores attempts to create more. Single-request subscriptions are useful
    while developing, when no continuous data inflow is needed.
    """

    def add_subscription(self, data_type: str, description: str, subscription_type: str = 'Regular') -> int:
        """
        Create a new data subscription

        Args:
            data_type: One of DATA_TYPES
            description: User-friendly description of the subscription
            subscription_type: 'Regular' or 'SingleRequest'

        Returns:
            Identifier of the new subscription

        Raises:
            InvalidArgumentError: If data_type or subscription_type is unknown
        """
        data_type = str(data_type)
        subscription_type = str(subscription_type)
        self._validate_choice(data_type, DATA_TYPES, 'dataType')
        self._validate_choice(subscription_type, SUBSCRIPTION_TYPES, 'subscriptionType')

        parameters = {
            'subscriptiontype': subscription_type,
            'datatype': data_type,
            'description': str(description),
        }

        document = self._call('addSubscription', 'add_subscription', parameters)
        return self._integer_result(document, 'add_subscription')

    def get_subscriptions(self) -> List[Subscription]:
        """
        List the subscriptions the user has created

        Returns:
            Subscription records
        """
        document = self._call('GetSubscriptions', 'get_subscriptions')
        return decode_subscriptions(document)

    def stop_subscription(self, subscription_id: int) -> bool:
        """
        Delete a subscription

        Args:
            subscription_id: Identifier of the subscription to delete

        Returns:
            True if the service confirmed the deletion
        """
        document = self._call('deleteSubscription', 'stop_subscription', {'Id': int(subscription_id)})
        return self._is_success(document)
