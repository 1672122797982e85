"""
QFV Client

Single entry point for the FleetVisor Third Party Interface. Holds
credentials and configuration for its lifetime and exposes one method per
remote operation.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional, Sequence, Union

import requests

from .api.authentication import AuthenticationManager
from .api.client import TPICaller
from .api.endpoints import AssetEndpoints, MailboxEndpoints, MessagingEndpoints, SubscriptionEndpoints
from .api.endpoints.asset_endpoints import Timestamp
from .core.config_manager import AppConfig, ConfigManager
from .core.logging_manager import LoggingManager
from .fleet.records import (
    Depot,
    Driver,
    DriverCard,
    MailboxData,
    MailboxInfo,
    Subscription,
    Trailer,
    Vehicle,
)


class QFVClient:
    """
    Client for the FleetVisor Third Party Interface.

    Example:
        with QFVClient('customer', 'user', 'secret') as client:
            client.add_subscription('Positions', 'tracking', 'SingleRequest')
            data = client.retrieve()
    """

    def __init__(
        self,
        customer: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        config: Optional[AppConfig] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client

        Args:
            customer: Customer name for authentication
            username: Username for authentication
            password: Password for authentication
            config: Client configuration; defaults target the public service
            session: requests session to use as transport
        """
        self.config = config.model_copy(deep=True) if config else AppConfig()
        self.logger = logging.getLogger(__name__)

        self.auth_manager = AuthenticationManager()
        self.auth_manager.configure(self.config.credentials.model_dump())
        if customer is not None:
            self.auth_manager.set_customer(customer)
        if username is not None:
            self.auth_manager.set_username(username)
        if password is not None:
            self.auth_manager.set_password(password)

        self.caller = TPICaller(self.config.api, self.auth_manager, session=session)

        self.subscriptions = SubscriptionEndpoints(self.caller)
        self.mailbox = MailboxEndpoints(self.caller)
        self.assets = AssetEndpoints(self.caller)
        self.messaging = MessagingEndpoints(self.caller)

    @classmethod
    def from_config(cls, config: AppConfig, session: Optional[requests.Session] = None) -> 'QFVClient':
        """Build a client from a loaded configuration and apply its logging section"""
        LoggingManager().configure(config.logging)
        return cls(config=config, session=session)

    @classmethod
    def from_config_manager(cls, manager: ConfigManager, session: Optional[requests.Session] = None) -> 'QFVClient':
        return cls.from_config(manager.load_config(), session=session)

    # Configuration

    def set_customer(self, customer: Optional[str]):
        self.auth_manager.set_customer(customer)

    def set_username(self, username: Optional[str]):
        self.auth_manager.set_username(username)

    def set_password(self, password: Optional[str]):
        self.auth_manager.set_password(password)

    def get_timeout(self) -> int:
        return self.config.api.timeout

    def set_timeout(self, seconds: int):
        """Request timeout in seconds"""
        self.config.api.timeout = int(seconds)

    def get_user_agent(self) -> str:
        return self.caller.user_agent

    def set_user_agent(self, user_agent: str):
        """Suffix appended to the library's own user agent"""
        self.config.api.user_agent = str(user_agent)

    # Subscriptions

    def add_subscription(self, data_type: str, description: str, subscription_type: str = 'Regular') -> int:
        return self.subscriptions.add_subscription(data_type, description, subscription_type)

    def get_subscriptions(self) -> List[Subscription]:
        return self.subscriptions.get_subscriptions()

    def stop_subscription(self, subscription_id: int) -> bool:
        return self.subscriptions.stop_subscription(subscription_id)

    # Mailbox

    def get_mailbox_info(self) -> MailboxInfo:
        return self.mailbox.get_mailbox_info()

    def retrieve(self, mark_as_read: bool = True, max_count: int = 0) -> MailboxData:
        return self.mailbox.retrieve(mark_as_read, max_count)

    def purge(self, min_packet_id: int, max_packet_id: int) -> bool:
        return self.mailbox.purge(min_packet_id, max_packet_id)

    # Messaging

    def send_text_message(self, recipients: Sequence[str], send_after: Union[datetime, int],
                          require_read_receipt: bool, text: str) -> int:
        return self.messaging.send_text_message(recipients, send_after, require_read_receipt, text)

    def send_form_message(self, recipients: Sequence[str], send_after: Union[datetime, int],
                          require_read_receipt: bool, form_number: int, form_version: int,
                          values: Sequence[Any], separator: str = '|') -> int:
        return self.messaging.send_form_message(
            recipients, send_after, require_read_receipt, form_number, form_version, values, separator
        )

    def send_position_poll(self, recipients: Sequence[str], send_after: Union[datetime, int]) -> int:
        return self.messaging.send_position_poll(recipients, send_after)

    def get_form_definitions(self) -> List[Any]:
        return self.messaging.get_form_definitions()

    # Assets

    def get_depots(self) -> List[Depot]:
        return self.assets.get_depots()

    def get_vehicles(self) -> List[Vehicle]:
        return self.assets.get_vehicles()

    def get_drivers(self) -> List[Driver]:
        return self.assets.get_drivers()

    def get_trailers(self) -> List[Trailer]:
        return self.assets.get_trailers()

    def get_drivercards(self, from_: Timestamp, until: Timestamp, status: str = 'All') -> List[DriverCard]:
        return self.assets.get_drivercards(from_, until, status)

    def add_vehicle(self, msisdn: str, device_type: int, network_id: int, depot: int,
                    alias: Optional[str] = None, unit_id: Optional[str] = None) -> bool:
        return self.assets.add_vehicle(msisdn, device_type, network_id, depot, alias, unit_id)

    def add_driver(self, card_id: str, depot: int, alias: Optional[str] = None,
                   first_name: Optional[str] = None, last_name: Optional[str] = None) -> bool:
        return self.assets.add_driver(card_id, depot, alias, first_name, last_name)

    def add_trailer(self, trailer_id: str, depot: int, trailer_type: int,
                    alias: Optional[str] = None, unit_id: Optional[str] = None) -> bool:
        return self.assets.add_trailer(trailer_id, depot, trailer_type, alias, unit_id)

    def modify_vehicle(self, msisdn: str, depot: int, alias: str, unit_id: str) -> bool:
        return self.assets.modify_vehicle(msisdn, depot, alias, unit_id)

    def modify_driver(self, card_id: str, depot: int, alias: str, first_name: str, last_name: str) -> bool:
        return self.assets.modify_driver(card_id, depot, alias, first_name, last_name)

    def modify_trailer(self, trailer_id: str, depot: int, alias: str, unit_id: str, trailer_type: int) -> bool:
        return self.assets.modify_trailer(trailer_id, depot, alias, unit_id, trailer_type)

    def delete_vehicle(self, msisdn: str) -> bool:
        return self.assets.delete_vehicle(msisdn)

    def delete_driver(self, card_id: str) -> bool:
        return self.assets.delete_driver(card_id)

    def delete_trailer(self, trailer_id: str) -> bool:
        return self.assets.delete_trailer(trailer_id)

    # Lifecycle

    def close(self):
        """Close the HTTP session"""
        self.caller.close()

    def __enter__(self) -> 'QFVClient':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
