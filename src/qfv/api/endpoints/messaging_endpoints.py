"""
Messaging Endpoints for the QFV TPI Client

Outbound messaging (text messages, form messages, position polls) and form
definitions. None of these are supported by this client version: each
operation raises OperationNotImplementedError without calling the service.
"""

from datetime import datetime
from typing import Any, List, Sequence, Union

from .base_endpoint import BaseEndpoint


class MessagingEndpoints(BaseEndpoint):
    """Outbound messaging endpoints (unsupported)."""

    def send_text_message(
        self,
        recipients: Sequence[str],
        send_after: Union[datetime, int],
        require_read_receipt: bool,
        text: str
    ) -> int:
        self._not_implemented('send_text_message')

    def send_form_message(
        self,
        recipients: Sequence[str],
        send_after: Union[datetime, int],
        require_read_receipt: bool,
        form_number: int,
        form_version: int,
        values: Sequence[Any],
        separator: str = '|'
    ) -> int:
        self._not_implemented('send_form_message')

    def send_position_poll(self, recipients: Sequence[str], send_after: Union[datetime, int]) -> int:
        self._not_implemented('send_position_poll')

    def get_form_definitions(self) -> List[Any]:
        self._not_implemented('get_form_definitions')
