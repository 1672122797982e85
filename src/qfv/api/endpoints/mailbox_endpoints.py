"""
Mailbox Endpoints for the QFV TPI Client

Polling, retrieving and purging the data collected by subscriptions.
"""

from .base_endpoint import BaseEndpoint
from ...fleet.decoders import decode_mailbox_data, decode_mailbox_info
from ...fleet.records import MailboxData, MailboxInfo


class MailboxEndpoints(BaseEndpoint):
    """
    Mailbox endpoints.

    Provides methods for:
    - Checking whether data is waiting
    - Retrieving all data registered since the previous retrieval
    - Purging a range of packets
    """

    def get_mailbox_info(self) -> MailboxInfo:
        """
        Describe what is waiting in the mailbox

        Returns:
            Packet count, packet id bounds and total size
        """
        document = self._call('GetMailboxInfo', 'get_mailbox_info')
        return decode_mailbox_info(document)

    def retrieve(self, mark_as_read: bool = True, max_count: int = 0) -> MailboxData:
        """
        Fetch all subscribed data registered since the previous call

        With ``mark_as_read`` the returned packets are marked for removal and
        can disappear at any moment; a second call will not return them.

        Args:
            mark_as_read: Mark returned data as read
            max_count: When greater than zero, return only this many of the
                newest packets and discard the rest; zero returns everything

        Returns:
            Summary block plus one list per section present in the response
        """
        parameters = {
            'markasread': bool(mark_as_read),
            'maxcount': int(max_count),
        }

        document = self._call('retrieve', 'retrieve', parameters)
        data = decode_mailbox_data(document)
        self.logger.info(
            f"Retrieved {data.summary.packet_count} packets "
            f"(sections: {', '.join(data.sections) or 'none'})"
        )
        return data

    def purge(self, min_packet_id: int, max_packet_id: int) -> bool:
        """
        Mark a range of packets as ready for removal

        Args:
            min_packet_id: First packet of the range
            max_packet_id: Last packet of the range

        Returns:
            True if the service confirmed the purge
        """
        parameters = {
            'minpacketid': int(min_packet_id),
            'maxpacketid': int(max_packet_id),
        }

        document = self._call('purge', 'purge', parameters)
        return self._is_success(document)
