"""
Fleet data records and the decoders that build them from TPI responses.
"""

from .records import (
    Depot,
    Driver,
    DriverCard,
    DriverEvent,
    DriverEventField,
    DriverHours,
    DriverTotals,
    ETAEvent,
    GeoPosition,
    MailboxData,
    MailboxInfo,
    MailboxSummary,
    Message,
    MessageStatusUpdate,
    Position,
    Record,
    Street,
    Subscription,
    Trailer,
    TrailerEvent,
    Vehicle,
)

__all__ = [
    'Depot',
    'Driver',
    'DriverCard',
    'DriverEvent',
    'DriverEventField',
    'DriverHours',
    'DriverTotals',
    'ETAEvent',
    'GeoPosition',
    'MailboxData',
    'MailboxInfo',
    'MailboxSummary',
    'Message',
    'MessageStatusUpdate',
    'Position',
    'Record',
    'Street',
    'Subscription',
    'Trailer',
    'TrailerEvent',
    'Vehicle',
]
