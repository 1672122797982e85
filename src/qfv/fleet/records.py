"""Records decoded from TPI responses.

Every record exposes all of its fields; optional source elements that were
absent in the response are ``None``.
"""

from dataclasses import asdict, dataclass, fields
from datetime import datetime
from typing import Any, Dict, List, Optional


class Record:
    """Mixin giving dataclass records a plain-mapping view."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Subscriptions

@dataclass
class Subscription(Record):
    id: int
    cid: int
    created: Optional[datetime]
    data_type: str
    description: str
    filter: Optional[str]
    is_enabled: bool
    subscription_type: str
    username: Optional[str]


# Mailbox

@dataclass
class MailboxInfo(Record):
    cid: str
    count: int
    id: int
    max_packet: int
    min_packet: int
    size: int
    username: str


@dataclass
class MailboxSummary(Record):
    request_interval: int
    packet_count: int
    min_packet: int
    max_packet: int
    processing_time: int


@dataclass
class Message(Record):
    packet_id: int
    pos_id: Optional[int]
    user_message_id: Optional[int]
    created: Optional[datetime]
    msisdn: str
    copy: bool
    message_class: str
    app_id: str
    type: str
    gmh: int
    priority: int
    req_read_receipt: bool
    status_date: Optional[datetime]
    status: str
    transmit_date: Optional[datetime]
    author: str
    data: str


@dataclass
class Street(Record):
    name: str
    nr: str
    postalcode: str


@dataclass
class GeoPosition(Record):
    lat: str
    lon: str
    country: str
    street: Street
    city: str
    nearest_city: str


@dataclass
class Position(Record):
    packet_id: int
    pos_id: str
    msisdn: str
    dt: Optional[datetime]
    ignition: bool
    pos: GeoPosition


@dataclass
class MessageStatusUpdate(Record):
    packet_id: int
    user_msg_id: int
    date: Optional[datetime]
    status: str


@dataclass
class DriverEventField(Record):
    type: int
    value: str


@dataclass
class DriverEvent(Record):
    packet_id: int
    pos_id: Optional[int]
    entry_id: int
    date: Optional[datetime]
    card_id: int
    is_co: bool
    co_card_id: Optional[int]
    msisdn: str
    status: bool
    activity: int
    segment_activity: int
    segment_status: bool
    segment_duration: int
    segment_delta: int
    sub_activity: int
    segment_sub_activity: int
    odometer: int
    msg_seq: int
    fields: Optional[List[DriverEventField]] = None


@dataclass
class DriverHours(Record):
    card_id: int
    is_co: bool
    card_status: str
    msisdn: str
    vehicle: str
    on_duty: str
    last_event: str
    activity: str
    duration: int
    start_trip: str
    extended_driving: str
    week_drive: str
    month_drive: str
    week_duty: str
    week_labour: str
    month_duty: str
    month_effectivity: str
    start_op_week: str
    prev_op_week_rest: str


@dataclass
class DriverTotals(Record):
    packet_id: int
    hours: DriverHours


@dataclass
class TrailerEvent(Record):
    packet_id: int
    pos_id: Optional[int]
    entry_id: int
    trailer_id: int
    msisdn: str
    trailer_type: str
    date: Optional[datetime]
    event: int
    reefer_mode: str
    reefer_alarms: int
    supply_temperature: int
    return_temperature: int
    setpoint_temperature: int


@dataclass
class ETAEvent(Record):
    packet_id: int
    pos_id: Optional[int]
    entry_id: int
    msisdn: str
    date: Optional[datetime]
    job_id: int
    card_id: int
    co_card_id: int
    category: int
    event: int
    status: int
    eta: Optional[datetime]
    distance_to_poi: int
    bearing_to_poi: int
    poi: str


@dataclass
class MailboxData(Record):
    """Everything one ``retrieve`` call returned.

    Section attributes are None when the response did not contain the
    section at all, and a (possibly empty) list when it did.
    """
    user: str
    date_executed: Optional[datetime]
    summary: MailboxSummary
    messages: Optional[List[Message]] = None
    positions: Optional[List[Position]] = None
    message_status_updates: Optional[List[MessageStatusUpdate]] = None
    driver_events: Optional[List[DriverEvent]] = None
    driver_totals: Optional[List[DriverTotals]] = None
    trailer_events: Optional[List[TrailerEvent]] = None
    eta_events: Optional[List[ETAEvent]] = None

    SECTIONS = (
        'messages',
        'positions',
        'message_status_updates',
        'driver_events',
        'driver_totals',
        'trailer_events',
        'eta_events',
    )

    @property
    def sections(self) -> List[str]:
        """Names of the sections present in the response"""
        return [name for name in self.SECTIONS if getattr(self, name) is not None]

    def to_dict(self) -> Dict[str, Any]:
        # absent sections are left out so a key exists iff the section did
        data = asdict(self)
        return {
            item.name: data[item.name]
            for item in fields(self)
            if item.name not in self.SECTIONS or getattr(self, item.name) is not None
        }


# Assets

@dataclass
class Depot(Record):
    id: int
    name: str
    timezone: int


@dataclass
class Vehicle(Record):
    cid: int
    msisdn: str
    enabled: bool
    device_type: int
    network_id: int
    alias: Optional[str]
    depot_id: Optional[int]
    unit_id: Optional[str]


@dataclass
class Driver(Record):
    id: int
    card_id: int
    alias: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    depot_id: Optional[int]


@dataclass
class DriverCard(Record):
    id: int
    unique_id: str
    msisdn: str
    driver_id: int
    depot_id: Optional[int] = None
    card_nr: Optional[str] = None
    card_country: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    card_image: Optional[bytes] = None
    status: Optional[str] = None
    status_date: Optional[datetime] = None
    device_type: Optional[int] = None
    upload_date: Optional[datetime] = None
    export_date: Optional[datetime] = None
    alias: Optional[str] = None
    template_name: Optional[str] = None
    last_activity: Optional[datetime] = None


@dataclass
class Trailer(Record):
    cid: int
    trailer_id: int
    alias: Optional[str]
    depot_id: Optional[int]
    type: Optional[int]
