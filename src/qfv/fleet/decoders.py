"""Decoders from TPI response documents to records."""

from typing import Callable, List, Optional, TypeVar
from xml.etree.ElementTree import Element

from . import xml_fields as xf
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
    Street,
    Subscription,
    Trailer,
    TrailerEvent,
    Vehicle,
)

T = TypeVar('T')

# ignition is reported as 1/0 by some devices
IGNITION_ON_VALUES = ('true', '1')


def decode_list(document: Element, tag: str, decoder: Callable[[Element], T]) -> List[T]:
    """Decode every direct child named ``tag``."""
    return [decoder(row) for row in document.findall(tag)]


def decode_section(document: Element, section: str, tag: str,
                   decoder: Callable[[Element], T]) -> Optional[List[T]]:
    """Decode a mailbox section, or None when the section is absent."""
    container = document.find(section)
    if container is None:
        return None
    return decode_list(container, tag, decoder)


# Subscriptions

def decode_subscription(row: Element) -> Subscription:
    return Subscription(
        id=xf.integer(row, 'Id'),
        cid=xf.integer(row, 'CID'),
        created=xf.timestamp(row, 'Created'),
        data_type=xf.text(row, 'DataType'),
        description=xf.text(row, 'Description'),
        filter=xf.optional_text(row, 'Filter'),
        is_enabled=xf.boolean(row, 'IsEnabled'),
        subscription_type=xf.text(row, 'SubscriptionType'),
        username=xf.optional_text(row, 'UserName'),
    )


def decode_subscriptions(document: Element) -> List[Subscription]:
    return decode_list(document, 'Subscription', decode_subscription)


# Mailbox

def decode_mailbox_info(document: Element) -> MailboxInfo:
    return MailboxInfo(
        cid=xf.text(document, 'CID'),
        count=xf.integer(document, 'Count'),
        id=xf.integer(document, 'Id'),
        max_packet=xf.integer(document, 'MaxPacket'),
        min_packet=xf.integer(document, 'MinPacket'),
        size=xf.integer(document, 'Size'),
        username=xf.text(document, 'UserName'),
    )


def decode_summary(summary: Optional[Element]) -> MailboxSummary:
    return MailboxSummary(
        request_interval=xf.integer(summary, 'RequestInterval'),
        packet_count=xf.integer(summary, 'PacketCount'),
        min_packet=xf.integer(summary, 'MinPacket'),
        max_packet=xf.integer(summary, 'MaxPacket'),
        processing_time=xf.integer(summary, 'ProcessingTime'),
    )


def decode_message(row: Element) -> Message:
    return Message(
        packet_id=xf.int_attribute(row, 'PacketId'),
        pos_id=xf.optional_int_attribute(row, 'PosId'),
        user_message_id=xf.optional_integer(row, 'UserMsgID'),
        created=xf.timestamp(row, 'CreationDT'),
        msisdn=xf.text(row, 'MSISDN'),
        copy=xf.boolean(row, 'Copy'),
        message_class=xf.text(row, 'Class'),
        app_id=xf.text(row, 'AppId'),
        type=xf.text(row, 'Type'),
        gmh=xf.integer(row, 'GMH'),
        priority=xf.integer(row, 'Priority'),
        req_read_receipt=xf.boolean(row, 'ReqRR'),
        status_date=xf.timestamp(row, 'StatusDT'),
        status=xf.text(row, 'Status'),
        transmit_date=xf.timestamp(row, 'TxDT'),
        author=xf.text(row, 'Author'),
        data=xf.text(row, 'Data'),
    )


def decode_position(row: Element) -> Position:
    pos = xf.child(row, 'POS')
    street = xf.child(pos, 'Street')
    return Position(
        packet_id=xf.int_attribute(row, 'PacketId'),
        pos_id=xf.text(row, 'PosId'),
        msisdn=xf.text(row, 'MSISDN'),
        dt=xf.timestamp(row, 'DT'),
        ignition=xf.text(row, 'Ignition').lower() in IGNITION_ON_VALUES,
        pos=GeoPosition(
            lat=xf.attribute(pos, 'lat'),
            lon=xf.attribute(pos, 'lon'),
            country=xf.text(pos, 'Country'),
            street=Street(
                name=xf.text(street),
                nr=xf.attribute(street, 'nr'),
                postalcode=xf.attribute(street, 'postalcode'),
            ),
            city=xf.text(pos, 'City'),
            nearest_city=xf.text(pos, 'NearestCity'),
        ),
    )


def decode_message_status_update(row: Element) -> MessageStatusUpdate:
    return MessageStatusUpdate(
        packet_id=xf.int_attribute(row, 'PacketId'),
        user_msg_id=xf.integer(row, 'UserMsgID'),
        date=xf.timestamp(row, 'DT'),
        status=xf.text(row, 'Status'),
    )


def decode_driver_event_fields(row: Element) -> Optional[List[DriverEventField]]:
    container = row.find('Fields')
    if container is None:
        return None
    return [
        DriverEventField(
            type=xf.int_attribute(item, 'type'),
            value=xf.attribute(item, 'value'),
        )
        for item in container.findall('Field')
    ]


def decode_driver_event(row: Element) -> DriverEvent:
    return DriverEvent(
        packet_id=xf.int_attribute(row, 'PacketId'),
        pos_id=xf.optional_int_attribute(row, 'PosId'),
        entry_id=xf.integer(row, 'EntryId'),
        date=xf.timestamp(row, 'DT'),
        card_id=xf.integer(row, 'CardId'),
        is_co=xf.boolean(row, 'IsCo'),
        co_card_id=xf.optional_integer(row, 'CoCardId'),
        msisdn=xf.text(row, 'MSISDN'),
        status=xf.boolean(row, 'Status'),
        activity=xf.integer(row, 'Activity'),
        segment_activity=xf.integer(row, 'SegmentActivity'),
        segment_status=xf.boolean(row, 'SegmentStatus'),
        segment_duration=xf.integer(row, 'SegmentDuration'),
        segment_delta=xf.integer(row, 'SegmentDelta'),
        sub_activity=xf.integer(row, 'SubActivity'),
        segment_sub_activity=xf.integer(row, 'SegmentSubActivity'),
        odometer=xf.integer(row, 'OdoMeter'),
        msg_seq=xf.integer(row, 'MsgSeq'),
        fields=decode_driver_event_fields(row),
    )


def decode_driver_totals(row: Element) -> DriverTotals:
    hours = xf.child(row, 'Hours')
    return DriverTotals(
        packet_id=xf.int_attribute(row, 'PacketId'),
        hours=DriverHours(
            card_id=xf.integer(hours, 'CardId'),
            is_co=xf.boolean(hours, 'IsCo'),
            card_status=xf.text(hours, 'CardStatus'),
            msisdn=xf.text(hours, 'MSISDN'),
            vehicle=xf.text(hours, 'Vehicle'),
            on_duty=xf.text(hours, 'OnDuty'),
            last_event=xf.text(hours, 'LastEvent'),
            activity=xf.text(hours, 'Activity'),
            duration=xf.integer(hours, 'Duration'),
            start_trip=xf.text(hours, 'StartTrip'),
            extended_driving=xf.text(hours, 'ExtendedDriving'),
            week_drive=xf.text(hours, 'WeekDrive'),
            month_drive=xf.text(hours, 'MonthDrive'),
            week_duty=xf.text(hours, 'WeekDuty'),
            week_labour=xf.text(hours, 'WeekLabour'),
            month_duty=xf.text(hours, 'MonthDuty'),
            month_effectivity=xf.text(hours, 'MonthEffectivity'),
            start_op_week=xf.text(hours, 'StartOpWeek'),
            prev_op_week_rest=xf.text(hours, 'PrevOpWeekRest'),
        ),
    )


def decode_trailer_event(row: Element) -> TrailerEvent:
    return TrailerEvent(
        packet_id=xf.int_attribute(row, 'PacketId'),
        pos_id=xf.optional_int_attribute(row, 'PosId'),
        entry_id=xf.integer(row, 'EntryId'),
        trailer_id=xf.integer(row, 'TrailerId'),
        msisdn=xf.text(row, 'MSISDN'),
        trailer_type=xf.text(row, 'TrailerType'),
        date=xf.timestamp(row, 'DT'),
        event=xf.integer(row, 'Event'),
        reefer_mode=xf.text(row, 'ReeferMode'),
        reefer_alarms=xf.integer(row, 'ReeferAlarms'),
        supply_temperature=xf.integer(row, 'SupplyTemperature'),
        return_temperature=xf.integer(row, 'ReturnTemperature'),
        setpoint_temperature=xf.integer(row, 'SetpointTemperature'),
    )


def decode_eta_event(row: Element) -> ETAEvent:
    return ETAEvent(
        packet_id=xf.int_attribute(row, 'PacketId'),
        pos_id=xf.optional_int_attribute(row, 'PosId'),
        entry_id=xf.integer(row, 'EntryId'),
        msisdn=xf.text(row, 'MSISDN'),
        date=xf.timestamp(row, 'DT'),
        job_id=xf.integer(row, 'JobId'),
        card_id=xf.integer(row, 'CardId'),
        co_card_id=xf.integer(row, 'CoCardId'),
        category=xf.integer(row, 'Category'),
        event=xf.integer(row, 'Event'),
        status=xf.integer(row, 'Status'),
        eta=xf.timestamp(row, 'ETA'),
        distance_to_poi=xf.integer(row, 'DistanceToPOI'),
        bearing_to_poi=xf.integer(row, 'BearingToPOI'),
        poi=xf.text(row, 'POI'),
    )


def decode_mailbox_data(document: Element) -> MailboxData:
    return MailboxData(
        user=xf.attribute(document, 'user'),
        date_executed=xf.to_datetime(document.get('datetime')),
        summary=decode_summary(document.find('Summary')),
        messages=decode_section(document, 'Messages', 'Msg', decode_message),
        positions=decode_section(document, 'Positions', 'Pos', decode_position),
        message_status_updates=decode_section(
            document, 'MessageStatusUpdates', 'MsgStatus', decode_message_status_update
        ),
        driver_events=decode_section(document, 'DriverEvents', 'Event', decode_driver_event),
        driver_totals=decode_section(document, 'DriverTotals', 'DriverTotals', decode_driver_totals),
        trailer_events=decode_section(document, 'TrailerEvents', 'TrailerEvent', decode_trailer_event),
        eta_events=decode_section(document, 'ETAEvents', 'ETA', decode_eta_event),
    )


# Assets

def decode_depot(row: Element) -> Depot:
    return Depot(
        id=xf.integer(row, 'Id'),
        name=xf.text(row, 'Name'),
        timezone=xf.integer(row, 'TimeZone'),
    )


def decode_vehicle(row: Element) -> Vehicle:
    return Vehicle(
        cid=xf.integer(row, 'CID'),
        msisdn=xf.text(row, 'MSISDN'),
        enabled=xf.boolean(row, 'Enabled'),
        device_type=xf.integer(row, 'DeviceType'),
        network_id=xf.integer(row, 'NetworkId'),
        alias=xf.optional_text(row, 'Alias'),
        depot_id=xf.optional_integer(row, 'DepotId'),
        unit_id=xf.optional_text(row, 'UnitId'),
    )


def decode_driver(row: Element) -> Driver:
    return Driver(
        id=xf.integer(row, 'Id'),
        card_id=xf.integer(row, 'CardId'),
        alias=xf.optional_text(row, 'Alias'),
        first_name=xf.optional_text(row, 'FirstName'),
        last_name=xf.optional_text(row, 'LastName'),
        depot_id=xf.optional_integer(row, 'DepotId'),
    )


def decode_driver_card(row: Element) -> DriverCard:
    return DriverCard(
        id=xf.integer(row, 'Id'),
        unique_id=xf.text(row, 'UniqueID'),
        msisdn=xf.text(row, 'MSISDN'),
        driver_id=xf.integer(row, 'DriverId'),
        depot_id=xf.optional_integer(row, 'DepotId'),
        card_nr=xf.optional_text(row, 'CardNr'),
        card_country=xf.optional_text(row, 'CardCountry'),
        first_name=xf.optional_text(row, 'FirstName'),
        last_name=xf.optional_text(row, 'LastName'),
        card_image=xf.optional_bytes(row, 'CardImage'),
        status=xf.optional_text(row, 'Status'),
        status_date=xf.optional_timestamp(row, 'StatusDate'),
        device_type=xf.optional_integer(row, 'DeviceType'),
        upload_date=xf.optional_timestamp(row, 'UploadDate'),
        export_date=xf.optional_timestamp(row, 'ExportDate'),
        alias=xf.optional_text(row, 'Alias'),
        template_name=xf.optional_text(row, 'TemplateName'),
        last_activity=xf.optional_timestamp(row, 'LastActivity'),
    )


def decode_trailer(row: Element) -> Trailer:
    return Trailer(
        cid=xf.integer(row, 'CID'),
        trailer_id=xf.integer(row, 'TrailerId'),
        alias=xf.optional_text(row, 'Alias'),
        depot_id=xf.optional_integer(row, 'DepotId'),
        type=xf.optional_integer(row, 'Type'),
    )
