"""
Asset Endpoints for the QFV TPI Client

Directory lookups for depots, vehicles, drivers, trailers and driver cards,
and creation of vehicles, drivers and trailers. Modifying and deleting
assets is not supported by this client.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional, Union

from .base_endpoint import BaseEndpoint
from ...core.error_handler import InvalidArgumentError
from ...fleet.decoders import (
    decode_depot,
    decode_driver,
    decode_driver_card,
    decode_list,
    decode_trailer,
    decode_vehicle,
)
from ...fleet.records import Depot, Driver, DriverCard, Trailer, Vehicle


# 0: MCT/Eutelsat, 1: OXE GSM, 2: O1 TIS GSM, 3: OBU Iveco GSM, 4: OV2 GSM/Eutelsat
DEVICE_TYPES = (0, 1, 2, 3, 4)
# 0: Eutelsat, 1: GSM
NETWORK_IDS = (0, 1)
# 0: unknown, 1: trailer, 2: generic, 3: carrier, 4: thermoking
TRAILER_TYPES = (0, 1, 2, 3, 4)
DRIVERCARD_STATUSES = ('New', 'Exported', 'All')

# depot value meaning "no depot assigned"
NO_DEPOT = -1

Timestamp = Union[datetime, int, float]


def _as_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Invalid {name}.", details={'argument': name, 'value': value})


def format_timestamp(value: Timestamp) -> str:
    """ISO-8601 text with offset; naive datetimes are taken as local time"""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.astimezone()
        return value.isoformat(timespec='seconds')
    return datetime.fromtimestamp(value, tz=timezone.utc).isoformat(timespec='seconds')


class AssetEndpoints(BaseEndpoint):
    """
    Asset management endpoints.

    Depot identifiers returned by get_depots are needed when assigning a new
    asset to a depot; pass NO_DEPOT to leave it unassigned.
    """

    def get_depots(self) -> List[Depot]:
        """List the customer's depots"""
        document = self._call('GetDepots', 'get_depots')
        return decode_list(document, 'Depot', decode_depot)

    def get_vehicles(self) -> List[Vehicle]:
        """List all vehicles"""
        document = self._call('GetVehicles', 'get_vehicles')
        return decode_list(document, 'Vehicle', decode_vehicle)

    def get_drivers(self) -> List[Driver]:
        """List all drivers"""
        document = self._call('GetDrivers', 'get_drivers')
        return decode_list(document, 'Driver', decode_driver)

    def get_trailers(self) -> List[Trailer]:
        """List all trailers"""
        document = self._call('GetTrailers', 'get_trailers')
        return decode_list(document, 'Trailer', decode_trailer)

    def get_drivercards(self, from_: Timestamp, until: Timestamp, status: str = 'All') -> List[DriverCard]:
        """
        Download driver card images for a period

        Args:
            from_: Period start, datetime or UNIX timestamp
            until: Period end, datetime or UNIX timestamp
            status: 'New', 'Exported' or 'All'

        Returns:
            Driver card records, card images base64-decoded
        """
        status = str(status)
        self._validate_choice(status, DRIVERCARD_STATUSES, 'status')

        parameters = {
            'from': format_timestamp(from_),
            'until': format_timestamp(until),
            'status': status,
        }

        document = self._call('GetDrivercards', 'get_drivercards', parameters)
        return decode_list(document, 'DriverCard', decode_driver_card)

    def add_vehicle(
        self,
        msisdn: str,
        device_type: int,
        network_id: int,
        depot: int,
        alias: Optional[str] = None,
        unit_id: Optional[str] = None
    ) -> bool:
        """
        Add a vehicle

        Args:
            msisdn: Vehicle identifier
            device_type: One of DEVICE_TYPES
            network_id: One of NETWORK_IDS
            depot: Depot identifier, NO_DEPOT for none
            alias: Vehicle alias
            unit_id: Unit identifier

        Returns:
            True if the service confirmed the creation
        """
        device_type = self._validate_choice(_as_int(device_type, 'device type'), DEVICE_TYPES, 'device type')
        network_id = self._validate_choice(_as_int(network_id, 'networkid'), NETWORK_IDS, 'networkid')

        parameters = {
            'msisdn': str(msisdn),
            'devicetype': device_type,
            'networkid': network_id,
            'depot': int(depot),
        }
        if alias is not None:
            parameters['alias'] = str(alias)
        if unit_id is not None:
            parameters['unitid'] = str(unit_id)

        document = self._call('AddVehicle', 'add_vehicle', parameters)
        return self._is_success(document)

    def add_driver(
        self,
        card_id: str,
        depot: int,
        alias: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None
    ) -> bool:
        """
        Add a driver

        Returns:
            True if the service confirmed the creation
        """
        parameters = {
            'cardid': str(card_id),
            'depot': int(depot),
        }
        if alias is not None:
            parameters['alias'] = str(alias)
        if first_name is not None:
            parameters['firstname'] = str(first_name)
        if last_name is not None:
            parameters['lastname'] = str(last_name)

        document = self._call('AddDriver', 'add_driver', parameters)
        return self._is_success(document)

    def add_trailer(
        self,
        trailer_id: str,
        depot: int,
        trailer_type: int,
        alias: Optional[str] = None,
        unit_id: Optional[str] = None
    ) -> bool:
        """
        Add a trailer

        Args:
            trailer_id: Trailer identifier
            depot: Depot identifier, NO_DEPOT for none
            trailer_type: One of TRAILER_TYPES
            alias: Trailer alias
            unit_id: Unit identifier

        Returns:
            True if the service confirmed the creation
        """
        trailer_type = self._validate_choice(
            _as_int(trailer_type, 'trailer type'), TRAILER_TYPES, 'trailer type'
        )

        parameters = {
            'trailerid': str(trailer_id),
            'depot': int(depot),
        }
        if alias is not None:
            parameters['alias'] = str(alias)
        if unit_id is not None:
            parameters['unitid'] = str(unit_id)
        parameters['trailertype'] = trailer_type

        document = self._call('AddTrailer', 'add_trailer', parameters)
        return self._is_success(document)

    def modify_vehicle(self, msisdn: str, depot: int, alias: str, unit_id: str) -> bool:
        self._not_implemented('modify_vehicle')

    def modify_driver(self, card_id: str, depot: int, alias: str, first_name: str, last_name: str) -> bool:
        self._not_implemented('modify_driver')

    def modify_trailer(self, trailer_id: str, depot: int, alias: str, unit_id: str, trailer_type: int) -> bool:
        self._not_implemented('modify_trailer')

    def delete_vehicle(self, msisdn: str) -> bool:
        self._not_implemented('delete_vehicle')

    def delete_driver(self, card_id: str) -> bool:
        self._not_implemented('delete_driver')

    def delete_trailer(self, trailer_id: str) -> bool:
        self._not_implemented('delete_trailer')
