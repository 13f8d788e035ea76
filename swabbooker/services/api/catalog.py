"""Catalog endpoints - event types, locations and time slots."""

from typing import List
from urllib.parse import quote

from loguru import logger

from .models import EventType, Location, TimeSlot, expect_list
from .transport import ApiTransport, build_query


class CatalogApi:
    """Read-only lookups that feed the user's choices."""

    def __init__(self, transport: ApiTransport):
        self._transport = transport

    async def get_event_types(self, portal: str) -> List[EventType]:
        """
        Get all event types offered on a portal.

        Args:
            portal: Organization/portal identifier

        Returns:
            List of event types (blocked ones included)

        Raises:
            ResponseShapeError: If the response is not a list
        """
        path = f"/events/getevents/{quote(portal, safe='')}"
        data = expect_list(await self._transport.get(path), path)
        logger.debug(f"Retrieved {len(data)} event types")
        return [EventType.from_api(item, path) for item in data]

    async def get_locations(
        self, lat: float, lng: float, amount: int, event_type_id: str
    ) -> List[Location]:
        """
        Get the locations nearest to a point that offer an event type.

        Args:
            lat: Latitude
            lng: Longitude
            amount: Maximum number of locations
            event_type_id: Chosen event type

        Returns:
            List of locations (inactive ones included)
        """
        params = {"lat": lat, "lng": lng, "amount": amount, "eventTypeId": event_type_id}
        path = f"/locations/getlocations?{build_query(params)}"
        data = expect_list(await self._transport.get(path), path)
        logger.debug(f"Retrieved {len(data)} locations")
        return [Location.from_api(item, path) for item in data]

    async def get_time_slots(
        self, location_id: str, date_from: str, date_to: str, event_type_id: str
    ) -> List[TimeSlot]:
        """
        Get time slots of a location within a date window.

        Args:
            location_id: Chosen location
            date_from: Window start (ISO-8601)
            date_to: Window end (ISO-8601)
            event_type_id: Chosen event type

        Returns:
            List of time slots (full ones included)
        """
        params = {"date": date_from, "eventDate": date_to, "eventTypeId": event_type_id}
        path = f"/timeslots/get/{quote(str(location_id), safe='')}?{build_query(params)}"
        data = expect_list(await self._transport.get(path), path)
        logger.debug(f"Retrieved {len(data)} time slots")
        return [TimeSlot.from_api(item, path) for item in data]
