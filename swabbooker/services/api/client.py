"""Booking API client - facade over the endpoint groups."""

from typing import List

from ...core.config import ApiConfig
from .catalog import CatalogApi
from .models import (
    Booking,
    BookingRequest,
    EventType,
    Location,
    Reservation,
    SmsVerification,
    TimeSlot,
)
from .reservations import ReservationApi
from .transport import ApiTransport
from .verification import SmsVerificationApi


class BookingApiClient:
    """
    Client for the test appointment booking API.

    Use as an async context manager so the HTTP session is closed on exit.
    """

    def __init__(self, transport: ApiTransport):
        """
        Initialize booking API client.

        Args:
            transport: HTTP transport shared by all endpoint groups
        """
        self.transport = transport
        self._catalog = CatalogApi(transport)
        self._verification = SmsVerificationApi(transport)
        self._reservations = ReservationApi(transport)

    @classmethod
    def from_config(cls, config: ApiConfig) -> "BookingApiClient":
        return cls(
            ApiTransport(
                base_url=config.base_url,
                user_agent=config.user_agent,
                timeout=config.request_timeout,
            )
        )

    async def __aenter__(self) -> "BookingApiClient":
        await self.transport.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self.transport.close()

    async def get_event_types(self, portal: str) -> List[EventType]:
        return await self._catalog.get_event_types(portal)

    async def get_locations(
        self, lat: float, lng: float, amount: int, event_type_id: str
    ) -> List[Location]:
        return await self._catalog.get_locations(lat, lng, amount, event_type_id)

    async def get_time_slots(
        self, location_id: str, date_from: str, date_to: str, event_type_id: str
    ) -> List[TimeSlot]:
        return await self._catalog.get_time_slots(location_id, date_from, date_to, event_type_id)

    async def request_sms_code(self, phone: str, lang: str, portal: str) -> None:
        await self._verification.request_code(phone, lang, portal)

    async def validate_sms_code(self, code: str, phone: str) -> SmsVerification:
        return await self._verification.validate_code(code, phone)

    async def create_reservation(
        self, location_id: str, verification: SmsVerification, time_slot: str
    ) -> Reservation:
        return await self._reservations.create_reservation(location_id, verification, time_slot)

    async def create_booking(self, request: BookingRequest) -> Booking:
        return await self._reservations.create_booking(request)
