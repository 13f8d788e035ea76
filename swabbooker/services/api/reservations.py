"""Reservation and booking endpoints."""

from loguru import logger

from .models import Booking, BookingRequest, Reservation, SmsVerification
from .transport import ApiTransport


class ReservationApi:
    """Holds a slot, then turns the hold into a booking."""

    def __init__(self, transport: ApiTransport):
        self._transport = transport

    async def create_reservation(
        self, location_id: str, verification: SmsVerification, time_slot: str
    ) -> Reservation:
        """
        Reserve a time slot.

        Args:
            location_id: Chosen location
            verification: Validated SMS verification of this run
            time_slot: Raw start timestamp of the chosen slot

        Returns:
            Created reservation
        """
        body = {
            "locationId": location_id,
            "smsVerificationId": verification.token_id,
            "timeSlot": time_slot,
        }
        path = "/reservations/createreservation"
        reservation = Reservation.from_api(await self._transport.post(path, body), path)
        logger.debug(f"Reservation {reservation.id} created for slot {time_slot}")
        return reservation

    async def create_booking(self, request: BookingRequest) -> Booking:
        """
        Finalize a reservation.

        Args:
            request: Complete booking request

        Returns:
            Booking with id and booking code
        """
        path = "/bookings/createbooking"
        return Booking.from_api(await self._transport.post(path, request.to_payload()), path)
