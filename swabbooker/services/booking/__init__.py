"""Booking workflow package."""

from swabbooker.services.booking.choices import (
    active_locations,
    available_event_types,
    event_type_choice,
    location_choice,
    open_time_slots,
    slot_window,
    time_slot_choice,
)
from swabbooker.services.booking.workflow import (
    BookingResult,
    BookingWorkflow,
    build_booking_request,
)

__all__ = [
    "BookingResult",
    "BookingWorkflow",
    "active_locations",
    "available_event_types",
    "build_booking_request",
    "event_type_choice",
    "location_choice",
    "open_time_slots",
    "slot_window",
    "time_slot_choice",
]
