"""Booking API client - modular package for the test appointment API."""

from swabbooker.services.api.catalog import CatalogApi
from swabbooker.services.api.client import BookingApiClient
from swabbooker.services.api.models import (
    Booking,
    BookingRequest,
    EventType,
    Location,
    Reservation,
    SmsVerification,
    TimeSlot,
    expect_list,
)
from swabbooker.services.api.reservations import ReservationApi
from swabbooker.services.api.transport import ApiTransport, build_query
from swabbooker.services.api.verification import SmsVerificationApi

__all__ = [
    "ApiTransport",
    "Booking",
    "BookingApiClient",
    "BookingRequest",
    "CatalogApi",
    "EventType",
    "Location",
    "Reservation",
    "ReservationApi",
    "SmsVerification",
    "SmsVerificationApi",
    "TimeSlot",
    "build_query",
    "expect_list",
]
