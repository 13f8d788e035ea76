"""Booking API records - one frozen dataclass per entity."""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from ...core.exceptions import ResponseShapeError


def _field(data: Any, key: str, entity: str, path: Optional[str] = None) -> Any:
    """Read a required field, failing with a shape error when it is absent."""
    source = f" from {path}" if path else ""
    if not isinstance(data, Mapping):
        raise ResponseShapeError(
            f"{entity}{source} must be a JSON object, got {type(data).__name__}", path=path
        )
    if data.get(key) is None:
        raise ResponseShapeError(
            f"{entity}{source} is missing required field '{key}'", path=path
        )
    return data[key]


def expect_list(payload: Any, path: str) -> List[Any]:
    """
    Assert that a response payload is a JSON array.

    Raises:
        ResponseShapeError: If payload is not a list
    """
    if not isinstance(payload, list):
        raise ResponseShapeError(
            f"Expected a list from {path}, got {type(payload).__name__}", path=path
        )
    return payload


@dataclass(frozen=True)
class EventType:
    """A kind of test that can be booked (e.g. antigen, PCR)."""

    id: str
    name: str
    test_kind: str
    result_wait_period: Optional[int]
    validity_period: Optional[int]
    blocked: bool

    @classmethod
    def from_api(cls, data: Dict[str, Any], path: Optional[str] = None) -> "EventType":
        test_type = data.get("testType") or {}
        return cls(
            id=_field(data, "id", "EventType", path),
            name=data.get("nameEn", ""),
            test_kind=test_type.get("nameEn", ""),
            result_wait_period=test_type.get("resultWaitPeriod"),
            validity_period=test_type.get("validityPeriod"),
            blocked=bool(data.get("blocked", False)),
        )


@dataclass(frozen=True)
class Location:
    """A test location near the configured coordinates."""

    id: str
    address: str
    distance_km: Optional[float]
    provider_name: str
    is_active: bool

    @classmethod
    def from_api(cls, data: Dict[str, Any], path: Optional[str] = None) -> "Location":
        provider = data.get("testProvider") or {}
        return cls(
            id=_field(data, "id", "Location", path),
            address=data.get("address", ""),
            distance_km=data.get("distanceInKm"),
            provider_name=provider.get("nameEn", ""),
            is_active=bool(data.get("isActive", False)),
        )


@dataclass(frozen=True)
class TimeSlot:
    """A bookable time window at a location."""

    start: str
    bookings: int
    maximum_capacity: Optional[int]
    has_availability: bool

    @classmethod
    def from_api(cls, data: Dict[str, Any], path: Optional[str] = None) -> "TimeSlot":
        return cls(
            start=_field(data, "startTimeslot", "TimeSlot", path),
            bookings=data.get("bookings", 0),
            maximum_capacity=data.get("maximumCapacity"),
            has_availability=bool(data.get("hasAvailability", False)),
        )


@dataclass(frozen=True)
class SmsVerification:
    """Proof of phone ownership, required for reservation and booking."""

    token_id: str

    @classmethod
    def from_api(cls, data: Dict[str, Any], path: Optional[str] = None) -> "SmsVerification":
        token_id = str(_field(data, "tokenId", "SmsVerification", path)).strip()
        if not token_id:
            raise ResponseShapeError("SmsVerification has an empty 'tokenId'", path=path)
        return cls(token_id=token_id)


@dataclass(frozen=True)
class Reservation:
    """Provisional hold on a time slot."""

    id: str

    @classmethod
    def from_api(cls, data: Dict[str, Any], path: Optional[str] = None) -> "Reservation":
        return cls(id=_field(data, "id", "Reservation", path))


@dataclass(frozen=True)
class Booking:
    """Finalized appointment."""

    id: str
    booking_code: str

    @classmethod
    def from_api(cls, data: Dict[str, Any], path: Optional[str] = None) -> "Booking":
        return cls(
            id=_field(data, "id", "Booking", path),
            booking_code=_field(data, "bookingCode", "Booking", path),
        )


@dataclass(frozen=True)
class BookingRequest:
    """Everything needed to turn a reservation into a booking."""

    booking_date: str
    event_type_id: str
    reservation_id: str
    location_id: str
    first_name: str
    last_name: str
    email_address: str
    date_of_birth: str
    preferred_language: str
    mobile_phone: str
    sms_verification_id: str
    prefix: Optional[str] = None
    survey_opt_in: bool = False

    def to_payload(self) -> Dict[str, Any]:
        """Body for POST /bookings/createbooking."""
        return {
            "bookingDate": self.booking_date,
            "eventTypeId": self.event_type_id,
            "reservationId": self.reservation_id,
            "locationId": self.location_id,
            "firstName": self.first_name,
            "prefix": self.prefix,
            "surveyOptIn": self.survey_opt_in,
            "lastName": self.last_name,
            "emailAddress": self.email_address,
            "dateOfBirth": self.date_of_birth,
            "preferredLanguage": self.preferred_language,
            "mobilePhone": self.mobile_phone,
            "smsVerificationId": self.sms_verification_id,
        }
