"""Centralized enum definitions for SwabBooker."""

from enum import Enum


class WorkflowStep(str, Enum):
    """Steps of the booking workflow, in execution order."""
    FETCH_EVENT_TYPES = "fetch_event_types"
    PICK_EVENT_TYPE = "pick_event_type"
    FETCH_LOCATIONS = "fetch_locations"
    PICK_LOCATION = "pick_location"
    FETCH_TIME_SLOTS = "fetch_time_slots"
    PICK_TIME_SLOT = "pick_time_slot"
    REQUEST_SMS_CODE = "request_sms_code"
    ENTER_SMS_CODE = "enter_sms_code"
    VALIDATE_SMS_CODE = "validate_sms_code"
    CREATE_RESERVATION = "create_reservation"
    BUILD_BOOKING_REQUEST = "build_booking_request"
    CONFIRM_BOOKING = "confirm_booking"
    CREATE_BOOKING = "create_booking"


class WorkflowOutcome(str, Enum):
    """How a workflow run ended."""
    BOOKED = "booked"
    CANCELLED = "cancelled"
