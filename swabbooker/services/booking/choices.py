"""Filtering and labelling of the lists the user picks from."""

from datetime import datetime, timezone
from typing import Iterable, List, Tuple

from ...ui.prompts import Choice
from ..api.models import EventType, Location, TimeSlot


def available_event_types(event_types: Iterable[EventType]) -> List[EventType]:
    """Drop blocked event types."""
    return [event_type for event_type in event_types if not event_type.blocked]


def active_locations(locations: Iterable[Location]) -> List[Location]:
    """Drop inactive locations."""
    return [location for location in locations if location.is_active]


def open_time_slots(slots: Iterable[TimeSlot]) -> List[TimeSlot]:
    """Drop slots without availability."""
    return [slot for slot in slots if slot.has_availability]


def event_type_choice(event_type: EventType) -> Choice:
    label = (
        f"{event_type.name} | {event_type.test_kind} | "
        f"wait: {event_type.result_wait_period}min | valid: {event_type.validity_period}h"
    )
    return Choice(label=label, value=event_type.id)


def location_choice(location: Location) -> Choice:
    return Choice(
        label=f"{location.distance_km} | {location.provider_name} | {location.address}",
        value=location.id,
    )


def parse_timestamp(value: str) -> datetime:
    """
    Parse an API timestamp.

    A trailing Z or an explicit offset gives an aware datetime. Without
    either, the timestamp is local wall-clock time and stays naive.

    Raises:
        ValueError: If the value is not ISO-8601
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def time_slot_choice(slot: TimeSlot) -> Choice:
    """Label with local time and date; the value stays the raw API timestamp."""
    try:
        start = parse_timestamp(slot.start)
    except ValueError:
        shown = slot.start
    else:
        local = start.astimezone() if start.tzinfo is not None else start
        shown = f"{local.strftime('%X')} {local.strftime('%x')}"
    label = f"{shown} | Booked: {slot.bookings} / {slot.maximum_capacity}"
    return Choice(label=label, value=slot.start)


def to_api_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with milliseconds and a Z suffix."""
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def slot_window(now: datetime, end_hour: int) -> Tuple[str, str]:
    """
    Date window for the slot search: from now until today at end_hour local time.

    Args:
        now: Current (timezone-aware) time
        end_hour: Hour of day the window closes

    Returns:
        (date_from, date_to) as API timestamps
    """
    end = now.replace(hour=end_hour, minute=0, second=0, microsecond=0)
    return to_api_timestamp(now), to_api_timestamp(end)
