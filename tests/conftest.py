"""Pytest configuration and common fixtures."""

import sys
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from loguru import logger

from swabbooker.core.config import AppConfig
from swabbooker.services.api import ApiTransport, BookingApiClient
from swabbooker.ui import Prompter

BOOKED_SLOT = "2021-01-01T10:00:00Z"


class FakeTransport(ApiTransport):
    """Transport that answers from canned responses and records every call."""

    def __init__(self, routes: Dict[Tuple[str, str], Any]):
        """
        Args:
            routes: (method, path prefix) -> JSON payload or exception to raise
        """
        super().__init__(base_url="https://api.test", user_agent="pytest")
        self.routes = routes
        self.calls: List[Tuple[str, str, Optional[Dict[str, Any]]]] = []

    async def open(self) -> None:
        pass

    async def close(self) -> None:
        pass

    async def request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        self.calls.append((method, path, body))
        for (route_method, prefix), payload in self.routes.items():
            if route_method == method and path.startswith(prefix):
                if isinstance(payload, Exception):
                    raise payload
                return payload
        raise AssertionError(f"Unexpected request: {method} {path}")

    def paths(self) -> List[str]:
        return [path.split("?")[0] for _, path, _ in self.calls]


def _scripted_prompter(answers: Iterable[str]) -> Tuple[Prompter, List[str]]:
    """Prompter fed from a list of typed answers; returns it with its output lines."""
    remaining = iter(answers)
    output: List[str] = []

    def fake_input(prompt: str) -> str:
        output.append(prompt)
        return next(remaining)

    return Prompter(input_func=fake_input, output_func=output.append), output


@pytest.fixture
def app_config() -> AppConfig:
    """Valid configuration for the booking workflow."""
    return AppConfig.from_dict(
        {
            "api": {"base_url": "https://api.test", "portal": "TestenVoorToegang"},
            "search": {"lat": 52.37, "lng": 4.89},
            "testee": {
                "first_name": "Jan",
                "last_name": "Jansen",
                "email_address": "jan@example.com",
                "date_of_birth": "1990-01-31",
                "preferred_language": "nl",
                "mobile_phone": "+31612345678",
            },
        }
    )


@pytest.fixture
def canned_routes() -> Dict[Tuple[str, str], Any]:
    """Responses for all seven booking API endpoints."""
    return {
        ("GET", "/events/getevents/"): [
            {
                "id": "E0",
                "nameEn": "Festival",
                "blocked": True,
                "testType": {"nameEn": "PCR", "resultWaitPeriod": 1440, "validityPeriod": 48},
            },
            {
                "id": "E1",
                "nameEn": "Event access",
                "blocked": False,
                "testType": {"nameEn": "Antigen", "resultWaitPeriod": 15, "validityPeriod": 24},
            },
        ],
        ("GET", "/locations/getlocations"): [
            {
                "id": "L0",
                "address": "Closedstraat 1",
                "distanceInKm": 0.5,
                "isActive": False,
                "testProvider": {"nameEn": "Closed Lab"},
            },
            {
                "id": "L1",
                "address": "Damrak 1, Amsterdam",
                "distanceInKm": 1.2,
                "isActive": True,
                "testProvider": {"nameEn": "Quick Test"},
            },
        ],
        ("GET", "/timeslots/get/"): [
            {
                "startTimeslot": "2021-01-01T09:00:00Z",
                "bookings": 10,
                "maximumCapacity": 10,
                "hasAvailability": False,
            },
            {
                "startTimeslot": BOOKED_SLOT,
                "bookings": 3,
                "maximumCapacity": 10,
                "hasAvailability": True,
            },
        ],
        ("POST", "/smstokens/requestnew"): {},
        ("GET", "/smstokens/validate/"): {"tokenId": "sms-42"},
        ("POST", "/reservations/createreservation"): {"id": "r1"},
        ("POST", "/bookings/createbooking"): {"id": "b1", "bookingCode": "ABC-123"},
    }


@pytest.fixture
def fake_transport(canned_routes) -> FakeTransport:
    return FakeTransport(canned_routes)


@pytest.fixture
def api_client(fake_transport) -> BookingApiClient:
    return BookingApiClient(fake_transport)


@pytest.fixture
def log_messages() -> Iterator[List[str]]:
    """Capture loguru messages emitted during the test."""
    messages: List[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def make_prompter() -> Callable[[Iterable[str]], Tuple[Prompter, List[str]]]:
    """Factory for prompters answering from a script of typed lines."""
    return _scripted_prompter
