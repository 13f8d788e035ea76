"""Booking API constants."""

from typing import Final


class ApiDefaults:
    """Default values for the booking API connection."""

    BASE_URL: Final[str] = "https://apim.testenvoortoegang.org/api"
    PORTAL: Final[str] = "TestenVoorToegang"
    USER_AGENT: Final[str] = (
        "Mozilla/5.0 (X11; Fedora; Linux x86_64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/94.0.4606.81 Safari/537.36"
    )
    LOCATIONS_AMOUNT: Final[int] = 5
