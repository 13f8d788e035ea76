"""Pydantic configuration models for the booking client."""

from datetime import date
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

from swabbooker.constants import ApiDefaults, WorkflowDefaults


class ApiConfig(BaseModel):
    """Booking API connection settings."""

    base_url: str = Field(default=ApiDefaults.BASE_URL)
    portal: str = Field(default=ApiDefaults.PORTAL, min_length=1)
    user_agent: str = Field(default=ApiDefaults.USER_AGENT, min_length=1)
    locations_amount: int = Field(default=ApiDefaults.LOCATIONS_AMOUNT, ge=1, le=50)
    request_timeout: Optional[float] = Field(
        default=None, gt=0, description="Total request timeout in seconds (None waits forever)"
    )

    @field_validator("base_url")
    @classmethod
    def validate_https(cls, v: str) -> str:
        """Ensure URL is HTTPS and has a host."""
        if not v.startswith("https://"):
            raise ValueError("API base_url must use HTTPS")
        if not urlparse(v).netloc:
            raise ValueError("API base_url must have a valid domain")
        return v.rstrip("/")


class SearchConfig(BaseModel):
    """Where and when to look for test locations."""

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)
    slot_window_end_hour: int = Field(default=WorkflowDefaults.SLOT_WINDOW_END_HOUR, ge=0, le=23)


class TesteeConfig(BaseModel):
    """Personal data of the person getting tested."""

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email_address: str = Field(min_length=3)
    date_of_birth: str
    preferred_language: str = Field(min_length=2)
    mobile_phone: str = Field(min_length=4)

    @field_validator("email_address")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError("email_address must contain '@'")
        return v

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def validate_date_of_birth(cls, v: Any) -> str:
        """Accept YYYY-MM-DD strings (YAML may already hand us a date)."""
        if isinstance(v, date):
            return v.isoformat()
        try:
            return date.fromisoformat(str(v)).isoformat()
        except ValueError:
            raise ValueError("date_of_birth must be in YYYY-MM-DD format")

    @field_validator("preferred_language")
    @classmethod
    def normalize_language(cls, v: str) -> str:
        return v.strip().lower()


class AppConfig(BaseModel):
    """Complete client configuration."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    search: SearchConfig
    testee: TesteeConfig

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create from a loaded YAML dictionary."""
        return cls.model_validate(data)
