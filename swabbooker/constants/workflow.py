"""Workflow-related constants."""

from typing import Final


class WorkflowDefaults:
    """Defaults for the booking workflow."""

    # Slots are searched from now until this hour (local time) today
    SLOT_WINDOW_END_HOUR: Final[int] = 23


class PromptMessages:
    """Questions shown to the user at each interactive step."""

    EVENT_TYPE: Final[str] = "So... Why do you need to have a stick inside your nose today?"
    LOCATION: Final[str] = "Where would you like to have this experience?"
    TIME_SLOT: Final[str] = "And when?"
    SMS_CODE: Final[str] = "Please enter verification code from sms:"
    CONFIRM: Final[str] = "Everything seems fine?"
