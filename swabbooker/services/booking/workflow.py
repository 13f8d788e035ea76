"""Booking workflow - the interactive path from test type to confirmed booking."""

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from loguru import logger

from ...constants import PromptMessages
from ...core.config import AppConfig
from ...core.enums import WorkflowOutcome, WorkflowStep
from ...ui.prompts import Prompter
from ...utils.masking import mask_phone
from ..api.client import BookingApiClient
from ..api.models import Booking, BookingRequest, Reservation, SmsVerification
from .choices import (
    active_locations,
    available_event_types,
    event_type_choice,
    location_choice,
    open_time_slots,
    slot_window,
    time_slot_choice,
)


@dataclass(frozen=True)
class BookingResult:
    """Outcome of one workflow run."""

    outcome: WorkflowOutcome
    request: BookingRequest
    booking: Optional[Booking] = None


def _local_now() -> datetime:
    return datetime.now().astimezone()


def build_booking_request(
    config: AppConfig,
    time_slot: str,
    event_type_id: str,
    location_id: str,
    reservation: Reservation,
    verification: SmsVerification,
) -> BookingRequest:
    """Merge the choices of this run with the configured testee data."""
    testee = config.testee
    return BookingRequest(
        booking_date=time_slot,
        event_type_id=event_type_id,
        reservation_id=reservation.id,
        location_id=location_id,
        first_name=testee.first_name,
        last_name=testee.last_name,
        email_address=testee.email_address,
        date_of_birth=testee.date_of_birth,
        preferred_language=testee.preferred_language,
        mobile_phone=testee.mobile_phone,
        sms_verification_id=verification.token_id,
    )


class BookingWorkflow:
    """
    Runs the booking steps strictly in order.

    Each API response supplies the choices for the next prompt and each
    answer supplies the parameters of the next call. Nothing is retried:
    any error propagates to the caller, with current_step naming the step
    that failed. Declining the final confirmation ends the run as CANCELLED
    without creating a booking.
    """

    def __init__(
        self,
        client: BookingApiClient,
        prompter: Prompter,
        config: AppConfig,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize booking workflow.

        Args:
            client: Open booking API client
            prompter: Source of user answers
            config: Validated configuration
            clock: Returns the current aware datetime (local time by default)
        """
        self.client = client
        self.prompter = prompter
        self.config = config
        self._clock = clock or _local_now
        self.current_step: WorkflowStep = WorkflowStep.FETCH_EVENT_TYPES

    def _enter(self, step: WorkflowStep) -> None:
        self.current_step = step
        logger.debug(f"Workflow step: {step.value}")

    async def run(self) -> BookingResult:
        """
        Execute the whole workflow once.

        Returns:
            BookingResult, BOOKED with the created booking or CANCELLED

        Raises:
            SwabBookerError: On any API, shape or prompt failure
        """
        api = self.config.api
        search = self.config.search
        testee = self.config.testee
        now = self._clock()

        self._enter(WorkflowStep.FETCH_EVENT_TYPES)
        event_types = available_event_types(await self.client.get_event_types(api.portal))

        self._enter(WorkflowStep.PICK_EVENT_TYPE)
        event_type_id = self.prompter.choose_one(
            PromptMessages.EVENT_TYPE, [event_type_choice(e) for e in event_types]
        )

        self._enter(WorkflowStep.FETCH_LOCATIONS)
        locations = active_locations(
            await self.client.get_locations(
                search.lat, search.lng, api.locations_amount, event_type_id
            )
        )

        self._enter(WorkflowStep.PICK_LOCATION)
        location_id = self.prompter.choose_one(
            PromptMessages.LOCATION, [location_choice(location) for location in locations]
        )

        self._enter(WorkflowStep.FETCH_TIME_SLOTS)
        date_from, date_to = slot_window(now, search.slot_window_end_hour)
        slots = open_time_slots(
            await self.client.get_time_slots(location_id, date_from, date_to, event_type_id)
        )

        self._enter(WorkflowStep.PICK_TIME_SLOT)
        time_slot = self.prompter.choose_one(
            PromptMessages.TIME_SLOT, [time_slot_choice(slot) for slot in slots]
        )

        self._enter(WorkflowStep.REQUEST_SMS_CODE)
        await self.client.request_sms_code(
            testee.mobile_phone, testee.preferred_language, api.portal
        )
        logger.info(
            f"Verification code was sent to your number {mask_phone(testee.mobile_phone)}..."
        )

        self._enter(WorkflowStep.ENTER_SMS_CODE)
        code = self.prompter.ask_text(PromptMessages.SMS_CODE)

        self._enter(WorkflowStep.VALIDATE_SMS_CODE)
        verification = await self.client.validate_sms_code(code, testee.mobile_phone)
        logger.info(f"Your phone number was successfully verified: {verification.token_id}")

        self._enter(WorkflowStep.CREATE_RESERVATION)
        reservation = await self.client.create_reservation(location_id, verification, time_slot)
        logger.info(f"Reservation created: {reservation.id}")

        self._enter(WorkflowStep.BUILD_BOOKING_REQUEST)
        request = build_booking_request(
            self.config, time_slot, event_type_id, location_id, reservation, verification
        )

        self._enter(WorkflowStep.CONFIRM_BOOKING)
        logger.info("Ready to create a booking with params:")
        logger.info(json.dumps(request.to_payload(), indent=2, ensure_ascii=False))
        if not self.prompter.confirm(PromptMessages.CONFIRM):
            logger.info("Oh well... Bye then :)")
            return BookingResult(outcome=WorkflowOutcome.CANCELLED, request=request)

        self._enter(WorkflowStep.CREATE_BOOKING)
        logger.info("Booking afspraak...")
        booking = await self.client.create_booking(request)
        logger.success(f"Booking created: {booking.id} | {booking.booking_code}")
        logger.success("Enjoy!")
        return BookingResult(outcome=WorkflowOutcome.BOOKED, request=request, booking=booking)
