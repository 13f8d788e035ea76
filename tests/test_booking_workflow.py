"""End-to-end tests for the booking workflow."""

from datetime import datetime, timezone

import pytest

from swabbooker.core.enums import WorkflowOutcome, WorkflowStep
from swabbooker.core.exceptions import (
    HttpStatusError,
    NoOptionsAvailableError,
    ResponseShapeError,
)
from swabbooker.services.api import Reservation, SmsVerification
from swabbooker.services.booking import BookingWorkflow, build_booking_request

FIXED_NOW = datetime(2021, 1, 1, 8, 0, tzinfo=timezone.utc)

# Pick E1, L1, the open 10:00 slot, type the code
HAPPY_ANSWERS = ["1", "1", "1", "123456"]


def make_workflow(api_client, prompter, app_config) -> BookingWorkflow:
    return BookingWorkflow(api_client, prompter, app_config, clock=lambda: FIXED_NOW)


class TestBookingWorkflowBooked:
    """Tests for the confirmed path."""

    @pytest.mark.asyncio
    async def test_books_appointment(
        self, api_client, fake_transport, app_config, make_prompter, log_messages
    ):
        """Test all seven endpoints are called in order and the booking is reported."""
        prompter, _ = make_prompter(HAPPY_ANSWERS + ["y"])

        result = await make_workflow(api_client, prompter, app_config).run()

        assert result.outcome == WorkflowOutcome.BOOKED
        assert result.booking.id == "b1"
        assert result.booking.booking_code == "ABC-123"
        assert "Booking created: b1 | ABC-123" in log_messages
        assert fake_transport.paths() == [
            "/events/getevents/TestenVoorToegang",
            "/locations/getlocations",
            "/timeslots/get/L1",
            "/smstokens/requestnew",
            "/smstokens/validate/123456",
            "/reservations/createreservation",
            "/bookings/createbooking",
        ]

    @pytest.mark.asyncio
    async def test_choices_follow_filters(self, api_client, app_config, make_prompter):
        """Test blocked, inactive and full entries are never offered."""
        prompter, output = make_prompter(HAPPY_ANSWERS + ["y"])

        await make_workflow(api_client, prompter, app_config).run()

        listed = [line for line in output if line.startswith("  ")]
        assert len(listed) == 3
        assert not any("Festival" in line or "Closed Lab" in line for line in listed)
        assert not any("Booked: 10 / 10" in line for line in listed)

    @pytest.mark.asyncio
    async def test_requests_carry_choices(
        self, api_client, fake_transport, app_config, make_prompter
    ):
        """Test each answer feeds the next call."""
        prompter, _ = make_prompter(HAPPY_ANSWERS + ["y"])

        result = await make_workflow(api_client, prompter, app_config).run()

        calls = {path.split("?")[0]: (path, body) for _, path, body in fake_transport.calls}
        locations_path, _ = calls["/locations/getlocations"]
        assert "eventTypeId=E1" in locations_path
        assert "amount=5" in locations_path
        slots_path, _ = calls["/timeslots/get/L1"]
        assert "date=2021-01-01T08%3A00%3A00.000Z" in slots_path
        assert "eventDate=2021-01-01T23%3A00%3A00.000Z" in slots_path
        _, reservation_body = calls["/reservations/createreservation"]
        assert reservation_body == {
            "locationId": "L1",
            "smsVerificationId": "sms-42",
            "timeSlot": "2021-01-01T10:00:00Z",
        }
        _, booking_body = calls["/bookings/createbooking"]
        assert booking_body == result.request.to_payload()
        assert booking_body["bookingDate"] == "2021-01-01T10:00:00Z"
        assert booking_body["reservationId"] == "r1"
        assert booking_body["smsVerificationId"] == "sms-42"
        assert booking_body["firstName"] == "Jan"
        assert booking_body["prefix"] is None
        assert booking_body["surveyOptIn"] is False

    @pytest.mark.asyncio
    async def test_progress_messages(self, api_client, app_config, make_prompter, log_messages):
        """Test the user is told about every server-side step."""
        prompter, _ = make_prompter(HAPPY_ANSWERS + ["y"])

        await make_workflow(api_client, prompter, app_config).run()

        assert "Verification code was sent to your number +***5678..." in log_messages
        assert "Your phone number was successfully verified: sms-42" in log_messages
        assert "Reservation created: r1" in log_messages
        assert "Ready to create a booking with params:" in log_messages
        assert "Enjoy!" in log_messages


class TestBookingWorkflowCancelled:
    """Tests for declining the final confirmation."""

    @pytest.mark.asyncio
    async def test_cancel_skips_booking(
        self, api_client, fake_transport, app_config, make_prompter, log_messages
    ):
        """Test no booking is created when the user declines."""
        prompter, _ = make_prompter(HAPPY_ANSWERS + ["n"])

        result = await make_workflow(api_client, prompter, app_config).run()

        assert result.outcome == WorkflowOutcome.CANCELLED
        assert result.booking is None
        assert "/bookings/createbooking" not in fake_transport.paths()
        assert "Oh well... Bye then :)" in log_messages


class TestBookingWorkflowFailures:
    """Tests for aborted runs."""

    @pytest.mark.asyncio
    async def test_no_event_types_left(
        self, api_client, fake_transport, app_config, make_prompter
    ):
        """Test an empty choice list aborts before any further call."""
        fake_transport.routes[("GET", "/events/getevents/")] = [{"id": "E0", "blocked": True}]
        prompter, _ = make_prompter([])
        workflow = make_workflow(api_client, prompter, app_config)

        with pytest.raises(NoOptionsAvailableError):
            await workflow.run()

        assert workflow.current_step == WorkflowStep.PICK_EVENT_TYPE
        assert len(fake_transport.calls) == 1

    @pytest.mark.asyncio
    async def test_locations_not_a_list(
        self, api_client, fake_transport, app_config, make_prompter
    ):
        fake_transport.routes[("GET", "/locations/getlocations")] = {"error": "oops"}
        prompter, _ = make_prompter(["1"])
        workflow = make_workflow(api_client, prompter, app_config)

        with pytest.raises(ResponseShapeError):
            await workflow.run()

        assert workflow.current_step == WorkflowStep.FETCH_LOCATIONS

    @pytest.mark.asyncio
    async def test_rejected_code_stops_before_reservation(
        self, api_client, fake_transport, app_config, make_prompter
    ):
        """Test nothing is reserved without a validated verification id."""
        fake_transport.routes[("GET", "/smstokens/validate/")] = HttpStatusError(
            400, "/smstokens/validate/123456", {"error": "invalid"}
        )
        prompter, _ = make_prompter(HAPPY_ANSWERS)
        workflow = make_workflow(api_client, prompter, app_config)

        with pytest.raises(HttpStatusError):
            await workflow.run()

        assert workflow.current_step == WorkflowStep.VALIDATE_SMS_CODE
        assert "/reservations/createreservation" not in fake_transport.paths()


class TestBuildBookingRequest:
    """Tests for merging choices with testee data."""

    def test_merges_config(self, app_config):
        request = build_booking_request(
            app_config,
            "2021-01-01T10:00:00Z",
            "E1",
            "L1",
            Reservation(id="r1"),
            SmsVerification(token_id="sms-42"),
        )

        assert request.email_address == "jan@example.com"
        assert request.date_of_birth == "1990-01-31"
        assert request.preferred_language == "nl"
        assert request.mobile_phone == "+31612345678"
        assert request.sms_verification_id == "sms-42"
