import re

import pytest

from agents.booking_flow_agent import BookingFlowAgent, BookingStepError
from agents.final_output_agent import FinalOutputAgent
from agents.payment_agent import PaymentAgent
from models.booking import PAYMENT_STATUSES, BookingSession, GuestDetails, TravelerDetails
from utils.config import AppConfig


def make_flow(catalog, config=None, sleep=None, kind="flight", passengers=1):
    config = config or AppConfig.instant()
    if kind == "flight":
        session = BookingSession("flight", catalog.find_flight("6E-2045"), {"passengers": passengers})
    elif kind == "hotel":
        session = BookingSession("hotel", catalog.find_hotel("3"), {"check_in": "2024-02-01", "check_out": "2024-02-03"})
    else:
        session = BookingSession("package", catalog.find_package("2"), {"guests": 2})
    payment = PaymentAgent(config, sleep=sleep) if sleep else PaymentAgent(config)
    return BookingFlowAgent(session, payment=payment, output=FinalOutputAgent(config))


def test_wizard_starts_on_details(catalog):
    flow = make_flow(catalog)
    assert flow.step == "details"
    assert flow.can_move("payment")
    assert not flow.can_move("confirmation")


def test_payment_and_confirmation_are_locked_until_details_pass(catalog):
    flow = make_flow(catalog)
    with pytest.raises(BookingStepError):
        flow.pay("upi")
    with pytest.raises(BookingStepError):
        flow.back()
    with pytest.raises(BookingStepError):
        flow.confirmation_html()


def test_invalid_details_keep_the_wizard_on_details(catalog):
    flow = make_flow(catalog)
    errors = flow.submit_details(GuestDetails(first_name="Priya"))
    assert "email" in errors and "phone" in errors
    assert flow.step == "details"
    assert flow.errors == errors


def test_full_flight_booking(catalog, guest):
    flow = make_flow(catalog)
    assert flow.submit_details(guest) == {}
    assert flow.step == "payment"

    booking = flow.pay("upi")
    assert flow.step == "confirmation"
    assert re.match(r"^SE-FLT-[0-9A-Z]+$", booking.booking_id)
    assert booking.payment_status == "completed"
    assert booking.payment_status in PAYMENT_STATUSES
    assert booking.payment_method == "upi"
    assert booking.fare.total == 6159
    assert booking.guest.email == guest.email
    assert flow.confirmation_filename() == f"Booking-Confirmation-{booking.booking_id}.html"


def test_confirmation_has_no_outgoing_moves(catalog, guest):
    flow = make_flow(catalog)
    flow.submit_details(guest)
    flow.pay("card")
    for step in ("details", "payment", "confirmation"):
        assert not flow.can_move(step)
    with pytest.raises(BookingStepError):
        flow.pay("card")
    with pytest.raises(BookingStepError):
        flow.back()


def test_back_keeps_entered_details(catalog, guest):
    flow = make_flow(catalog)
    flow.submit_details(guest)
    flow.back()
    assert flow.step == "details"
    assert flow.guest.first_name == "Priya"
    assert flow.submit_details(flow.guest) == {}
    assert flow.step == "payment"


def test_each_kind_gets_its_reference_prefix(catalog, guest):
    for kind, prefix in (("hotel", "SE-HTL-"), ("package", "SE-PKG-")):
        flow = make_flow(catalog, kind=kind)
        flow.submit_details(guest)
        assert flow.pay("netbanking").booking_id.startswith(prefix)


def test_unknown_payment_method_leaves_wizard_on_payment(catalog, guest):
    flow = make_flow(catalog)
    flow.submit_details(guest)
    with pytest.raises(ValueError):
        flow.pay("cash")
    assert flow.step == "payment"
    assert not flow.is_processing


def test_is_processing_during_payment_delay(catalog, guest):
    seen = []
    holder = {}

    def fake_sleep(seconds):
        seen.append((seconds, holder["flow"].is_processing))

    flow = make_flow(catalog, config=AppConfig(payment_delay=2.5), sleep=fake_sleep)
    holder["flow"] = flow
    flow.submit_details(guest)
    flow.pay("wallet")
    assert seen == [(2.5, True)]
    assert not flow.is_processing


def test_fare_is_quoted_once(catalog, guest):
    flow = make_flow(catalog)
    flow.session.item.price = 99999
    flow.submit_details(guest)
    assert flow.pay("upi").fare.base_fare == 5499


def test_incomplete_traveler_blocks_details(catalog, guest):
    flow = make_flow(catalog, passengers=2)
    travelers = [
        TravelerDetails(first_name="Priya", last_name="Nair", date_of_birth="1990-04-12"),
        {"first_name": "Arjun", "last_name": "", "date_of_birth": "1988-09-01"},
    ]
    errors = flow.submit_details(guest, travelers=travelers)
    assert errors == {"traveler-1": "Please complete all fields"}
    assert flow.step == "details"


def test_hotel_wizard_uses_stay_fare(catalog, guest):
    flow = make_flow(catalog, kind="hotel")
    assert flow.fare.base_fare == 24000
    assert flow.fare.label == "2 Nights × 1 Room"


def test_flight_needs_one_traveler_per_passenger(catalog, guest):
    flow = make_flow(catalog, passengers=2)
    assert flow.traveler_count == 2
    one = [TravelerDetails(first_name="Priya", last_name="Nair", date_of_birth="1990-04-12")]
    errors = flow.submit_details(guest, travelers=one)
    assert errors == {"travelers": "Please add details for all 2 passenger(s)"}
    assert flow.step == "details"


def test_stays_have_no_traveler_forms(catalog):
    assert make_flow(catalog, kind="hotel").traveler_count == 0
    assert make_flow(catalog, kind="package").traveler_count == 0
