import re

from agents.travel_agent import TravelAgent
from models.booking import ContactDetails, TravelerDetails
from models.filters import FlightFilters
from utils.config import AppConfig


def test_book_the_morning_delhi_mumbai_flight(guest):
    agent = TravelAgent(AppConfig.instant())
    flights = agent.catalog.search_flights(FlightFilters(origin="DEL", destination="BOM"), sort_by="departure")
    assert flights[0].id == "6E-2045"

    flow = agent.book_flight(flights[0], passengers=1)
    assert agent.current.kind == "flight"
    assert (flow.fare.base_fare, flow.fare.taxes, flow.fare.total) == (5499, 660, 6159)

    assert flow.submit_details(guest) == {}
    booking = flow.pay("upi")
    assert re.match(r"^SE-FLT-[0-9A-Z]+$", booking.booking_id)
    assert booking.fare.total == 6159

    doc = flow.confirmation_html()
    assert booking.booking_id in doc
    assert "₹6,159" in doc


def test_hotel_booking_with_suite(guest):
    agent = TravelAgent(AppConfig.instant())
    oberoi = agent.catalog.find_hotel("2")
    flow = agent.book_hotel(oberoi, "2024-03-10", "2024-03-12", rooms=1, room_id="suite")
    assert flow.fare.base_fare == 28800 * 2
    assert flow.fare.label == "2 Nights × 1 Room"
    assert agent.current.metadata["guests"] == 2


def test_new_booking_replaces_the_old_one(catalog):
    agent = TravelAgent(AppConfig.instant())
    first = agent.book_package(agent.catalog.find_package("1"))
    second = agent.book_package(agent.catalog.find_package("4"), guests=3)
    assert agent.flow is second and agent.flow is not first
    assert second.fare.base_fare == 135000
    assert second.fare.taxes == 6750


def test_reset_clears_the_session():
    agent = TravelAgent(AppConfig.instant())
    agent.book_flight(agent.catalog.find_flight("UK-911"))
    agent.reset()
    assert agent.current is None
    assert agent.flow is None


def test_planner_shares_the_output_agent():
    agent = TravelAgent(AppConfig.instant())
    assert agent.planner.output is agent.output


def test_two_passenger_flight_lists_both_travelers(guest):
    agent = TravelAgent(AppConfig.instant())
    flow = agent.book_flight(agent.catalog.find_flight("6E-2045"), passengers=2)
    assert flow.fare.base_fare == 5499 * 2

    travelers = [
        TravelerDetails(title="Ms", first_name="Priya", last_name="Nair", date_of_birth="1990-04-12", gender="female"),
        {"title": "Mr", "first_name": "Arjun", "last_name": "Nair", "date_of_birth": "1988-09-01", "passport_number": "K1234567"},
    ]
    contact = ContactDetails(email=guest.email, phone=guest.phone)
    assert flow.submit_details(guest, travelers=travelers, contact=contact) == {}

    booking = flow.pay("card")
    assert [t.first_name for t in booking.travelers] == ["Priya", "Arjun"]
    assert booking.travelers[1].passport_number == "K1234567"
    ticket = agent.output.ticket_html(booking)
    assert "Ms Priya Nair" in ticket
    assert "Mr Arjun Nair" in ticket


def test_visa_application_runs_through_the_package_wizard(guest):
    agent = TravelAgent(AppConfig.instant())
    flow = agent.book_visa(agent.catalog.find_visa("2"), applicants=1)
    assert agent.current.kind == "package"
    assert flow.traveler_count == 0
    assert (flow.fare.base_fare, flow.fare.taxes) == (14200, 710)

    flow.submit_details(guest)
    booking = flow.pay("netbanking")
    assert booking.booking_id.startswith("SE-PKG-")
    doc = flow.confirmation_html()
    assert "United Kingdom Standard Visitor Visa" in doc
    assert "₹14,910" in doc
    assert "**Visa:** United Kingdom Standard Visitor Visa" in agent.output.summary_markdown(booking)
