import pytest

from agents.pricing_agent import PricingAgent
from models.hotel import Hotel
from models.package import Package


def test_flight_fare_adds_twelve_percent_tax(catalog):
    flight = catalog.find_flight("6E-2045")
    fare = PricingAgent().quote("flight", flight, {"passengers": 1})
    assert fare.base_fare == 5499
    assert fare.taxes == 660
    assert fare.total == 6159
    assert fare.label == "Flight Fare"


def test_flight_fare_scales_with_passengers(catalog):
    flight = catalog.find_flight("UK-911")
    fare = PricingAgent().quote("flight", flight, {"passengers": 3})
    assert fare.base_fare == 6299 * 3
    assert fare.taxes == round(6299 * 3 * 0.12)


def test_passengers_default_to_one(catalog):
    flight = catalog.find_flight("6E-2045")
    assert PricingAgent().quote("flight", flight).base_fare == 5499


def test_hotel_fare_multiplies_nights_and_rooms(catalog):
    taj = catalog.find_hotel("1")
    fare = PricingAgent().quote(
        "hotel", taj, {"check_in": "2024-01-15", "check_out": "2024-01-18", "rooms": 2}
    )
    assert fare.base_fare == 15000 * 3 * 2
    assert fare.taxes == 10800
    assert fare.total == 100800
    assert fare.label == "3 Nights × 2 Rooms"


def test_hotel_without_dates_counts_one_night(catalog):
    taj = catalog.find_hotel("1")
    fare = PricingAgent().quote("hotel", taj, {})
    assert fare.base_fare == 15000
    assert fare.label == "1 Night × 1 Room"


def test_hotel_reversed_dates_still_charge_one_night(catalog):
    hotel = catalog.find_hotel("6")
    fare = PricingAgent().quote("hotel", hotel, {"check_in": "2024-01-18", "check_out": "2024-01-15"})
    assert fare.base_fare == 5000


def test_selected_room_sets_the_nightly_rate(catalog):
    taj = catalog.find_hotel("1")
    fare = PricingAgent().quote("hotel", taj, {"room_id": "suite"})
    assert fare.base_fare == 24000


def test_unknown_room_is_rejected(catalog):
    taj = catalog.find_hotel("1")
    with pytest.raises(ValueError):
        PricingAgent().quote("hotel", taj, {"room_id": "penthouse"})


def test_package_fare_uses_five_percent_tax(catalog):
    goa = catalog.find_package("1")
    fare = PricingAgent().quote("package", goa, {"guests": 2})
    assert fare.base_fare == 70000
    assert fare.taxes == 3500
    assert fare.total == 73500
    assert fare.label == "2 Travelers"


def test_single_traveler_label():
    pkg = Package(id="x", title="Day Trip", price_per_person=1000)
    assert PricingAgent().quote("package", pkg, {"guests": 1}).label == "1 Traveler"


def test_tax_rounds_halves_up():
    # 10 × 5% = 0.5, which banker's rounding would send to 0
    pkg = Package(id="x", title="Cheap", price_per_person=10)
    assert PricingAgent().quote("package", pkg, {"guests": 1}).taxes == 1
    pkg = Package(id="y", title="Cheap", price_per_person=50)
    assert PricingAgent().quote("package", pkg, {"guests": 1}).taxes == 3


def test_total_is_never_below_base(catalog):
    agent = PricingAgent()
    for f in catalog.search_flights():
        fare = agent.quote("flight", f)
        assert fare.total >= fare.base_fare
    for h in catalog.search_hotels():
        fare = agent.quote("hotel", h, {"check_in": "2024-03-01", "check_out": "2024-03-04"})
        assert fare.total >= fare.base_fare
    for p in catalog.search_packages():
        fare = agent.quote("package", p, {"guests": 2})
        assert fare.total >= fare.base_fare


def test_wrong_item_type_is_rejected(catalog):
    with pytest.raises(TypeError):
        PricingAgent().quote("flight", catalog.find_hotel("1"))


def test_unknown_kind_is_rejected(catalog):
    with pytest.raises(ValueError):
        PricingAgent().quote("visa", catalog.find_package("1"))


def test_zero_count_is_rejected(catalog):
    with pytest.raises(ValueError):
        PricingAgent().quote("package", catalog.find_package("1"), {"guests": 0})


def test_stay_is_valid_requires_checkout_after_checkin():
    agent = PricingAgent()
    assert agent.stay_is_valid("2024-01-15", "2024-01-16")
    assert not agent.stay_is_valid("2024-01-15", "2024-01-15")
    assert not agent.stay_is_valid("2024-01-16", "2024-01-15")
    assert not agent.stay_is_valid(None, "2024-01-15")


def test_default_rooms_follow_the_hotel_price():
    hotel = Hotel(id="9", name="Test Inn", location="Pune", rating=4.0, price_per_night=5000, available_rooms=0)
    deluxe, suite = PricingAgent().rooms_for(hotel)
    assert (deluxe.name, deluxe.price, deluxe.max_occupancy, deluxe.available) == ("Deluxe Room", 5000, 2, 5)
    assert (suite.name, suite.price, suite.max_occupancy, suite.available) == ("Executive Suite", 8000, 4, 3)


def test_visa_application_is_quoted_per_applicant(catalog):
    visa = catalog.find_visa("1")
    fare = PricingAgent().quote("package", visa, {"guests": 2})
    assert (fare.base_fare, fare.taxes, fare.total) == (37000, 1850, 38850)
    assert fare.label == "2 Travelers"


def test_catalog_rooms_replace_the_defaults():
    hotel = Hotel.from_dict({
        "id": "9",
        "name": "Lake Palace",
        "pricePerNight": 20000,
        "rooms": [
            {"id": "royal", "name": "Royal Suite", "bedType": "King Bed", "maxOccupancy": 2, "price": 45000, "available": 1},
        ],
    })
    pricing = PricingAgent()
    assert [r.id for r in pricing.rooms_for(hotel)] == ["royal"]
    fare = pricing.quote("hotel", hotel, {"check_in": "2024-03-01", "check_out": "2024-03-02", "room_id": "royal"})
    assert fare.base_fare == 45000
    with pytest.raises(ValueError):
        pricing.quote("hotel", hotel, {"room_id": "suite"})


def test_fractional_base_is_rounded_to_whole_rupees():
    pkg = Package(id="x", title="Houseboat", price_per_person=4999.5)
    fare = PricingAgent().quote("package", pkg)
    assert (fare.base_fare, fare.taxes) == (5000, 250)
