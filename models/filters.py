# models/filters.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

FLIGHT_PRICE_RANGE = (0.0, 50000.0)
FLIGHT_DURATION_HOURS = (1.0, 24.0)
HOTEL_PRICE_RANGE = (0.0, 25000.0)

STOP_OPTIONS = ("non-stop", "1-stop", "2-plus")
TIME_SLOTS = {
    "morning": "6AM - 12PM",
    "afternoon": "12PM - 6PM",
    "evening": "6PM - 12AM",
    "night": "12AM - 6AM",
}
FLIGHT_SORT_KEYS = ("price", "duration", "departure")
HOTEL_SORT_KEYS = ("price", "rating", "distance")
PACKAGE_THEMES = [
    "All",
    "Beach",
    "Adventure",
    "Heritage",
    "Wellness",
    "Mountains",
    "Wildlife",
    "Honeymoon",
    "Family",
]


@dataclass
class FlightFilters:
    price_range: Tuple[float, float] = FLIGHT_PRICE_RANGE
    stops: List[str] = field(default_factory=list)
    airlines: List[str] = field(default_factory=list)
    departure_slots: List[str] = field(default_factory=list)
    arrival_slots: List[str] = field(default_factory=list)
    duration_hours: Tuple[float, float] = FLIGHT_DURATION_HOURS
    cabins: List[str] = field(default_factory=list)
    # airport codes; None matches any route
    origin: Optional[str] = None
    destination: Optional[str] = None

    def has_active_filters(self) -> bool:
        return bool(
            self.stops
            or self.airlines
            or self.departure_slots
            or self.arrival_slots
            or self.cabins
            or self.price_range[0] > FLIGHT_PRICE_RANGE[0]
            or self.price_range[1] < FLIGHT_PRICE_RANGE[1]
        )


@dataclass
class HotelFilters:
    price_range: Tuple[float, float] = HOTEL_PRICE_RANGE
    stars: List[int] = field(default_factory=list)
    query: str = ""
