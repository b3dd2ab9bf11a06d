# agents/catalog_search_agent.py
from __future__ import annotations
import logging
from datetime import datetime
from typing import List, Optional

from clients.mock_catalog_client import MockCatalogClient
from models.filters import FlightFilters, HotelFilters
from models.flight import FlightOffer
from models.hotel import Hotel
from models.package import Package
from models.visa import VisaRequirement
from utils.airport_codes import to_airport_code
from utils.date_parser import time_slot

logger = logging.getLogger(__name__)


class CatalogSearchAgent:
    """
    Filters and sorts the mock catalog for the listing pages.
    One catalog fetch (and so one simulated delay) per search call.
    """

    def __init__(self, client: Optional[MockCatalogClient] = None):
        self.client = client or MockCatalogClient()

    def search_flights(self, filters: Optional[FlightFilters] = None, sort_by: str = "price") -> List[FlightOffer]:
        filters = filters or FlightFilters()
        origin = to_airport_code(filters.origin) if filters.origin else None
        destination = to_airport_code(filters.destination) if filters.destination else None

        results = [
            f for f in self.client.flights()
            if self._flight_matches(f, filters, origin, destination)
        ]
        results = self.sort_flights(results, sort_by)
        logger.info("flight search: %d result(s), sort=%s", len(results), sort_by)
        return results

    def search_hotels(self, filters: Optional[HotelFilters] = None, sort_by: str = "price") -> List[Hotel]:
        filters = filters or HotelFilters()
        lo, hi = filters.price_range
        query = filters.query.strip().lower()

        results = []
        for h in self.client.hotels():
            if not lo <= h.price_per_night <= hi:
                continue
            if filters.stars and h.stars not in filters.stars:
                continue
            if query and query not in h.name.lower() and query not in h.location.lower():
                continue
            results.append(h)

        results = self.sort_hotels(results, sort_by)
        logger.info("hotel search: %d result(s), sort=%s", len(results), sort_by)
        return results

    def search_packages(self, theme: str = "All") -> List[Package]:
        packages = self.client.packages()
        if theme and theme != "All":
            packages = [p for p in packages if theme in p.themes]
        logger.info("package search: %d result(s), theme=%s", len(packages), theme)
        return packages

    def search_visas(self, country: str = "") -> List[VisaRequirement]:
        needle = (country or "").strip().lower()
        visas = [v for v in self.client.visas() if needle in v.country.lower()]
        logger.info("visa search: %d result(s) for %r", len(visas), country)
        return visas

    def find_flight(self, flight_id: str) -> Optional[FlightOffer]:
        return next((f for f in self.client.flights() if f.id == flight_id), None)

    def find_hotel(self, hotel_id: str) -> Optional[Hotel]:
        return next((h for h in self.client.hotels() if h.id == str(hotel_id)), None)

    def find_package(self, package_id: str) -> Optional[Package]:
        return next((p for p in self.client.packages() if p.id == str(package_id)), None)

    def find_visa(self, visa_id: str) -> Optional[VisaRequirement]:
        return next((v for v in self.client.visas() if v.id == str(visa_id)), None)

    def airlines(self) -> List[str]:
        return self.client.airlines()

    @staticmethod
    def sort_flights(flights: List[FlightOffer], sort_by: str) -> List[FlightOffer]:
        if sort_by == "price":
            return sorted(flights, key=lambda f: f.price)
        if sort_by == "duration":
            return sorted(flights, key=lambda f: f.duration_min)
        if sort_by == "departure":
            # offers without segments go last
            return sorted(
                flights,
                key=lambda f: (f.first_departure is None, f.first_departure or datetime.min),
            )
        return list(flights)

    @staticmethod
    def sort_hotels(hotels: List[Hotel], sort_by: str) -> List[Hotel]:
        if sort_by == "price":
            return sorted(hotels, key=lambda h: h.price_per_night)
        if sort_by == "rating":
            return sorted(hotels, key=lambda h: h.rating, reverse=True)
        # "distance" keeps catalog order; distances are free text
        return list(hotels)

    def _flight_matches(
        self,
        f: FlightOffer,
        filters: FlightFilters,
        origin: Optional[str],
        destination: Optional[str],
    ) -> bool:
        lo, hi = filters.price_range
        if not lo <= f.price <= hi:
            return False

        if filters.stops and not any(self._stops_match(f.stops, s) for s in filters.stops):
            return False

        airline = f.airline.lower()
        if filters.airlines and not any(a.lower() in airline for a in filters.airlines):
            return False

        cabin = f.cabin.lower()
        if filters.cabins and not any(c.lower() in cabin for c in filters.cabins):
            return False

        hours = f.duration_min / 60
        min_h, max_h = filters.duration_hours
        if not min_h <= hours <= max_h:
            return False

        if filters.departure_slots and time_slot(f.first_departure) not in filters.departure_slots:
            return False
        if filters.arrival_slots and time_slot(f.last_arrival) not in filters.arrival_slots:
            return False

        if origin and (not f.segments or f.segments[0].origin != origin):
            return False
        if destination and (not f.segments or f.segments[-1].destination != destination):
            return False

        return True

    @staticmethod
    def _stops_match(stops: int, option: str) -> bool:
        if option == "non-stop":
            return stops == 0
        if option == "1-stop":
            return stops == 1
        if option == "2-plus":
            return stops >= 2
        return False
