# agents/pricing_agent.py
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from models.booking import BOOKING_KINDS, BookableItem, FareBreakdown
from models.flight import FlightOffer
from models.hotel import Hotel, HotelRoom
from models.package import Package
from models.visa import VisaRequirement
from utils.date_parser import DateLike, nights_between, parse_datetime
from utils.money import round_half_up

logger = logging.getLogger(__name__)

TAX_RATES = {"flight": 0.12, "hotel": 0.12, "package": 0.05}
SUITE_MULTIPLIER = 1.6


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


class PricingAgent:
    """
    Turns a selected item plus its search context into a fare breakdown.

    metadata keys by kind:
    - flight:  passengers (default 1)
    - hotel:   check_in, check_out, rooms (default 1), room_id (optional)
    - package: guests (default 1); visa applications are quoted as packages
    """

    def quote(self, kind: str, item: BookableItem, metadata: Optional[Dict[str, Any]] = None) -> FareBreakdown:
        if kind not in BOOKING_KINDS:
            raise ValueError(f"Unknown booking kind: {kind!r}")
        meta = metadata or {}

        if kind == "flight":
            base, label = self._flight_base(item, meta)
        elif kind == "hotel":
            base, label = self._hotel_base(item, meta)
        else:
            base, label = self._package_base(item, meta)

        base = round_half_up(base)
        taxes = round_half_up(base * TAX_RATES[kind])
        fare = FareBreakdown(base_fare=base, taxes=taxes, label=label)
        logger.debug("quote %s: base=%d taxes=%d total=%d", kind, base, taxes, fare.total)
        return fare

    def stay_is_valid(self, check_in: DateLike, check_out: DateLike) -> bool:
        start = parse_datetime(check_in)
        end = parse_datetime(check_out)
        return bool(start and end and end > start)

    def rooms_for(self, hotel: Hotel) -> List[HotelRoom]:
        """The hotel's own room list, or the two standard rooms every listing offers."""
        if hotel.rooms:
            return list(hotel.rooms)
        price = hotel.price_per_night
        return [
            HotelRoom(
                id="deluxe",
                name="Deluxe Room",
                size="32 sqm",
                bed_type="King Bed",
                max_occupancy=2,
                price=price,
                available=hotel.available_rooms or 5,
                amenities=["Free WiFi", "Air Conditioning", "Mini Bar", "City View"],
            ),
            HotelRoom(
                id="suite",
                name="Executive Suite",
                size="55 sqm",
                bed_type="King Bed + Sofa Bed",
                max_occupancy=4,
                price=round_half_up(price * SUITE_MULTIPLIER),
                available=3,
                amenities=["Free WiFi", "Living Area", "Bathtub", "Sea View", "Lounge Access"],
            ),
        ]

    def _flight_base(self, item: BookableItem, meta: Dict[str, Any]):
        if not isinstance(item, FlightOffer):
            raise TypeError("flight quotes expect a FlightOffer")
        passengers = self._count(meta.get("passengers"), 1)
        return item.price * passengers, "Flight Fare"

    def _hotel_base(self, item: BookableItem, meta: Dict[str, Any]):
        if not isinstance(item, Hotel):
            raise TypeError("hotel quotes expect a Hotel")
        nights = nights_between(meta.get("check_in"), meta.get("check_out"))
        rooms = self._count(meta.get("rooms"), 1)

        nightly = item.price_per_night
        room_id = meta.get("room_id")
        if room_id:
            room = next((r for r in self.rooms_for(item) if r.id == room_id), None)
            if room is None:
                raise ValueError(f"Hotel {item.id} has no room {room_id!r}")
            nightly = room.price

        label = f"{_plural(nights, 'Night')} × {_plural(rooms, 'Room')}"
        return nightly * nights * rooms, label

    def _package_base(self, item: BookableItem, meta: Dict[str, Any]):
        if not isinstance(item, (Package, VisaRequirement)):
            raise TypeError("package quotes expect a Package or VisaRequirement")
        guests = self._count(meta.get("guests"), 1)
        return item.price_per_person * guests, _plural(guests, "Traveler")

    @staticmethod
    def _count(value: Any, default: int) -> int:
        if value in (None, ""):
            return default
        n = int(value)
        if n < 1:
            raise ValueError("counts must be at least 1")
        return n
