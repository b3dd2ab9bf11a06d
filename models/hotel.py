# models/hotel.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class HotelRoom:
    id: str
    name: str
    size: str
    bed_type: str
    max_occupancy: int
    price: float
    available: int
    amenities: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "HotelRoom":
        return cls(
            id=str(d["id"]),
            name=d.get("name", ""),
            size=d.get("size", ""),
            bed_type=d.get("bedType", ""),
            max_occupancy=int(d.get("maxOccupancy") or 0),
            price=float(d.get("price") or 0),
            available=int(d.get("available") or 0),
            amenities=list(d.get("amenities") or []),
        )


@dataclass
class Hotel:
    id: str
    name: str
    location: str
    rating: float
    # canonical nightly rate; the legacy `price` key is folded in by from_dict
    price_per_night: float
    city: str = ""
    distance: str = ""
    stars: int = 0
    review_count: int = 0
    review_score: str = ""
    original_price: Optional[float] = None
    discount: Optional[int] = None
    available_rooms: int = 0
    check_in_time: str = ""
    check_out_time: str = ""
    amenities: List[str] = field(default_factory=list)
    description: str = ""
    rooms: List[HotelRoom] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Hotel":
        # amenities come either as plain labels or as {"label": ...} objects
        amenities = [
            a.get("label", "") if isinstance(a, dict) else str(a)
            for a in d.get("amenities") or []
        ]
        return cls(
            id=str(d["id"]),
            name=d["name"],
            location=d.get("location", ""),
            rating=float(d.get("rating") or 0),
            price_per_night=float(d.get("price") or d.get("pricePerNight") or 0),
            city=d.get("city", ""),
            distance=d.get("distance", ""),
            stars=int(d.get("stars") or 0),
            review_count=int(d.get("reviewCount") or d.get("reviews") or 0),
            review_score=d.get("reviewScore", ""),
            original_price=d.get("originalPrice"),
            discount=d.get("discount"),
            available_rooms=int(d.get("availableRooms") or 0),
            check_in_time=d.get("checkIn", ""),
            check_out_time=d.get("checkOut", ""),
            amenities=amenities,
            description=d.get("description", ""),
            rooms=[HotelRoom.from_dict(r) for r in d.get("rooms") or []],
        )
