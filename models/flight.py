# models/flight.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from utils.date_parser import parse_datetime


@dataclass
class Airport:
    code: str
    city: str
    name: str


@dataclass
class FlightSegment:
    origin: str
    destination: str
    departure: datetime
    arrival: datetime
    duration_min: int
    cabin: str
    flight_number: str

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FlightSegment":
        return cls(
            origin=d["from"],
            destination=d["to"],
            departure=parse_datetime(d["departure"]),
            arrival=parse_datetime(d["arrival"]),
            duration_min=int(d.get("duration") or 0),
            cabin=d.get("cabin", "Economy"),
            flight_number=d.get("flightNumber", ""),
        )


@dataclass
class FlightOffer:
    id: str
    airline: str
    flight_number: str
    price: float
    duration_min: int
    cabin: str = "Economy"
    # ordered legs; may be empty
    segments: List[FlightSegment] = field(default_factory=list)
    refundable: bool = False
    changeable: bool = False
    baggage_cabin: str = ""
    baggage_checked: str = ""
    amenities: List[str] = field(default_factory=list)

    @property
    def stops(self) -> int:
        return max(0, len(self.segments) - 1)

    @property
    def first_departure(self) -> Optional[datetime]:
        return self.segments[0].departure if self.segments else None

    @property
    def last_arrival(self) -> Optional[datetime]:
        return self.segments[-1].arrival if self.segments else None

    @property
    def route_label(self) -> str:
        if not self.segments:
            return "Flight"
        return f"{self.segments[0].origin} → {self.segments[-1].destination}"

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FlightOffer":
        baggage = d.get("baggage") or {}
        return cls(
            id=d["id"],
            airline=d["airline"],
            flight_number=d.get("flightNumber", d["id"]),
            price=float(d.get("price") or 0),
            duration_min=int(d.get("duration") or 0),
            cabin=d.get("cabin", "Economy"),
            segments=[FlightSegment.from_dict(s) for s in d.get("segments") or []],
            refundable=bool(d.get("refundable")),
            changeable=bool(d.get("changeable")),
            baggage_cabin=baggage.get("cabin", ""),
            baggage_checked=baggage.get("checked", ""),
            amenities=list(d.get("amenities") or []),
        )
