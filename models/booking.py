# models/booking.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from models.flight import FlightOffer
from models.hotel import Hotel
from models.package import Package
from models.visa import VisaRequirement

BOOKING_KINDS = ("flight", "hotel", "package")
PAYMENT_METHODS = ("upi", "card", "netbanking", "wallet")
PAYMENT_STATUSES = ("pending", "processing", "completed", "failed")

BookableItem = Union[FlightOffer, Hotel, Package, VisaRequirement]


@dataclass
class GuestDetails:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    zip_code: str = ""
    special_requests: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def full_address(self) -> str:
        return f"{self.address}, {self.city} - {self.zip_code}"


@dataclass
class TravelerDetails:
    title: str = "Mr"
    first_name: str = ""
    last_name: str = ""
    date_of_birth: str = ""
    gender: str = "male"
    nationality: str = "IN"
    passport_number: Optional[str] = None

    @property
    def display_name(self) -> str:
        return f"{self.title} {self.first_name} {self.last_name}".strip()


@dataclass
class ContactDetails:
    email: str = ""
    phone: str = ""
    country_code: str = "+91"
    receive_updates: bool = True


@dataclass
class FareBreakdown:
    base_fare: int
    taxes: int
    label: str = ""
    seat_selection: int = 0
    baggage: int = 0
    discount: int = 0

    @property
    def total(self) -> int:
        return self.base_fare + self.taxes + self.seat_selection + self.baggage - self.discount


@dataclass
class BookingSession:
    """The selection currently being booked: what, which item, and the search context."""
    kind: str
    item: BookableItem
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class BookingData:
    booking_id: str
    kind: str
    item: BookableItem
    guest: GuestDetails
    fare: FareBreakdown
    payment_method: str
    payment_status: str = "pending"
    travelers: List[TravelerDetails] = field(default_factory=list)
    contact: Optional[ContactDetails] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=datetime.now)
