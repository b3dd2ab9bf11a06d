# agents/travel_agent.py
from __future__ import annotations
import logging
from typing import Callable, Optional

from agents.booking_flow_agent import BookingFlowAgent
from agents.catalog_search_agent import CatalogSearchAgent
from agents.final_output_agent import FinalOutputAgent
from agents.guest_details_agent import GuestDetailsAgent
from agents.payment_agent import PaymentAgent
from agents.pricing_agent import PricingAgent
from agents.trip_planner_agent import TripPlannerAgent
from clients.mock_catalog_client import MockCatalogClient
from models.booking import BookingSession
from models.flight import FlightOffer
from models.hotel import Hotel
from models.package import Package
from models.visa import VisaRequirement
from utils.config import AppConfig, get_config
from utils.date_parser import DateLike, parse_date

logger = logging.getLogger(__name__)


class TravelAgent:
    """
    Per-user orchestrator: owns the catalog, pricing, payment and output agents,
    and holds the one booking currently in progress. Starting a new booking
    replaces the previous one; reset() drops it entirely.
    """

    def __init__(self, config: Optional[AppConfig] = None, sleep: Optional[Callable[[float], None]] = None):
        self.config = config or get_config()
        kwargs = {"sleep": sleep} if sleep else {}

        self.catalog = CatalogSearchAgent(MockCatalogClient(self.config, **kwargs))
        self.pricing = PricingAgent()
        self.payment = PaymentAgent(self.config, **kwargs)
        self.guest_agent = GuestDetailsAgent()
        self.output = FinalOutputAgent(self.config)
        self.planner = TripPlannerAgent(config=self.config, output=self.output, **kwargs)

        self.current: Optional[BookingSession] = None
        self.flow: Optional[BookingFlowAgent] = None

    def book_flight(self, flight: FlightOffer, passengers: int = 1) -> BookingFlowAgent:
        return self._start(BookingSession("flight", flight, {"passengers": passengers}))

    def book_hotel(
        self,
        hotel: Hotel,
        check_in: DateLike = None,
        check_out: DateLike = None,
        rooms: int = 1,
        guests: int = 2,
        room_id: Optional[str] = None,
    ) -> BookingFlowAgent:
        metadata = {
            "check_in": parse_date(check_in),
            "check_out": parse_date(check_out),
            "rooms": rooms,
            "guests": guests,
        }
        if room_id:
            metadata["room_id"] = room_id
        return self._start(BookingSession("hotel", hotel, metadata))

    def book_package(self, package: Package, guests: int = 2) -> BookingFlowAgent:
        return self._start(BookingSession("package", package, {"guests": guests}))

    def book_visa(self, visa: VisaRequirement, applicants: int = 1) -> BookingFlowAgent:
        """Visa applications go through the package wizard, one fee per applicant."""
        return self._start(BookingSession("package", visa, {"guests": applicants}))

    def reset(self) -> None:
        if self.current:
            logger.info("leaving %s booking", self.current.kind)
        self.current = None
        self.flow = None

    def _start(self, session: BookingSession) -> BookingFlowAgent:
        self.current = session
        self.flow = BookingFlowAgent(
            session,
            pricing=self.pricing,
            payment=self.payment,
            guest_agent=self.guest_agent,
            output=self.output,
        )
        logger.info("started %s booking, total %d", session.kind, self.flow.fare.total)
        return self.flow
