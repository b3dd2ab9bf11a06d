# agents/booking_flow_agent.py
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from agents.final_output_agent import FinalOutputAgent
from agents.guest_details_agent import GuestDetailsAgent
from agents.payment_agent import PaymentAgent
from agents.pricing_agent import PricingAgent
from models.booking import (
    BookingData,
    BookingSession,
    ContactDetails,
    FareBreakdown,
    GuestDetails,
    TravelerDetails,
)

logger = logging.getLogger(__name__)

STEPS = ("details", "payment", "confirmation")
TRANSITIONS = {
    "details": {"payment"},
    "payment": {"confirmation", "details"},
    "confirmation": set(),
}


class BookingStepError(ValueError):
    """Raised on a wizard move that the current step does not allow."""


class BookingFlowAgent:
    """
    Three-step booking wizard: details -> payment -> confirmation.
    The fare is quoted once when the wizard opens and is not recomputed.
    """

    def __init__(
        self,
        session: BookingSession,
        pricing: Optional[PricingAgent] = None,
        payment: Optional[PaymentAgent] = None,
        guest_agent: Optional[GuestDetailsAgent] = None,
        output: Optional[FinalOutputAgent] = None,
    ):
        self.session = session
        self.pricing = pricing or PricingAgent()
        self.payment = payment or PaymentAgent()
        self.guest_agent = guest_agent or GuestDetailsAgent()
        self.output = output or FinalOutputAgent()

        self.fare: FareBreakdown = self.pricing.quote(session.kind, session.item, session.metadata)
        self.step = "details"
        self.guest = GuestDetails()
        self.travelers: List[TravelerDetails] = []
        self.contact: Optional[ContactDetails] = None
        self.errors: Dict[str, str] = {}
        self.booking: Optional[BookingData] = None
        self.is_processing = False

    @property
    def kind(self) -> str:
        return self.session.kind

    @property
    def traveler_count(self) -> int:
        """Flights carry one traveler form per passenger; stays and packages none."""
        if self.kind != "flight":
            return 0
        return int(self.session.metadata.get("passengers") or 1)

    def can_move(self, to: str) -> bool:
        return to in TRANSITIONS.get(self.step, set())

    def _move(self, to: str) -> None:
        if not self.can_move(to):
            raise BookingStepError(f"Cannot go from {self.step!r} to {to!r}")
        logger.info("%s booking: %s -> %s", self.kind, self.step, to)
        self.step = to

    def submit_details(
        self,
        guest: Any,
        travelers: Optional[List[Any]] = None,
        contact: Optional[ContactDetails] = None,
    ) -> Dict[str, str]:
        """
        Stores the form and moves on to payment when it validates.
        Returns the field errors; an empty dict means the wizard advanced.
        """
        if self.step != "details":
            raise BookingStepError(f"Details can only be submitted on the details step, not {self.step!r}")

        self.guest = self.guest_agent.normalize(guest)
        self.travelers = [self.guest_agent.normalize_traveler(t) for t in travelers or []]
        self.contact = contact
        self.errors = self._validate()
        if self.errors:
            logger.info("%s booking: details rejected (%s)", self.kind, ", ".join(sorted(self.errors)))
            return self.errors

        self._move("payment")
        return {}

    def back(self) -> None:
        if self.step != "payment":
            raise BookingStepError(f"Back is only available on the payment step, not {self.step!r}")
        self._move("details")

    def pay(self, method: str) -> BookingData:
        if not self.can_move("confirmation"):
            raise BookingStepError(f"Payment is not possible on the {self.step!r} step")
        # details may have been edited after going back
        if self._validate():
            raise BookingStepError("Guest details are incomplete")

        self.is_processing = True
        try:
            result = self.payment.charge(self.kind, self.fare.total, method)
        finally:
            self.is_processing = False

        self.booking = BookingData(
            booking_id=result.booking_id,
            kind=self.kind,
            item=self.session.item,
            guest=self.guest,
            fare=self.fare,
            payment_method=result.method,
            payment_status=result.status,
            travelers=list(self.travelers),
            contact=self.contact,
            metadata=dict(self.session.metadata),
        )
        self._move("confirmation")
        return self.booking

    def _validate(self) -> Dict[str, str]:
        errors = self.guest_agent.validate_all(self.guest, self.travelers, self.contact)
        # traveler forms are optional, but when sent there must be one per passenger
        if self.kind == "flight" and self.travelers and len(self.travelers) != self.traveler_count:
            errors["travelers"] = f"Please add details for all {self.traveler_count} passenger(s)"
        return errors

    @property
    def booking_id(self) -> Optional[str]:
        return self.booking.booking_id if self.booking else None

    def confirmation_html(self) -> str:
        if self.step != "confirmation" or self.booking is None:
            raise BookingStepError("The confirmation is only available after payment")
        return self.output.confirmation_html(self.booking)

    def confirmation_filename(self) -> str:
        if self.booking is None:
            raise BookingStepError("No booking reference yet")
        return self.output.confirmation_filename(self.booking.booking_id)
