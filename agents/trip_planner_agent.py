# agents/trip_planner_agent.py
from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from agents.final_output_agent import FinalOutputAgent
from agents.itinerary_planner_agent import ItineraryPlannerAgent, trip_days
from models.itinerary import Itinerary
from models.preferences import TripPreferences
from utils.config import AppConfig, get_config

logger = logging.getLogger(__name__)

GREETING = (
    "Hi! I'm your AI Travel Assistant 🌍 I'll help you plan the perfect trip "
    "based on your preferences. Let's start with a few questions!"
)
FIRST_QUESTION = "Where would you like to go?"
QUICK_QUESTIONS = [
    "Plan a trip to Bali",
    "Weekend getaway near me",
    "Romantic honeymoon",
    "Adventure trip ideas",
    "Family vacation",
    "Budget backpacking",
]
INTERESTS = [
    "🏖️ Beach & Relaxation",
    "🏔️ Adventure & Hiking",
    "🏛️ Culture & History",
    "🍜 Food & Cuisine",
    "📸 Photography",
    "🛍️ Shopping",
    "🎨 Art & Museums",
    "🌃 Nightlife",
]
DONE_OPTION = "✅ Done - Generate Itinerary"
NEED_INTEREST = "Please select at least one interest before continuing."
HANDOFF = "Perfect! I have all the information I need. Let me create your personalized itinerary... 🎨"


class PlannerStep(str, Enum):
    DESTINATION = "destination"
    DURATION = "duration"
    BUDGET = "budget"
    TRAVELERS = "travelers"
    INTERESTS = "interests"
    GENERATING = "generating"
    COMPLETE = "complete"


# step answered -> (preference field, next step, bot prompt, quick replies)
SCRIPT: Dict[PlannerStep, Tuple[str, PlannerStep, str, List[str]]] = {
    PlannerStep.DESTINATION: (
        "destination",
        PlannerStep.DURATION,
        "Great choice! 🎉 How long would you like to stay?",
        ["3-4 days", "5-7 days", "1 week", "10-14 days"],
    ),
    PlannerStep.DURATION: (
        "duration",
        PlannerStep.BUDGET,
        "Perfect! What's your budget range for this trip?",
        ["Budget (₹20k-40k)", "Mid-range (₹40k-80k)", "Luxury (₹80k+)", "Ultra Luxury (₹150k+)"],
    ),
    PlannerStep.BUDGET: (
        "budget",
        PlannerStep.TRAVELERS,
        "Got it! Who will be traveling?",
        ["Solo", "Couple", "Family (3-4)", "Group of Friends", "Family (5+)"],
    ),
    PlannerStep.TRAVELERS: (
        "travelers",
        PlannerStep.INTERESTS,
        "Awesome! 🌟 What are your main interests? (Select multiple, then click Done)",
        INTERESTS + [DONE_OPTION],
    ),
}


@dataclass
class ChatMessage:
    role: str  # "user" | "bot" | "quick-reply"
    content: str
    options: List[str] = field(default_factory=list)


class TripPlannerAgent:
    """
    Scripted travel-assistant chat. Each answer fills one TripPreferences field
    and triggers the next canned prompt; after the interests step the
    itinerary is generated. There is no language understanding: free text is
    stored verbatim.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
        itinerary_agent: Optional[ItineraryPlannerAgent] = None,
        output: Optional[FinalOutputAgent] = None,
    ):
        self.config = config or get_config()
        self.sleep = sleep
        self.itinerary_agent = itinerary_agent or ItineraryPlannerAgent()
        self.output = output or FinalOutputAgent(self.config)
        self.reset()

    def reset(self) -> None:
        self.step = PlannerStep.DESTINATION
        self.prefs = TripPreferences()
        self.itinerary: Optional[Itinerary] = None
        self.is_typing = False
        self.messages: List[ChatMessage] = [
            ChatMessage("bot", GREETING),
            ChatMessage("bot", FIRST_QUESTION, list(QUICK_QUESTIONS)),
        ]

    @property
    def options(self) -> List[str]:
        """Quick replies offered for the current step."""
        if self.step == PlannerStep.DESTINATION:
            return list(QUICK_QUESTIONS)
        for _, nxt, _, replies in SCRIPT.values():
            if nxt == self.step:
                return list(replies)
        return []

    def send(self, text: str) -> List[ChatMessage]:
        """Free-text answer. Returns the bot messages it produced."""
        text = (text or "").strip()
        if not text or self.step in (PlannerStep.GENERATING, PlannerStep.COMPLETE):
            return []
        self.messages.append(ChatMessage("user", text))
        self._typing(self.config.typing_delay)
        if self.step == PlannerStep.INTERESTS:
            # interests are picked from the quick replies only
            return []
        return self._answer(text)

    def quick_reply(self, option: str) -> List[ChatMessage]:
        if self.step in (PlannerStep.GENERATING, PlannerStep.COMPLETE):
            return []

        if self.step == PlannerStep.INTERESTS:
            if option != DONE_OPTION:
                self._toggle_interest(option)
                return []
            self.messages.append(ChatMessage("quick-reply", option))
            self._typing(self.config.typing_delay)
            if not self.prefs.interests:
                return self._say(NEED_INTEREST)
            return self._generate()

        self.messages.append(ChatMessage("quick-reply", option))
        self._typing(self.config.typing_delay)
        answer = option
        if self.step == PlannerStep.DESTINATION:
            answer = option.replace("Plan a trip to ", "").replace("near me", "India")
        return self._answer(answer)

    def itinerary_html(self) -> str:
        if self.itinerary is None:
            raise ValueError("No itinerary has been generated yet")
        return self.output.itinerary_html(self.prefs, self.itinerary)

    def itinerary_filename(self) -> str:
        return self.output.itinerary_filename(self.prefs.destination or "Trip")

    def _answer(self, value: str) -> List[ChatMessage]:
        attr, nxt, prompt, replies = SCRIPT[self.step]
        setattr(self.prefs, attr, value)
        logger.info("planner: %s answered, moving to %s", self.step.value, nxt.value)
        self.step = nxt
        return self._say(prompt, replies)

    def _toggle_interest(self, option: str) -> None:
        if option in self.prefs.interests:
            self.prefs.interests.remove(option)
        else:
            self.prefs.interests.append(option)

    def _generate(self) -> List[ChatMessage]:
        produced = self._say(HANDOFF)
        self.step = PlannerStep.GENERATING
        self._typing(self.config.itinerary_delay)
        self.itinerary = self.itinerary_agent.run(self.prefs)
        self.step = PlannerStep.COMPLETE
        days = trip_days(self.prefs.duration or "")
        logger.info("planner: itinerary ready for %s (%d days)", self.prefs.destination, days)
        summary = (
            f"✨ Your personalized {days}-day itinerary for {self.prefs.destination} is ready! "
            f"I've planned activities based on your interests: {', '.join(self.prefs.interests)}. "
            f"Budget: {self.prefs.budget}. Perfect for {self.prefs.travelers}!"
        )
        return produced + self._say(summary)

    def _say(self, content: str, options: Optional[List[str]] = None) -> List[ChatMessage]:
        msg = ChatMessage("bot", content, list(options or []))
        self.messages.append(msg)
        return [msg]

    def _typing(self, seconds: float) -> None:
        if seconds <= 0:
            return
        self.is_typing = True
        try:
            self.sleep(seconds)
        finally:
            self.is_typing = False
