# agents/itinerary_planner_agent.py
from __future__ import annotations

import re
from typing import List

from models.itinerary import Activity, Itinerary, ItineraryDay
from models.preferences import TripPreferences

DEFAULT_DAYS = 5
MAX_PLANNED_DAYS = 7

ARRIVAL_DAY = [
    Activity("10:00 AM", "Airport Pickup & Hotel Check-in", "Private transfer to your hotel. Rest and freshen up.", "2 hours"),
    Activity("1:00 PM", "Welcome Lunch", "Try authentic local cuisine at a recommended restaurant.", "1.5 hours"),
    Activity("3:00 PM", "City Orientation Walk", "Explore nearby markets and get your bearings.", "2 hours"),
    Activity("7:00 PM", "Sunset View & Dinner", "Watch the sunset from a scenic viewpoint.", "2 hours"),
]
BEACH_DAY = [
    Activity("8:00 AM", "Beach Morning", "Relax on pristine beaches, swimming and sunbathing.", "3 hours"),
    Activity("12:00 PM", "Beachside Lunch", "Fresh seafood and tropical drinks by the shore.", "1 hour"),
    Activity("2:00 PM", "Water Sports Adventure", "Snorkeling, kayaking, or paddleboarding.", "2 hours"),
    Activity("6:00 PM", "Beach Sunset & Bonfire", "Watch the sunset and enjoy a beach bonfire.", "2 hours"),
]
CULTURE_DAY = [
    Activity("9:00 AM", "Temple & Heritage Tour", "Visit ancient temples and historical landmarks.", "3 hours"),
    Activity("1:00 PM", "Traditional Cooking Class", "Learn to cook authentic local dishes.", "2 hours"),
    Activity("4:00 PM", "Local Market Shopping", "Browse handicrafts and souvenirs.", "2 hours"),
    Activity("7:00 PM", "Cultural Dance Performance", "Traditional music and dance show with dinner.", "2 hours"),
]
ADVENTURE_DAY = [
    Activity("6:00 AM", "Mountain Sunrise Trek", "Hike to a scenic viewpoint for sunrise.", "4 hours"),
    Activity("11:00 AM", "Adventure Lunch", "Picnic lunch with panoramic views.", "1 hour"),
    Activity("1:00 PM", "Zip-lining & Rafting", "Thrilling adventure activities in nature.", "3 hours"),
    Activity("6:00 PM", "Relaxation & Spa", "Unwind with a traditional massage.", "2 hours"),
]
FREE_DAY = [
    Activity("9:00 AM", "Morning Exploration", "Discover hidden gems and local favorites.", "3 hours"),
    Activity("12:30 PM", "Lunch Break", "Enjoy local specialties at a popular restaurant.", "1.5 hours"),
    Activity("2:30 PM", "Afternoon Activities", "Continue exploring based on your interests.", "3 hours"),
    Activity("7:00 PM", "Evening Leisure", "Dinner and free time to relax.", "2 hours"),
]


def trip_days(duration: str) -> int:
    """
    Number of days in a duration answer: '3-4 days' -> 3, '1 week' -> 7,
    '2 weeks' -> 14. Anything without a leading number falls back to 5.
    """
    m = re.match(r"\s*(\d+)", duration or "")
    if not m:
        return DEFAULT_DAYS
    n = int(m.group(1))
    if n < 1:
        return DEFAULT_DAYS
    if re.search(r"\bweeks?\b", duration, re.IGNORECASE):
        n *= 7
    return n


class ItineraryPlannerAgent:
    """
    Builds the canned day-by-day plan for the trip planner chat.
    At most a week is planned even for longer trips.
    """

    def run(self, prefs: TripPreferences) -> Itinerary:
        destination = prefs.destination or "Your Destination"
        days = min(trip_days(prefs.duration or ""), MAX_PLANNED_DAYS)
        plan: List[ItineraryDay] = []
        for i in range(1, days + 1):
            plan.append(
                ItineraryDay(
                    day=i,
                    title=f"Day {i} - {self._day_title(i, destination)}",
                    activities=self._activities(i, prefs),
                )
            )
        return Itinerary(destination=destination, days=plan)

    def _day_title(self, day: int, destination: str) -> str:
        titles = [
            f"Arrival & {destination} Welcome",
            "Exploring the City",
            "Cultural Immersion",
            "Adventure Day",
            "Hidden Gems Tour",
            "Relaxation & Beach Time",
            "Departure & Farewell",
        ]
        if 1 <= day <= len(titles):
            return titles[day - 1]
        return f"Exploring {destination}"

    def _activities(self, day: int, prefs: TripPreferences) -> List[Activity]:
        if day == 1:
            chosen = ARRIVAL_DAY
        elif day == 2 and prefs.has_interest("beach"):
            chosen = BEACH_DAY
        elif day == 3 and prefs.has_interest("culture"):
            chosen = CULTURE_DAY
        elif day == 4 and prefs.has_interest("adventure"):
            chosen = ADVENTURE_DAY
        else:
            chosen = FREE_DAY
        # templates are shared module constants
        return [Activity(a.time, a.title, a.description, a.duration) for a in chosen]
