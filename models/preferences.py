# models/preferences.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class TripPreferences:
    """Answers collected by the trip planner chat, kept as the user typed them."""
    destination: Optional[str] = None
    duration: Optional[str] = None
    budget: Optional[str] = None
    travelers: Optional[str] = None
    interests: List[str] = field(default_factory=list)

    def has_interest(self, keyword: str) -> bool:
        return any(keyword.lower() in i.lower() for i in self.interests)
