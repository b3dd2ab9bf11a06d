# models/itinerary.py
from __future__ import annotations
import textwrap
from dataclasses import dataclass, field
from typing import List

SUMMARY_WIDTH = 180


@dataclass
class Activity:
    time: str
    title: str
    description: str
    duration: str = ""

    @property
    def line(self) -> str:
        took = f" ({self.duration})" if self.duration else ""
        return f"{self.time} - {self.title}{took}"


@dataclass
class ItineraryDay:
    day: int
    title: str
    activities: List[Activity] = field(default_factory=list)


@dataclass
class Itinerary:
    destination: str
    days: List[ItineraryDay]

    def __str__(self) -> str:
        lines: List[str] = []
        for d in self.days:
            lines.append(f"**{d.title}**")
            if not d.activities:
                lines.append("  • Free time / explore locally")
            for a in d.activities:
                lines.append(f"  • {a.line}")
                if a.description and a.description.strip().lower() != a.title.lower():
                    lines.append("    " + textwrap.shorten(a.description, SUMMARY_WIDTH, placeholder="..."))
            lines.append("")
        return "\n".join(lines).rstrip()
