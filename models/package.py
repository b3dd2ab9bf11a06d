# models/package.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class PackageDay:
    day: int
    title: str
    description: str = ""
    activities: List[str] = field(default_factory=list)
    meals: List[str] = field(default_factory=list)
    accommodation: str = ""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PackageDay":
        # two itinerary shapes exist in the catalog: {"desc": ...} and {"description": ...}
        return cls(
            day=int(d["day"]),
            title=d.get("title", ""),
            description=d.get("description") or d.get("desc") or "",
            activities=list(d.get("activities") or []),
            meals=list(d.get("meals") or []),
            accommodation=d.get("accommodation", ""),
        )


@dataclass
class Package:
    id: str
    title: str
    # canonical per-person price; the legacy `price` key is folded in by from_dict
    price_per_person: float
    destination: str = ""
    days: int = 0
    nights: int = 0
    rating: float = 0.0
    review_count: int = 0
    themes: List[str] = field(default_factory=list)
    inclusions: List[str] = field(default_factory=list)
    highlights: List[str] = field(default_factory=list)
    itinerary: List[PackageDay] = field(default_factory=list)

    @property
    def duration_label(self) -> str:
        if self.days and self.nights:
            return f"{self.days} Days / {self.nights} Nights"
        return ""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Package":
        duration = d.get("duration") or {}
        return cls(
            id=str(d["id"]),
            title=d["title"],
            price_per_person=float(d.get("price") or d.get("pricePerPerson") or 0),
            destination=d.get("destination", ""),
            days=int(duration.get("days") or 0),
            nights=int(duration.get("nights") or 0),
            rating=float(d.get("rating") or 0),
            review_count=int(d.get("reviewCount") or 0),
            themes=list(d.get("theme") or []),
            inclusions=list(d.get("inclusions") or []),
            highlights=list(d.get("highlights") or []),
            itinerary=[PackageDay.from_dict(x) for x in d.get("itinerary") or []],
        )
