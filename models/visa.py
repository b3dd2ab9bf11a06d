# models/visa.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class VisaRequirement:
    id: str
    country: str
    country_code: str
    visa_type: str
    processing_time: str
    validity: str
    price: float
    description: str = ""
    requirements: List[str] = field(default_factory=list)

    @property
    def title(self) -> str:
        kind = self.visa_type if "visa" in self.visa_type.lower() else f"{self.visa_type} Visa".strip()
        return f"{self.country} {kind}".strip()

    @property
    def price_per_person(self) -> float:
        # applications are priced like a package, one fee per applicant
        return self.price
