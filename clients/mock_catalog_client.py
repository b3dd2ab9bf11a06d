# clients/mock_catalog_client.py
from __future__ import annotations
import copy
import logging
import time
from typing import Any, Callable, Dict, List, Optional

from clients import catalog_data
from models.flight import FlightOffer
from models.hotel import Hotel
from models.package import Package
from models.visa import VisaRequirement
from utils.config import AppConfig, get_config

logger = logging.getLogger(__name__)


class MockCatalogClient:
    """
    Stand-in for the travel inventory API. Every fetch waits the configured
    search delay once, then hands back fresh model objects built from the
    static catalog, so callers can mutate results without touching the data.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
        data: Any = catalog_data,
    ):
        self.config = config or get_config()
        self.sleep = sleep
        self.data = data

    def flights(self) -> List[FlightOffer]:
        return [FlightOffer.from_dict(d) for d in self._get("flights", self.data.FLIGHTS)]

    def hotels(self) -> List[Hotel]:
        return [Hotel.from_dict(d) for d in self._get("hotels", self.data.HOTELS)]

    def packages(self) -> List[Package]:
        return [Package.from_dict(d) for d in self._get("packages", self.data.PACKAGES)]

    def visas(self) -> List[VisaRequirement]:
        return [
            VisaRequirement(
                id=str(d["id"]),
                country=d["country"],
                country_code=d.get("countryCode", ""),
                visa_type=d.get("visaType", ""),
                processing_time=d.get("processingTime", ""),
                validity=d.get("validity", ""),
                price=float(d.get("price") or 0),
                description=d.get("description", ""),
                requirements=list(d.get("requirements") or []),
            )
            for d in self._get("visas", self.data.VISAS)
        ]

    def airlines(self) -> List[str]:
        # filter options come from reference data, not a search
        return sorted({d["airline"] for d in self.data.FLIGHTS})

    def _get(self, kind: str, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        delay = self.config.search_delay
        if delay > 0:
            logger.debug("simulating %s lookup (%.1fs)", kind, delay)
            self.sleep(delay)
        return copy.deepcopy(records)
