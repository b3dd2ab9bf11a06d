# main.py
from __future__ import annotations
import logging

from agents.travel_agent import TravelAgent
from models.booking import GuestDetails
from models.filters import FlightFilters
from utils.config import get_config

if __name__ == "__main__":
    cfg = get_config()
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    agent = TravelAgent(cfg)
    flights = agent.catalog.search_flights(FlightFilters(origin="Delhi", destination="Mumbai"), sort_by="departure")
    flow = agent.book_flight(flights[0], passengers=1)

    errors = flow.submit_details(
        GuestDetails(
            first_name="Aarav",
            last_name="Sharma",
            email="aarav.sharma@example.com",
            phone="9876543210",
            address="12 MG Road",
            city="Pune",
            zip_code="411001",
        )
    )
    if errors:
        raise SystemExit(f"Guest details rejected: {errors}")

    booking = flow.pay("upi")
    print(agent.output.summary_markdown(booking))
    print()
    print(f"Confirmation file: {flow.confirmation_filename()}")
