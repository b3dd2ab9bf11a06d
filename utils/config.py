# utils/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv


@dataclass(frozen=True)
class AppConfig:
    search_delay: float = 1.5
    payment_delay: float = 2.5
    typing_delay: float = 1.0
    itinerary_delay: float = 3.0
    brand_name: str = "Suvidha Escapes"
    brand_tagline: str = "Your Journey, Our Priority"
    support_email: str = "support@suvidhaescapes.com"
    support_phone: str = "+91 98765 43210"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Reads settings from the process environment (after loading .env).
        Unset variables keep their defaults.
        """
        load_dotenv(find_dotenv(usecwd=True))
        defaults = cls()
        return cls(
            search_delay=_delay("SEARCH_DELAY_SECONDS", defaults.search_delay),
            payment_delay=_delay("PAYMENT_DELAY_SECONDS", defaults.payment_delay),
            typing_delay=_delay("TYPING_DELAY_SECONDS", defaults.typing_delay),
            itinerary_delay=_delay("ITINERARY_DELAY_SECONDS", defaults.itinerary_delay),
            brand_name=os.getenv("BRAND_NAME") or defaults.brand_name,
            brand_tagline=os.getenv("BRAND_TAGLINE") or defaults.brand_tagline,
            support_email=os.getenv("SUPPORT_EMAIL") or defaults.support_email,
            support_phone=os.getenv("SUPPORT_PHONE") or defaults.support_phone,
            log_level=(os.getenv("LOG_LEVEL") or defaults.log_level).upper(),
        )

    @classmethod
    def instant(cls) -> "AppConfig":
        """Same settings with every simulated delay switched off."""
        return cls(search_delay=0.0, payment_delay=0.0, typing_delay=0.0, itinerary_delay=0.0)


def _delay(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


@lru_cache()
def get_config() -> AppConfig:
    return AppConfig.from_env()
