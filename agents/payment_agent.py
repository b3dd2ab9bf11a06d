# agents/payment_agent.py
from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from models.booking import PAYMENT_METHODS
from utils.config import AppConfig, get_config

logger = logging.getLogger(__name__)

REF_PREFIXES = {"flight": "FLT", "hotel": "HTL", "package": "PKG"}
_BASE36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def to_base36(n: int) -> str:
    if n < 0:
        raise ValueError("to_base36 expects a non-negative integer")
    if n == 0:
        return "0"
    out = []
    while n:
        n, rem = divmod(n, 36)
        out.append(_BASE36[rem])
    return "".join(reversed(out))


@dataclass
class PaymentResult:
    booking_id: str
    status: str
    method: str


class PaymentAgent:
    """
    Mock payment gateway: waits the configured processing time and always succeeds.
    No money moves and no card data is kept.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock_ms: Optional[Callable[[], int]] = None,
    ):
        self.config = config or get_config()
        self.sleep = sleep
        self.clock_ms = clock_ms or (lambda: int(time.time() * 1000))
        self._last_ms = -1

    def booking_reference(self, kind: str) -> str:
        if kind not in REF_PREFIXES:
            raise ValueError(f"Unknown booking kind: {kind!r}")
        ms = self.clock_ms()
        # same millisecond twice in this process: move forward so refs differ
        if ms <= self._last_ms:
            ms = self._last_ms + 1
        self._last_ms = ms
        return f"SE-{REF_PREFIXES[kind]}-{to_base36(ms)}"

    def charge(self, kind: str, amount: int, method: str) -> PaymentResult:
        if method not in PAYMENT_METHODS:
            raise ValueError(f"Unsupported payment method: {method!r}")
        logger.info("processing %s payment of %d via %s", kind, amount, method)
        if self.config.payment_delay > 0:
            self.sleep(self.config.payment_delay)
        ref = self.booking_reference(kind)
        logger.info("payment completed, booking reference %s", ref)
        return PaymentResult(booking_id=ref, status="completed", method=method)
