import re

import pytest

from agents.payment_agent import PaymentAgent, to_base36
from utils.config import AppConfig


def test_base36():
    assert to_base36(0) == "0"
    assert to_base36(35) == "Z"
    assert to_base36(36) == "10"
    assert to_base36(46655) == "ZZZ"
    assert to_base36(46656) == "1000"
    with pytest.raises(ValueError):
        to_base36(-1)


def test_reference_uses_kind_prefix_and_clock():
    agent = PaymentAgent(AppConfig.instant(), clock_ms=lambda: 1000)
    assert agent.booking_reference("hotel") == "SE-HTL-RS"


def test_same_millisecond_gives_distinct_references():
    agent = PaymentAgent(AppConfig.instant(), clock_ms=lambda: 1000)
    first = agent.booking_reference("package")
    second = agent.booking_reference("package")
    assert first == "SE-PKG-RS"
    assert second == "SE-PKG-RT"


def test_real_clock_reference_format():
    ref = PaymentAgent(AppConfig.instant()).booking_reference("flight")
    assert re.match(r"^SE-(FLT|HTL|PKG)-[0-9A-Z]+$", ref)


def test_unknown_kind():
    with pytest.raises(ValueError):
        PaymentAgent(AppConfig.instant()).booking_reference("visa")


def test_charge_waits_then_completes():
    waits = []
    agent = PaymentAgent(AppConfig(payment_delay=2.5), sleep=waits.append, clock_ms=lambda: 36)
    result = agent.charge("flight", 6159, "upi")
    assert waits == [2.5]
    assert result.status == "completed"
    assert result.method == "upi"
    assert result.booking_id == "SE-FLT-10"


def test_charge_rejects_unknown_method_without_waiting():
    waits = []
    agent = PaymentAgent(AppConfig(payment_delay=2.5), sleep=waits.append)
    with pytest.raises(ValueError):
        agent.charge("flight", 100, "cheque")
    assert waits == []
