# utils/date_parser.py
from __future__ import annotations
from datetime import date, datetime, time
from math import ceil
from typing import Optional, Union

import dateparser

# Dates typed on the site follow the Indian day-first convention (15/01/2024).
PREFERRED_LANGS = ["en", "hi"]
_DAY_SECONDS = 24 * 60 * 60

DateLike = Union[date, datetime, str, None]


def parse_date(value: DateLike) -> Optional[date]:
    """
    Parses common date inputs. Supports:
    - date / datetime objects (returned as a date)
    - YYYY-MM-DD, YYYY/MM/DD, DD-MM-YYYY, DD/MM/YYYY, DD.MM.YYYY
    - ISO timestamps (2024-01-15T09:00:00)
    - Natural language ("15 Jan", "next friday") via dateparser
    If parsing fails, returns None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    v = str(value).strip()
    if not v:
        return None

    fmts = ["%Y-%m-%d", "%Y/%m/%d", "%d-%m-%Y", "%d/%m/%Y", "%d.%m.%Y"]
    for fmt in fmts:
        try:
            return datetime.strptime(v, fmt).date()
        except ValueError:
            pass

    try:
        return datetime.fromisoformat(v).date()
    except ValueError:
        pass

    parsed = dateparser.parse(
        v,
        languages=PREFERRED_LANGS,
        settings={"PREFER_DATES_FROM": "future", "DATE_ORDER": "DMY"},
    )
    if parsed:
        return parsed.date()
    return None


def parse_datetime(value: DateLike) -> Optional[datetime]:
    """
    Catalog timestamps are ISO strings; plain dates become midnight.
    Offsets are dropped and the local wall-clock time kept, so aware and
    naive values can be compared.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    v = str(value).strip()
    if not v:
        return None
    try:
        return datetime.fromisoformat(v).replace(tzinfo=None)
    except ValueError:
        pass
    day = parse_date(v)
    return datetime.combine(day, time.min) if day else None


def nights_between(check_in: DateLike, check_out: DateLike) -> int:
    """
    Whole nights between two stay dates, rounded up, never below 1.
    Missing, unparsable or reversed ranges count as a single night.
    """
    start = parse_datetime(check_in)
    end = parse_datetime(check_out)
    if start is None or end is None:
        return 1
    days = (end - start).total_seconds() / _DAY_SECONDS
    return max(1, ceil(days))


def time_slot(moment: Optional[datetime]) -> Optional[str]:
    """Buckets a clock time into the slots used by the flight filters."""
    if moment is None:
        return None
    hour = moment.hour
    if 6 <= hour < 12:
        return "morning"
    if 12 <= hour < 18:
        return "afternoon"
    if hour >= 18:
        return "evening"
    return "night"
