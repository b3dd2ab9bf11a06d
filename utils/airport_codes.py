# utils/airport_codes.py
from models.flight import Airport

AIRPORT_NAMES = {
    "BOM": ("Mumbai", "Chhatrapati Shivaji Intl"),
    "DEL": ("Delhi", "Indira Gandhi Intl"),
    "BLR": ("Bengaluru", "Kempegowda Intl"),
    "HYD": ("Hyderabad", "Rajiv Gandhi Intl"),
    "MAA": ("Chennai", "Chennai Intl"),
    "GOI": ("Goa", "Dabolim"),
    "COK": ("Kochi", "Cochin Intl"),
    "JAI": ("Jaipur", "Jaipur Intl"),
}

CITY_TO_AIRPORT = {city: code for code, (city, _) in AIRPORT_NAMES.items()}

# Older city names still typed into the search box.
CITY_ALIASES = {
    "Bombay": "BOM",
    "New Delhi": "DEL",
    "Bangalore": "BLR",
    "Madras": "MAA",
    "Cochin": "COK",
}


def to_airport_code(value: str) -> str:
    v = (value or "").strip()

    if len(v) == 3 and v.upper() in AIRPORT_NAMES:
        return v.upper()

    titled = v.title()
    if titled in CITY_TO_AIRPORT:
        return CITY_TO_AIRPORT[titled]
    if titled in CITY_ALIASES:
        return CITY_ALIASES[titled]

    raise ValueError(f"No airport code mapping found for: {v}")


def airport(code: str) -> Airport:
    c = (code or "").upper()
    if c not in AIRPORT_NAMES:
        raise ValueError(f"Unknown airport code: {code}")
    city, name = AIRPORT_NAMES[c]
    return Airport(code=c, city=city, name=name)


def airport_label(code: str) -> str:
    """'DEL' -> 'DEL - Delhi'; unknown codes are returned unchanged."""
    if (code or "").upper() not in AIRPORT_NAMES:
        return code
    a = airport(code)
    return f"{a.code} - {a.city}"
