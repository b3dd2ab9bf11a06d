import pytest

from utils.airport_codes import airport, airport_label, to_airport_code


def test_codes_and_city_names():
    assert to_airport_code("del") == "DEL"
    assert to_airport_code("Mumbai") == "BOM"
    assert to_airport_code("  new delhi ") == "DEL"
    assert to_airport_code("Bombay") == "BOM"


def test_unknown_city():
    with pytest.raises(ValueError):
        to_airport_code("Gotham")


def test_label():
    assert airport_label("blr") == "BLR - Bengaluru"
    assert airport_label("XYZ") == "XYZ"


def test_airport_record():
    a = airport("hyd")
    assert (a.code, a.city, a.name) == ("HYD", "Hyderabad", "Rajiv Gandhi Intl")
    with pytest.raises(ValueError):
        airport("ZZZ")
