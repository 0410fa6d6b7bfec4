# tests/test_types.py

from datetime import date

import pytest

from ethcal import Era, EthiopianDate, GregorianDate, InvalidFieldError


def test_gregorian_validation():
    assert GregorianDate(2024, 2, 29).day == 29
    with pytest.raises(InvalidFieldError) as exc:
        GregorianDate(2023, 2, 29)
    assert exc.value.field == "day"
    assert exc.value.value == 29
    with pytest.raises(InvalidFieldError):
        GregorianDate(1900, 2, 29)
    with pytest.raises(InvalidFieldError):
        GregorianDate(2024, 13, 1)
    with pytest.raises(InvalidFieldError):
        GregorianDate(2024, 4, 31)
    with pytest.raises(InvalidFieldError):
        GregorianDate(2024, 1, 0)


def test_ethiopian_validation():
    assert EthiopianDate(2015, 13, 6).day == 6  # 2015 is a leap year
    with pytest.raises(InvalidFieldError):
        EthiopianDate(2016, 13, 6)
    with pytest.raises(InvalidFieldError):
        EthiopianDate(2016, 14, 1)
    with pytest.raises(InvalidFieldError):
        EthiopianDate(2016, 1, 31)
    with pytest.raises(InvalidFieldError):
        EthiopianDate(2016, 0, 1)
    with pytest.raises(InvalidFieldError):
        EthiopianDate(0, 1, 1, era=Era.AMETE_MIHRET)
    with pytest.raises(InvalidFieldError):
        EthiopianDate(2016, 1, 1, era=12345)


def test_fields_must_be_integers():
    with pytest.raises(InvalidFieldError):
        GregorianDate(2024, "5", 1)
    with pytest.raises(InvalidFieldError):
        EthiopianDate(2016, True, 1)
    with pytest.raises(InvalidFieldError):
        EthiopianDate(2016.0, 1, 1)


def test_invalid_field_is_value_error():
    with pytest.raises(ValueError):
        GregorianDate(2024, 2, 30)


def test_era_resolution_and_equality():
    assert EthiopianDate(2004, 5, 21) == EthiopianDate(2004, 5, 21, era=Era.AMETE_MIHRET)
    assert EthiopianDate(2004, 5, 21, era=int(Era.AMETE_MIHRET)).era is Era.AMETE_MIHRET
    assert EthiopianDate(-3, 1, 1).era is Era.AMETE_ALEM
    assert EthiopianDate(2004, 5, 21) != EthiopianDate(2004, 5, 21, era=Era.COPTIC)
    assert len({EthiopianDate(2004, 5, 21), EthiopianDate(2004, 5, 21, era=Era.AMETE_MIHRET)}) == 1


def test_dates_are_frozen():
    g = GregorianDate(2024, 1, 1)
    with pytest.raises(AttributeError):
        g.year = 2025


def test_gregorian_date_interop():
    assert GregorianDate.from_date(date(2012, 1, 30)) == GregorianDate(2012, 1, 30)
    assert GregorianDate(2012, 1, 30).to_date() == date(2012, 1, 30)
    assert GregorianDate(2012, 1, 30).isoformat() == "2012-01-30"
    with pytest.raises(InvalidFieldError):
        GregorianDate(0, 1, 1).to_date()
