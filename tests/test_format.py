# tests/test_format.py

import pytest

import ethcal
from ethcal import EthiopianDate, NameTable, UnknownMonthError, UnknownNamesError


def test_format_with_standard_table():
    assert ethcal.format_ethiopian_date(EthiopianDate(2004, 5, 21)) == "ጥር 21, 2004"
    assert ethcal.format_ethiopian_date(EthiopianDate(2004, 5, 21), ethcal.AMHARIC_MONTHS) == "ጥር 21, 2004"


def test_format_pads_day():
    assert ethcal.format_ethiopian_date(EthiopianDate(2017, 13, 2)) == "ጳጉሜ 02, 2017"


def test_format_with_registered_table_key():
    assert ethcal.format_ethiopian_date(EthiopianDate(2017, 4, 16), "english") == "Tahsas 16, 2017"


def test_format_unknown_month():
    with pytest.raises(UnknownMonthError):
        ethcal.format_ethiopian_date(EthiopianDate(2004, 5, 21), {1: "Meskerem"})
    # still a KeyError for callers that only know the mapping protocol
    with pytest.raises(KeyError):
        ethcal.format_ethiopian_date(EthiopianDate(2004, 13, 1), {})


def test_format_unknown_table():
    with pytest.raises(UnknownNamesError):
        ethcal.format_ethiopian_date(EthiopianDate(2004, 5, 21), "klingon")


def test_format_iso():
    assert ethcal.format_ethiopian_iso(EthiopianDate(2004, 5, 21)) == "2004-5-21"


def test_name_registry():
    assert {"amharic", "english"} <= set(ethcal.list_names())
    t = ethcal.get_names("amharic")
    assert len(t.months) == 13
    assert t.weekdays[0] == "እሁድ"
    with pytest.raises(TypeError):
        t.months[1] = "x"


def test_register_names():
    upper = NameTable({k: v.upper() for k, v in ethcal.get_names("english").months.items()},
                      tuple(d.upper() for d in ethcal.get_names("english").weekdays))
    ethcal.register_names("english-upper", upper)
    assert ethcal.format_ethiopian_date(EthiopianDate(2004, 5, 21), "english-upper") == "TIR 21, 2004"

    with pytest.raises(KeyError):
        ethcal.register_names("english-upper", upper)
    ethcal.register_names("english-upper", upper, overwrite=True)

    with pytest.raises(ValueError):
        ethcal.register_names("short-week", NameTable({1: "a"}, ("a", "b")))
