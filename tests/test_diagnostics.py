# tests/test_diagnostics.py

import pytest

from ethcal.core.jdn import jdn_from_gregorian
from ethcal.core.types import GregorianDate
from ethcal.diagnostics import new_years_table, pretty_month, round_trip


def test_exhaustive_round_trip_two_centuries():
    start = jdn_from_gregorian(1890, 1, 1)
    end = jdn_from_gregorian(2110, 12, 31)
    assert round_trip.sweep(range(start, end + 1)) == []


def test_round_trip_deep_past_and_future():
    jdns = round_trip.random_jdns(jdn_from_gregorian(-300, 1, 1), jdn_from_gregorian(10000, 12, 31), 5000, seed=1)
    assert round_trip.sweep(jdns) == []


def test_new_year_rows():
    rows = new_years_table.new_year_rows(2015, 2017, names="english")
    assert rows == [
        (2015, GregorianDate(2022, 9, 11), "Sunday"),
        (2016, GregorianDate(2023, 9, 12), "Tuesday"),
        (2017, GregorianDate(2024, 9, 11), "Wednesday"),
    ]


def test_pagume_grid():
    title, weeks = pretty_month.ethiopian_month_grid(2017, 13)
    assert "ጳጉሜ" in title
    # Pagume 1, 2017 is Saturday 2025-09-06
    assert [c[0].strip() for c in weeks[0]] == ["", "", "", "", "", "1", "2"]
    assert weeks[0][5][1].strip() == "09-06"
    assert [c[0].strip() for c in weeks[1]] == ["3", "4", "5", "", "", "", ""]


def test_gregorian_grid():
    title, weeks = pretty_month.gregorian_month_grid(2025, 9)
    assert title == "Gregorian month  2025-09"
    # 2025-09-01 is a Monday, Nehase 26
    assert weeks[0][0] == pretty_month.cell(" 1", "12-26")
    assert weeks[1][0] == pretty_month.cell(" 8", "13-03")
    assert weeks[1][3] == pretty_month.cell("11", "01-01")


def test_new_year_series():
    np = pytest.importorskip("numpy")
    from ethcal.diagnostics import new_year_scatter

    x, y = new_year_scatter.build_series(np, 2015, 2017, metric="sep-day")
    assert list(x) == [2015, 2016, 2017]
    assert list(y) == [11.0, 12.0, 11.0]

    _, doy = new_year_scatter.build_series(np, 2016, 2016, metric="doy")
    assert list(doy) == [255.0]  # 2023-09-12

    med = new_year_scatter.rolling_median(np, np.array([11.0, 12.0, 11.0, 11.0]), win=3)
    assert list(med) == [11.0, 11.0, 11.0, 11.0]
