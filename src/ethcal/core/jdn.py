"""
ethcal.core.jdn
---------------
Integer-only conversions between calendar fields and Julian Day Numbers.

All divisions are Python floor divisions, so negative years and JDNs follow
the same cycles as positive ones (astronomical year numbering on the
Gregorian side).
"""

from __future__ import annotations

from typing import Optional

from .leap import gregorian_month_lengths
from .types import JD_EPOCH_GREGORIAN, Era, EthiopianDate, GregorianDate

# Day counts of the Gregorian cycles
DAYS_400 = 146097
DAYS_100 = 36524
DAYS_4 = 1461

# The Ethiopian calendar repeats every four years
ETH_CYCLE = 1461


# ============================================================
# Era selection
# ============================================================

def select_era_for_year(year: int) -> Era:
    return Era.AMETE_ALEM if year <= 0 else Era.AMETE_MIHRET


def select_era_for_jdn(jdn: int) -> Era:
    """Amete Mihret from Meskerem 1 of its year 1 onwards, Amete Alem before."""
    if jdn >= Era.AMETE_MIHRET + 365:
        return Era.AMETE_MIHRET
    return Era.AMETE_ALEM


# ============================================================
# Gregorian <-> JDN
# ============================================================

def jdn_from_gregorian(year: int, month: int, day: int) -> int:
    """Proleptic Gregorian (year, month, day) -> JDN."""
    # s = 1 in leap years
    s = (year // 4) - (year - 1) // 4 - (year // 100) + (year - 1) // 100 + (year // 400) - (year - 1) // 400
    # t = 1 for January and February
    t = (14 - month) // 12
    n = 31 * t * (month - 1) + (1 - t) * (59 + s + 30 * (month - 3) + (3 * month - 7) // 5) + day - 1
    y1 = year - 1
    return JD_EPOCH_GREGORIAN + 365 * y1 + y1 // 4 - y1 // 100 + y1 // 400 + n


def gregorian_from_jdn(jdn: int) -> GregorianDate:
    """
    JDN -> proleptic Gregorian date.

    The day count since 0001-01-01 is split into 400-, 100-, 4- and 1-year
    remainders. Dec 31 of a year divisible by 400 is the one day the
    100-year split cannot place (r400 == 146096); it gets a one-day
    correction and is pinned to Dec 31 explicitly.
    """
    days = jdn - JD_EPOCH_GREGORIAN
    r400 = days % DAYS_400
    r100 = r400 % DAYS_100
    r4 = r100 % DAYS_4
    cycle_end = r400 // (DAYS_400 - 1)

    n = (r4 % 365) + 365 * (r4 // 1460)
    s = r4 // 1095
    year = (
        400 * (days // DAYS_400)
        + 100 * (r400 // DAYS_100)
        + 4 * (r100 // DAYS_4)
        + r4 // 365
        - r4 // 1460
        - cycle_end
        + 1
    )

    # provisional month; t = 1 before March of the cycle's year
    t = (364 + s - n) // 306
    month = t * ((n // 31) + 1) + (1 - t) * (((5 * (n - s) + 13) // 153) + 1)

    n += 1 - cycle_end
    if r100 == 0 and n == 0 and r400 != 0:
        return GregorianDate(year, 12, 31)
    return _place_in_month(year, month, n)


def _place_in_month(year: int, month: int, doy: int) -> GregorianDate:
    """Walk the month table from ``month`` until day-of-year ``doy`` fits."""
    lengths = gregorian_month_lengths(year)
    m = min(max(month, 1), 12)
    before = sum(lengths[: m - 1])
    while doy <= before:
        m -= 1
        before -= lengths[m - 1]
    while doy > before + lengths[m - 1]:
        before += lengths[m - 1]
        m += 1
    return GregorianDate(year, m, doy - before)


# ============================================================
# Ethiopian <-> JDN
# ============================================================

def jdn_from_ethiopian(year: int, month: int, day: int, era: int) -> int:
    """Ethiopian (year, month, day) counted from ``era`` -> JDN."""
    return (era + 365) + 365 * (year - 1) + (year // 4) + 30 * month + (day - 31)


def ethiopian_from_jdn(jdn: int, era: Optional[Era] = None) -> EthiopianDate:
    """
    JDN -> Ethiopian date.

    Without ``era`` the era is picked by ``select_era_for_jdn``. Forcing an era
    whose year 1 lies after ``jdn`` raises ``InvalidFieldError``.
    """
    if era is None:
        era = select_era_for_jdn(jdn)
    offset = jdn - era
    r = offset % ETH_CYCLE
    n = (r % 365) + 365 * (r // 1460)
    year = 4 * (offset // ETH_CYCLE) + r // 365 - r // 1460
    return EthiopianDate(year, (n // 30) + 1, (n % 30) + 1, era=era)


# ============================================================
# Weekdays
# ============================================================

def weekday(jdn: int) -> int:
    """0=Sunday..6=Saturday."""
    return (jdn + 1) % 7
