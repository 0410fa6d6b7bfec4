from __future__ import annotations

import logging
import re
from dataclasses import replace
from datetime import date
from typing import Mapping, Optional, Sequence, Union

from .attributes.registry import compute_attributes
from .core.errors import InvalidFieldError, UnknownMonthError
from .core.jdn import (
    ethiopian_from_jdn,
    gregorian_from_jdn,
    jdn_from_ethiopian,
    jdn_from_gregorian,
    weekday,
)
from .core.types import DayInfo, Era, EthiopianDate, GregorianDate
from .names import DEFAULT_NAMES, get_names

log = logging.getLogger(__name__)

AnyDate = Union[GregorianDate, EthiopianDate, date]
MonthTable = Union[Mapping[int, str], str]

_YMD_RE = re.compile(r"^\s*(-?\d+)-(\d{1,2})-(\d{1,2})\s*$")


# ============================================================
# Conversions
# ============================================================

def to_jdn(d: AnyDate) -> int:
    """JDN of a tagged date (or a ``datetime.date``, read as Gregorian)."""
    if isinstance(d, EthiopianDate):
        return jdn_from_ethiopian(d.year, d.month, d.day, d.era)
    if isinstance(d, (GregorianDate, date)):
        return jdn_from_gregorian(d.year, d.month, d.day)
    raise TypeError(f"Expected GregorianDate, EthiopianDate or datetime.date, got {type(d).__name__}")


def to_gregorian(e: EthiopianDate) -> GregorianDate:
    if not isinstance(e, EthiopianDate):
        raise TypeError(f"to_gregorian expects an EthiopianDate, got {type(e).__name__}")
    jdn = jdn_from_ethiopian(e.year, e.month, e.day, e.era)
    g = gregorian_from_jdn(jdn)
    log.debug("%s (%s) -> JDN %d -> %s", e, e.era.name, jdn, g)
    return g


def to_ethiopian(d: Union[GregorianDate, date], *, era: Optional[Era] = None) -> EthiopianDate:
    if isinstance(d, EthiopianDate) or not isinstance(d, (GregorianDate, date)):
        raise TypeError(f"to_ethiopian expects a GregorianDate or datetime.date, got {type(d).__name__}")
    if not isinstance(d, GregorianDate):
        d = GregorianDate.from_date(d)
    jdn = jdn_from_gregorian(d.year, d.month, d.day)
    e = ethiopian_from_jdn(jdn, era)
    log.debug("%s -> JDN %d -> %s (%s)", d, jdn, e, e.era.name)
    return e


def ethiopian_to_gregorian(year: int, month: int, day: int, *, era: Optional[Era] = None) -> GregorianDate:
    """
    Ethiopian (year, month, day) -> Gregorian date.

    Without ``era``, years <= 0 are read as Amete Alem and positive years as
    Amete Mihret. Raises ``InvalidFieldError`` for fields out of range.

    >>> ethiopian_to_gregorian(2004, 5, 21)
    GregorianDate(year=2012, month=1, day=30)
    """
    return to_gregorian(EthiopianDate(year, month, day, era=era))


def gregorian_to_ethiopian(year: int, month: int, day: int, *, era: Optional[Era] = None) -> EthiopianDate:
    """
    Gregorian (year, month, day) -> Ethiopian date.

    Without ``era``, dates from Meskerem 1 of Amete Mihret year 1 onwards
    count in Amete Mihret, earlier ones in Amete Alem.

    >>> gregorian_to_ethiopian(2012, 1, 30)
    EthiopianDate(year=2004, month=5, day=21, era=<Era.AMETE_MIHRET: 1723856>)
    """
    return to_ethiopian(GregorianDate(year, month, day), era=era)


def new_year_day(year: int, *, era: Optional[Era] = None) -> GregorianDate:
    """Gregorian date of Meskerem 1 (Enkutatash) of Ethiopian ``year``."""
    return ethiopian_to_gregorian(year, 1, 1, era=era)


# ============================================================
# Formatting & parsing
# ============================================================

def _month_table(month_table: Optional[MonthTable]) -> Mapping[int, str]:
    if month_table is None:
        return get_names(DEFAULT_NAMES).months
    if isinstance(month_table, str):
        return get_names(month_table).months
    return month_table


def format_ethiopian_date(d: EthiopianDate, month_table: Optional[MonthTable] = None) -> str:
    """
    "<MonthName> <DD>, <year>", e.g. ``ጥር 21, 2004``.

    ``month_table`` is a month-number mapping or a registered name table key
    (default: Amharic).
    """
    if not isinstance(d, EthiopianDate):
        raise TypeError(f"format_ethiopian_date expects an EthiopianDate, got {type(d).__name__}")
    months = _month_table(month_table)
    try:
        name = months[d.month]
    except KeyError:
        raise UnknownMonthError(f"No name for month {d.month} in month table") from None
    return f"{name} {d.day:02d}, {d.year}"


def format_ethiopian_iso(d: EthiopianDate) -> str:
    """Unpadded "year-month-day", e.g. ``2004-5-21``."""
    return f"{d.year}-{d.month}-{d.day}"


def _split_ymd(text: str) -> tuple[int, int, int]:
    m = _YMD_RE.match(text)
    if m is None:
        raise InvalidFieldError("date", text, "expected YEAR-MONTH-DAY")
    y, mo, d = m.groups()
    return int(y), int(mo), int(d)


def parse_ethiopian(text: str, *, era: Optional[Era] = None) -> EthiopianDate:
    y, m, d = _split_ymd(text)
    return EthiopianDate(y, m, d, era=era)


def parse_gregorian(text: str) -> GregorianDate:
    y, m, d = _split_ymd(text)
    return GregorianDate(y, m, d)


def weekday_name(d: AnyDate, *, names: str = DEFAULT_NAMES) -> str:
    return get_names(names).weekdays[weekday(to_jdn(d))]


# ============================================================
# Day records
# ============================================================

def day_info(d: Union[GregorianDate, date], *, attributes: Sequence[str] = ()) -> DayInfo:
    if isinstance(d, EthiopianDate):
        d = to_gregorian(d)
    elif not isinstance(d, GregorianDate):
        d = GregorianDate.from_date(d)
    jdn = to_jdn(d)
    info = DayInfo(
        jdn=jdn,
        civil_date=d,
        ethiopian=ethiopian_from_jdn(jdn),
        weekday=weekday(jdn),
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info
