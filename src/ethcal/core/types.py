from __future__ import annotations
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from enum import IntEnum
from numbers import Integral
from typing import Any, Dict, Optional

from .errors import InvalidFieldError
from .leap import ethiopian_month_length, gregorian_month_lengths

# JDN of 0001-01-01 in the proleptic Gregorian calendar
JD_EPOCH_GREGORIAN = 1721426


class Era(IntEnum):
    """Ethiopian-style epochs; the value is the Julian Day offset of the era."""
    AMETE_MIHRET = 1723856  # ዓ/ም
    AMETE_ALEM = -285019    # ዓ/ዓ
    COPTIC = 1824665


def _check_int(obj: Any, name: str) -> None:
    v = getattr(obj, name)
    if isinstance(v, bool) or not isinstance(v, Integral):
        raise InvalidFieldError(name, v, "must be an integer")
    object.__setattr__(obj, name, int(v))


@dataclass(frozen=True)
class GregorianDate:
    """A proleptic Gregorian date, astronomical year numbering (0 = 1 BC)."""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        for name in ("year", "month", "day"):
            _check_int(self, name)
        if not 1 <= self.month <= 12:
            raise InvalidFieldError("month", self.month, "Gregorian months run 1..12")
        last = gregorian_month_lengths(self.year)[self.month - 1]
        if not 1 <= self.day <= last:
            raise InvalidFieldError("day", self.day, f"{self.year}-{self.month:02d} has {last} days")

    @classmethod
    def from_date(cls, d: date) -> "GregorianDate":
        return cls(d.year, d.month, d.day)

    def to_date(self) -> date:
        if not MINYEAR <= self.year <= MAXYEAR:
            raise InvalidFieldError("year", self.year, f"datetime.date supports {MINYEAR}..{MAXYEAR}")
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class EthiopianDate:
    """
    An Ethiopian date tagged with its era.

    When ``era`` is omitted it follows the year sign: years <= 0 count in
    Amete Alem, positive years in Amete Mihret.
    """
    year: int
    month: int
    day: int
    era: Optional[Era] = None

    def __post_init__(self) -> None:
        for name in ("year", "month", "day"):
            _check_int(self, name)
        if self.era is None:
            era = Era.AMETE_ALEM if self.year <= 0 else Era.AMETE_MIHRET
        else:
            try:
                era = Era(self.era)
            except ValueError:
                raise InvalidFieldError("era", self.era, f"expected one of {[e.name for e in Era]}") from None
        object.__setattr__(self, "era", era)

        if era is not Era.AMETE_ALEM and self.year < 1:
            raise InvalidFieldError("year", self.year, f"{era.name} years start at 1")
        if not 1 <= self.month <= 13:
            raise InvalidFieldError("month", self.month, "Ethiopian months run 1..13")
        last = ethiopian_month_length(self.year, self.month)
        if not 1 <= self.day <= last:
            raise InvalidFieldError("day", self.day, f"month {self.month} of {self.year} has {last} days")


@dataclass(frozen=True)
class DayInfo:
    jdn: int
    civil_date: GregorianDate
    ethiopian: EthiopianDate
    weekday: int  # 0=Sunday..6=Saturday
    attributes: Optional[Dict[str, Any]] = None
