"""ethcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Register standard day attributes on import
from .attributes import standard as _standard  # noqa: F401

from .api import (
    ethiopian_to_gregorian,
    gregorian_to_ethiopian,
    to_gregorian,
    to_ethiopian,
    to_jdn,
    new_year_day,
    format_ethiopian_date,
    format_ethiopian_iso,
    parse_ethiopian,
    parse_gregorian,
    weekday_name,
    day_info,
)
from .attributes.registry import register_attribute, list_attributes
from .core.errors import (
    EthcalError,
    InvalidFieldError,
    UnknownAttributeError,
    UnknownMonthError,
    UnknownNamesError,
)
from .core.jdn import (
    ethiopian_from_jdn,
    gregorian_from_jdn,
    jdn_from_ethiopian,
    jdn_from_gregorian,
    weekday,
)
from .core.leap import ethiopian_month_length, is_ethiopian_leap, is_gregorian_leap
from .core.types import DayInfo, Era, EthiopianDate, GregorianDate
from .names import AMHARIC_DAYS, AMHARIC_MONTHS, NameTable, get_names, list_names, register_names

__all__ = [
    "ethiopian_to_gregorian",
    "gregorian_to_ethiopian",
    "to_gregorian",
    "to_ethiopian",
    "to_jdn",
    "new_year_day",
    "format_ethiopian_date",
    "format_ethiopian_iso",
    "parse_ethiopian",
    "parse_gregorian",
    "weekday_name",
    "day_info",
    "register_attribute",
    "list_attributes",
    "EthcalError",
    "InvalidFieldError",
    "UnknownAttributeError",
    "UnknownMonthError",
    "UnknownNamesError",
    "ethiopian_from_jdn",
    "gregorian_from_jdn",
    "jdn_from_ethiopian",
    "jdn_from_gregorian",
    "weekday",
    "ethiopian_month_length",
    "is_ethiopian_leap",
    "is_gregorian_leap",
    "DayInfo",
    "Era",
    "EthiopianDate",
    "GregorianDate",
    "AMHARIC_DAYS",
    "AMHARIC_MONTHS",
    "NameTable",
    "get_names",
    "list_names",
    "register_names",
]
