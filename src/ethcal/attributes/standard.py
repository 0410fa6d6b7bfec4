from __future__ import annotations
from typing import Any, Dict

from ..core.leap import is_ethiopian_leap, is_gregorian_leap
from ..names import get_names
from .registry import register_attribute, gregorian_new_year_jdn

def weekday(info) -> Dict[str, Any]:
    # Convention: 0=Sun..6=Sat, same as the weekday name tables.
    return {"weekday": info.weekday}

def _names(info, table: str) -> Dict[str, Any]:
    t = get_names(table)
    return {
        "month_name": t.months[info.ethiopian.month],
        "weekday_name": t.weekdays[info.weekday],
    }

def amharic_names(info) -> Dict[str, Any]:
    return _names(info, "amharic")

def english_names(info) -> Dict[str, Any]:
    return _names(info, "english")

def leap(info) -> Dict[str, Any]:
    return {
        "gregorian_leap": is_gregorian_leap(info.civil_date.year),
        "ethiopian_leap": is_ethiopian_leap(info.ethiopian.year),
    }

def day_of_year(info) -> Dict[str, Any]:
    e = info.ethiopian
    return {
        "gregorian_day_of_year": info.jdn - gregorian_new_year_jdn(info) + 1,
        "ethiopian_day_of_year": 30 * (e.month - 1) + e.day,
    }

register_attribute("weekday", weekday)
register_attribute("names", amharic_names)
register_attribute("names_en", english_names)
register_attribute("leap", leap)
register_attribute("day_of_year", day_of_year)
