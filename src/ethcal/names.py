"""Month and weekday name tables, keyed for lookup from the API and CLI."""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from .core.errors import UnknownNamesError

AMHARIC_MONTHS: Mapping[int, str] = MappingProxyType({
    1: "መስከረም", 2: "ጥቅምት", 3: "ህዳር", 4: "ታህሳስ", 5: "ጥር", 6: "የካቲት",
    7: "መጋቢት", 8: "ሚያዝያ", 9: "ግንቦት", 10: "ሰኔ", 11: "ሐምሌ", 12: "ነሃሴ", 13: "ጳጉሜ",
})

# Sunday first, matching core.jdn.weekday
AMHARIC_DAYS: Tuple[str, ...] = ("እሁድ", "ሰኞ", "ማክሰኞ", "ሮብ", "ሓሙስ", "ኣርብ", "ቅዳሜ")

# Latin transliterations, for output read by people who cannot read Ge'ez script
ENGLISH_MONTHS: Mapping[int, str] = MappingProxyType({
    1: "Meskerem", 2: "Tikimt", 3: "Hidar", 4: "Tahsas", 5: "Tir", 6: "Yekatit",
    7: "Megabit", 8: "Miazia", 9: "Ginbot", 10: "Sene", 11: "Hamle", 12: "Nehase", 13: "Pagumen",
})

ENGLISH_DAYS: Tuple[str, ...] = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


@dataclass(frozen=True)
class NameTable:
    months: Mapping[int, str]
    weekdays: Tuple[str, ...]


_REGISTRY: Dict[str, NameTable] = {}

DEFAULT_NAMES = "amharic"


def register_names(name: str, table: NameTable, *, overwrite: bool = False) -> None:
    if (not overwrite) and (name in _REGISTRY):
        raise KeyError(f"Name table '{name}' already exists. Use overwrite=True to replace.")
    if len(table.weekdays) != 7:
        raise ValueError(f"Name table '{name}' needs 7 weekday names, got {len(table.weekdays)}")
    _REGISTRY[name] = NameTable(MappingProxyType(dict(table.months)), tuple(table.weekdays))


def get_names(name: str = DEFAULT_NAMES) -> NameTable:
    if name not in _REGISTRY:
        raise UnknownNamesError(f"Unknown name table '{name}'. Available: {sorted(_REGISTRY)}")
    return _REGISTRY[name]


def list_names() -> List[str]:
    return sorted(_REGISTRY.keys())


register_names("amharic", NameTable(AMHARIC_MONTHS, AMHARIC_DAYS))
register_names("english", NameTable(ENGLISH_MONTHS, ENGLISH_DAYS))
