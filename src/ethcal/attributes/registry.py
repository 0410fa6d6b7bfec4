from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence

from ..core.errors import UnknownAttributeError
from ..core.jdn import jdn_from_gregorian
from ..core.types import DayInfo

AttrFunc = Callable[[DayInfo], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def list_attributes() -> List[str]:
    return sorted(_REGISTRY)

def compute_attributes(info: DayInfo, names: Sequence[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise UnknownAttributeError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out.update(_REGISTRY[name](info))
    return out

# helper for attribute implementations
def gregorian_new_year_jdn(info: DayInfo) -> int:
    return jdn_from_gregorian(info.civil_date.year, 1, 1)
