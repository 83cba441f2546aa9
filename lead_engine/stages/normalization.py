"""
Normalization helpers shared by the signal passes.
"""

from datetime import datetime
from typing import Iterable, Optional

# Tried in order; LinkedIn dates come as "Jan 2020", "2020-01", "2020", ...
_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m",
    "%Y/%m",
    "%m/%Y",
    "%b %Y",
    "%B %Y",
    "%Y",
)

ADVANCED_DEGREE_MARKERS = ("master", "phd", "doctorate")


def threshold_ramp(value: float, minimum: float, saturation: float, cap: float) -> float:
    """
    Linear ramp with a qualifying gate and a clamp.

    Returns 0 below `minimum`; otherwise cap * min(value / saturation, 1).
    """
    if value < minimum:
        return 0.0
    if saturation <= 0:
        return float(cap)
    return cap * min(value / saturation, 1.0)


def contains_any(text: Optional[str], needles: Iterable[str]) -> bool:
    """Case-insensitive substring match against any needle"""
    if not text:
        return False
    haystack = text.lower()
    return any(needle.lower() in haystack for needle in needles if needle)


def is_advanced_degree(degree: Optional[str]) -> bool:
    return contains_any(degree, ADVANCED_DEGREE_MARKERS)


def parse_start_date(text: Optional[str]) -> datetime:
    """Parse a profile date string; anything unparsable sorts as the oldest"""
    if not text:
        return datetime.min
    cleaned = text.strip()
    try:
        parsed = datetime.fromisoformat(cleaned)
        return parsed.replace(tzinfo=None)
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt)
        except ValueError:
            continue
    return datetime.min


class SignalSheet:
    """Running totals for one score: fired signals plus category sums"""

    CATEGORIES = ("ambition", "intelligence", "kindness", "track_record")

    def __init__(self):
        self.signals = {}
        self.categories = {category: 0.0 for category in self.CATEGORIES}

    def record(self, category: str, signal: str, value: float) -> None:
        """Add a signal's points; zero-point signals are not recorded"""
        if value <= 0:
            return
        self.signals[signal] = float(value)
        self.categories[category] += float(value)
