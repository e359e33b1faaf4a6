# src/starhop/durations.py
"""
Duration and number coercion for raw SWAPI fields.

SWAPI reports consumables as free text ("2 months", "1 week", "unknown")
and speeds as strings ("75", "unknown"). Everything here converts those
into floats, or None when the value cannot be trusted. Nothing raises.
"""
from __future__ import annotations
import math
from typing import Any, Dict, Optional

# ---------- Time units ----------

HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
DAYS_PER_YEAR = 365.25  # average, leap years included
MONTHS_PER_YEAR = 12

HOURS_PER_WEEK = HOURS_PER_DAY * DAYS_PER_WEEK
HOURS_PER_YEAR = HOURS_PER_DAY * DAYS_PER_YEAR
HOURS_PER_MONTH = HOURS_PER_YEAR / MONTHS_PER_YEAR

UNIT_HOURS: Dict[str, float] = {
    "hour": 1,
    "day": HOURS_PER_DAY,
    "week": HOURS_PER_WEEK,
    "month": HOURS_PER_MONTH,
    "year": HOURS_PER_YEAR,
}


def to_float(value: Any) -> Optional[float]:
    """float(value) for real numbers and numeric strings; None otherwise (bools, NaN, inf included)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        num = float(value)
    elif isinstance(value, str):
        try:
            num = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(num):
        return None
    return num


def to_number(value: Any) -> Optional[float]:
    """
    Coerce a raw API value to a non-negative float.
    "75" -> 75.0, 12 -> 12.0, "unknown"/""/None/"-3" -> None.
    """
    num = to_float(value)
    if num is None or num < 0:
        return None
    return num


def parse_duration_hours(value: Any) -> Optional[float]:
    """
    Convert a duration expression to hours.

    Accepts a bare number (already hours) or "<amount> <unit>" where unit is
    hour/day/week/month/year, optionally plural:
        5          -> 5.0
        "2 days"   -> 48.0
        "1 month"  -> 730.5
        "unknown"  -> None
    Negative amounts (SWAPI's -1 included) are treated as unknown.
    """
    # Already a number: assume hours.
    hours = to_number(value)
    if hours is not None:
        return hours
    if not isinstance(value, str):
        return None

    words = value.split()
    if len(words) < 2:
        return None

    amount = to_number(words[0])
    if amount is None:
        return None

    unit = words[1].lower()
    if unit.endswith("s"):
        unit = unit[:-1]
    per_unit = UNIT_HOURS.get(unit)
    if per_unit is None:
        return None
    return amount * per_unit
