# src/starhop/providers/base.py
from __future__ import annotations
import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Optional, Protocol, Sequence, Union

from starhop.durations import to_float, parse_duration_hours, to_number

# SWAPI field carrying the ship's megalights per hour
SPEED_FIELD = "MGLT"


class StopsError(str, Enum):
    """Reasons a stop count cannot be given. Values are the user-facing messages."""
    DISTANCE = "Invalid distance"
    SPEED = "Unknown MGLT"
    CONSUMABLES = "Unknown consumables"
    NO_RANGE = "Zero range"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Starship:
    name: str                             # "Millennium Falcon"
    consumables_hours: Optional[float]    # hours of supplies; None = unknown
    mglt: Optional[float]                 # megalights per hour; None = unknown
    extra: Optional[Mapping[str, Any]] = field(default=None, compare=False, hash=False)

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "Starship":
        """Build from one SWAPI `results` item. Bad fields become None, never an exception."""
        name = raw.get("name")
        return cls(
            name="" if name is None else str(name),
            consumables_hours=parse_duration_hours(raw.get("consumables")),
            mglt=to_number(raw.get(SPEED_FIELD)),
            extra=MappingProxyType({"raw": MappingProxyType(dict(raw))}),
        )

    def stops_needed(self, distance: Any) -> Union[int, StopsError]:
        """
        Number of resupply stops to travel `distance` megalights.

        Checks run in order: distance, then MGLT, then consumables; the first
        failure is returned. Direction does not matter (|distance| is used) and
        the last partial leg needs no stop, so the result is floored.
        """
        dist = to_float(distance)
        if dist is None:
            return StopsError.DISTANCE
        if self.mglt is None:
            return StopsError.SPEED
        if self.consumables_hours is None:
            return StopsError.CONSUMABLES

        dist = abs(dist)
        if dist == 0:
            return 0
        per_resupply = self.mglt * self.consumables_hours
        if per_resupply == 0:
            return StopsError.NO_RANGE
        stops = dist / per_resupply
        # range too small to express against this distance
        if not math.isfinite(stops):
            return StopsError.NO_RANGE
        return math.floor(stops)


# (url, starships loaded so far, total count reported by the API)
ProgressCallback = Callable[[str, Sequence[Starship], int], None]


class StarshipSource(Protocol):
    def get_all(self, on_progress: Optional[ProgressCallback] = None) -> List[Starship]:
        """Return every starship the source knows about, in source order."""
        ...
