from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .stop import Stop


class CompassDirection(str, Enum):
    """Eight-point compass octant of a stop's travel direction."""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"
    UNKNOWN = "unknown"

    @property
    def is_known(self) -> bool:
        return self is not CompassDirection.UNKNOWN


@dataclass(frozen=True, slots=True)
class StopDirection:
    stop: Stop
    direction: CompassDirection
