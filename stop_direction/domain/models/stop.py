from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Stop:
    """A GTFS stop or platform (stops.txt row with coordinates)."""

    id: str
    name: str
    location: GeoPoint
