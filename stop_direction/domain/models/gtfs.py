from __future__ import annotations

from dataclasses import dataclass

from stop_direction.domain.models.stop import Stop


@dataclass(frozen=True, slots=True)
class StopTimeEntry:
    """A stop visited by a trip at a given position.

    `stop_sequence` is strictly increasing within a trip (GTFS semantics; gaps allowed).
    """

    trip_id: str
    stop_id: str
    stop_sequence: int


@dataclass(frozen=True, slots=True)
class GtfsFeed:
    """In-memory representation of the subset of GTFS needed for stop directions."""

    stops_by_id: dict[str, Stop]
    stop_times_by_trip: dict[str, tuple[StopTimeEntry, ...]]
