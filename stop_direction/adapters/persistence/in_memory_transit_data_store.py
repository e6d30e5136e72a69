from __future__ import annotations

from dataclasses import dataclass, field

from stop_direction.app.ports.output import IGtfsRepository, ITransitDataStore
from stop_direction.domain.models import Stop, StopTimeEntry
from stop_direction.domain.models.gtfs import GtfsFeed


@dataclass(slots=True)
class InMemoryTransitDataStore(ITransitDataStore):
    """Serves the transit data lookups from a loaded GTFS feed.

    Trips serving a stop are returned sorted by trip id.
    """

    feed: GtfsFeed
    _trips_by_stop: dict[str, tuple[str, ...]] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        index: dict[str, set[str]] = {}
        for trip_id, entries in self.feed.stop_times_by_trip.items():
            for entry in entries:
                index.setdefault(entry.stop_id, set()).add(trip_id)
        self._trips_by_stop = {
            stop_id: tuple(sorted(trip_ids)) for stop_id, trip_ids in index.items()
        }

    @classmethod
    def from_repository(cls, repository: IGtfsRepository) -> InMemoryTransitDataStore:
        return cls(feed=repository.load_feed())

    def get_stop_by_id(self, stop_id: str) -> Stop | None:
        return self.feed.stops_by_id.get(stop_id)

    def get_trips_serving_stop(self, stop_id: str) -> tuple[str, ...]:
        return self._trips_by_stop.get(stop_id, ())

    def get_stop_time_sequence(self, trip_id: str) -> tuple[StopTimeEntry, ...]:
        return self.feed.stop_times_by_trip.get(trip_id, ())
