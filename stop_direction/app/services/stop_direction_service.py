from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from stop_direction.app.ports.output import ITransitDataStore
from stop_direction.app.services.direction_policies import (
    FirstResolvableTripPolicy,
    IDirectionPolicy,
)
from stop_direction.domain.algorithms.bearing import classify_bearing
from stop_direction.domain.models import (
    CompassDirection,
    Stop,
    StopDirection,
    StopTimeEntry,
)

logger = logging.getLogger(__name__)


def _next_stop_id(entries: tuple[StopTimeEntry, ...], stop_id: str) -> str | None:
    # Loop trips can visit a stop twice; the first visit wins.
    for i, entry in enumerate(entries):
        if entry.stop_id == stop_id:
            if i + 1 < len(entries):
                return entries[i + 1].stop_id
            return None
    return None


@dataclass(slots=True)
class StopDirectionService:
    """Application service labelling stops with a compass travel direction.

    The direction is the bearing from a stop to the next stop of a scheduled
    trip. Which trip counts is up to the injected policy.

    Any failure reading the store degrades to `unknown`: direction is display
    metadata and callers never branch on why it is missing.
    """

    transit_data_store: ITransitDataStore
    policy: IDirectionPolicy = field(default_factory=FirstResolvableTripPolicy)

    def resolve_direction(self, stop_id: str) -> CompassDirection:
        try:
            stop = self.transit_data_store.get_stop_by_id(stop_id)
        except Exception:
            logger.warning(
                "Could not resolve direction for stop %s", stop_id, exc_info=True
            )
            return CompassDirection.UNKNOWN
        if stop is None:
            return CompassDirection.UNKNOWN
        return self._direction_of(stop)

    def resolve_directions(
        self, stop_ids: Iterable[str]
    ) -> dict[str, CompassDirection]:
        return {sid: self.resolve_direction(sid) for sid in dict.fromkeys(stop_ids)}

    def describe_stop(self, stop_id: str) -> StopDirection | None:
        try:
            stop = self.transit_data_store.get_stop_by_id(stop_id)
        except Exception:
            logger.warning("Could not load stop %s", stop_id, exc_info=True)
            return None
        if stop is None:
            return None
        return StopDirection(stop=stop, direction=self._direction_of(stop))

    def _direction_of(self, stop: Stop) -> CompassDirection:
        try:
            return self.policy.select(self._candidate_directions(stop))
        except Exception:
            logger.warning(
                "Could not resolve direction for stop %s", stop.id, exc_info=True
            )
            return CompassDirection.UNKNOWN

    def _candidate_directions(self, stop: Stop) -> Iterator[CompassDirection]:
        store = self.transit_data_store
        for trip_id in store.get_trips_serving_stop(stop.id):
            next_stop_id = _next_stop_id(store.get_stop_time_sequence(trip_id), stop.id)
            if next_stop_id is None:
                continue

            # The trip has a next stop, so it is a candidate even if that
            # stop cannot be loaded.
            next_stop = store.get_stop_by_id(next_stop_id)
            if next_stop is None:
                logger.debug(
                    "Trip %s references missing stop %s", trip_id, next_stop_id
                )
                yield CompassDirection.UNKNOWN
                continue

            lat_delta, lon_delta = stop.location.offset_to(next_stop.location)
            yield classify_bearing(lat_delta, lon_delta)
