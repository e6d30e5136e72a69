from __future__ import annotations

from abc import ABC, abstractmethod

from stop_direction.domain.models import Stop, StopTimeEntry


class ITransitDataStore(ABC):
    """Read-only port over stops, trips and stop times.

    Implementations may raise `TransitDataError` on I/O or data faults.
    Absence is never an error: missing stops return None, missing trips
    return empty tuples.
    """

    @abstractmethod
    def get_stop_by_id(self, stop_id: str) -> Stop | None:
        raise NotImplementedError

    @abstractmethod
    def get_trips_serving_stop(self, stop_id: str) -> tuple[str, ...]:
        """Trip ids visiting the stop, in a deterministic order."""

        raise NotImplementedError

    @abstractmethod
    def get_stop_time_sequence(self, trip_id: str) -> tuple[StopTimeEntry, ...]:
        """Stop-time entries of a trip, ordered by stop_sequence."""

        raise NotImplementedError
