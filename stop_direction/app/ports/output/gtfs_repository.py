from __future__ import annotations

from abc import ABC, abstractmethod

from stop_direction.domain.models.gtfs import GtfsFeed


class IGtfsRepository(ABC):
    """Port for loading static GTFS data into an in-memory feed."""

    @abstractmethod
    def load_feed(self) -> GtfsFeed:
        raise NotImplementedError
