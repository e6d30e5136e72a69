from .in_memory_transit_data_store import InMemoryTransitDataStore
from .local_gtfs_repository import LocalGtfsRepository

__all__ = [
    "InMemoryTransitDataStore",
    "LocalGtfsRepository",
]
