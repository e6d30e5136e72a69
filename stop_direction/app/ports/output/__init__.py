from .gtfs_repository import IGtfsRepository
from .transit_data_store import ITransitDataStore

__all__ = [
    "IGtfsRepository",
    "ITransitDataStore",
]
