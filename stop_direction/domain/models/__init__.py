from .direction import CompassDirection, StopDirection
from .geo import GeoPoint
from .gtfs import GtfsFeed, StopTimeEntry
from .stop import Stop

__all__ = [
    "CompassDirection",
    "GeoPoint",
    "GtfsFeed",
    "Stop",
    "StopDirection",
    "StopTimeEntry",
]
