class TransitDataError(Exception):
    """Base exception for failures reading stops, trips or stop times."""


class GtfsFeedNotFound(TransitDataError):
    """Raised when the GTFS feed or one of its required files is missing."""


class GtfsParseError(TransitDataError):
    """Raised when a GTFS row carries a malformed value."""
