from __future__ import annotations

import math
from bisect import bisect_right

from stop_direction.domain.models import CompassDirection

# Clockwise from north; sector i is centered on i * 45 degrees.
_OCTANTS: tuple[CompassDirection, ...] = (
    CompassDirection.N,
    CompassDirection.NE,
    CompassDirection.E,
    CompassDirection.SE,
    CompassDirection.S,
    CompassDirection.SW,
    CompassDirection.W,
    CompassDirection.NW,
)

# Exact sector edges; no arithmetic on theta before comparing.
_BOUNDARIES_DEG: tuple[float, ...] = tuple(22.5 + 45.0 * k for k in range(8))


def bearing_degrees(lat_delta: float, lon_delta: float) -> float | None:
    """Navigational bearing of a (lat, lon) displacement, in [0, 360).

    0 is north (positive lat_delta), 90 is east (positive lon_delta).
    Planar approximation: degrees of latitude and longitude are treated as
    equal lengths, which only holds for short hops between nearby stops.
    Returns None for the zero vector.
    """

    if lat_delta == 0 and lon_delta == 0:
        return None

    theta = math.degrees(math.atan2(lon_delta, lat_delta)) % 360.0
    # A tiny negative angle can round up to exactly 360.0.
    return 0.0 if theta >= 360.0 else theta


def octant_for_bearing(theta: float) -> CompassDirection:
    """Octant containing a bearing in [0, 360).

    Sector boundaries sit at 22.5 + k * 45 degrees and belong to the sector
    clockwise of them, so 22.5 is NE and 337.5 is N.
    """

    index = bisect_right(_BOUNDARIES_DEG, theta) % len(_OCTANTS)
    return _OCTANTS[index]


def classify_bearing(lat_delta: float, lon_delta: float) -> CompassDirection:
    """Map a displacement to one of the 8 compass octants, or UNKNOWN if zero."""

    theta = bearing_degrees(lat_delta, lon_delta)
    if theta is None:
        return CompassDirection.UNKNOWN
    return octant_for_bearing(theta)
