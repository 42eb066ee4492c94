"""Bounding-box approximation for radius searches."""

import math

from checkin_tracker.domain.errors import InvalidInputError
from checkin_tracker.domain.venues import BoundingBox

MILES_PER_DEGREE_LAT = 69.0
_MIN_LON_SCALE = 1e-9


def bounding_box(lat: float, lon: float, radius_miles: float) -> BoundingBox:
    """Return the rectangle enclosing a circle of ``radius_miles`` around a point.

    One degree of latitude is treated as 69 miles everywhere; longitude degrees
    are scaled by ``cos(lat)``. The box is a superset of the circle, so venues
    near its corners can lie slightly outside the requested radius.
    """
    lon_scale = math.cos(math.radians(lat))
    if lon_scale < _MIN_LON_SCALE:
        raise InvalidInputError("Latitude is too close to a pole for a radius search")
    lat_delta = radius_miles / MILES_PER_DEGREE_LAT
    lon_delta = radius_miles / (MILES_PER_DEGREE_LAT * lon_scale)
    return BoundingBox(
        min_lat=lat - lat_delta,
        max_lat=lat + lat_delta,
        min_lon=lon - lon_delta,
        max_lon=lon + lon_delta,
    )
