from geopoint.domain.algorithms import (
    haversine_distance,
    in_bounding_box,
    points_within,
)
from geopoint.domain.exceptions import (
    GeoPointError,
    InvalidDistance,
    InvalidGeoPoint,
    InvalidInput,
    LatitudeOutOfBounds,
    LongitudeOutOfBounds,
)
from geopoint.domain.models import BoundingOptions, GeoPoint
from geopoint.domain.units import (
    DEG_TO_RAD,
    EARTH_RADIUS_KM,
    EARTH_RADIUS_MI,
    FULL_CIRCLE_RAD,
    KM_TO_MI,
    MAX_LAT,
    MAX_LON,
    MI_TO_KM,
    MIN_LAT,
    MIN_LON,
    RAD_TO_DEG,
    degrees_to_radians,
    is_number,
    kilometers_to_miles,
    miles_to_kilometers,
    radians_to_degrees,
)

__all__ = [
    "BoundingOptions",
    "DEG_TO_RAD",
    "EARTH_RADIUS_KM",
    "EARTH_RADIUS_MI",
    "FULL_CIRCLE_RAD",
    "GeoPoint",
    "GeoPointError",
    "InvalidDistance",
    "InvalidGeoPoint",
    "InvalidInput",
    "KM_TO_MI",
    "LatitudeOutOfBounds",
    "LongitudeOutOfBounds",
    "MAX_LAT",
    "MAX_LON",
    "MI_TO_KM",
    "MIN_LAT",
    "MIN_LON",
    "RAD_TO_DEG",
    "degrees_to_radians",
    "haversine_distance",
    "in_bounding_box",
    "is_number",
    "kilometers_to_miles",
    "miles_to_kilometers",
    "points_within",
    "radians_to_degrees",
]
