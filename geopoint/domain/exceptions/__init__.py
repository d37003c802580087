from .geo import (
    GeoPointError,
    InvalidDistance,
    InvalidGeoPoint,
    InvalidInput,
    LatitudeOutOfBounds,
    LongitudeOutOfBounds,
)

__all__ = [
    "GeoPointError",
    "InvalidDistance",
    "InvalidGeoPoint",
    "InvalidInput",
    "LatitudeOutOfBounds",
    "LongitudeOutOfBounds",
]
