from .geo import GeoPoint
from .options import BoundingOptions

__all__ = [
    "BoundingOptions",
    "GeoPoint",
]
