from .geo_utils import haversine_distance, in_bounding_box, points_within

__all__ = [
    "haversine_distance",
    "in_bounding_box",
    "points_within",
]
