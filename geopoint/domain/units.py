from __future__ import annotations

import math
from numbers import Real

from geopoint.domain.exceptions import InvalidInput

DEG_TO_RAD = math.pi / 180
RAD_TO_DEG = 180 / math.pi
MI_TO_KM = 1.6093439999999999
KM_TO_MI = 0.621371192237334

# Mean earth radius.
EARTH_RADIUS_KM = 6371.01
EARTH_RADIUS_MI = 3958.762079

MAX_LAT = math.pi / 2
MIN_LAT = -MAX_LAT
MAX_LON = math.pi
MIN_LON = -MAX_LON
FULL_CIRCLE_RAD = math.pi * 2


def is_number(value: object) -> bool:
    """True for finite real numbers. Booleans are not numbers here."""

    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def earth_radius(in_kilometers: bool = False) -> float:
    return EARTH_RADIUS_KM if in_kilometers else EARTH_RADIUS_MI


def degrees_to_radians(value: float) -> float:
    if not is_number(value):
        raise InvalidInput("degree", "Invalid degree value")
    return value * DEG_TO_RAD


def radians_to_degrees(value: float) -> float:
    if not is_number(value):
        raise InvalidInput("radian", "Invalid radian value")
    return value * RAD_TO_DEG


def miles_to_kilometers(value: float) -> float:
    if not is_number(value):
        raise InvalidInput("mile", "Invalid mile value")
    return value * MI_TO_KM


def kilometers_to_miles(value: float) -> float:
    if not is_number(value):
        raise InvalidInput("kilometer", "Invalid kilometer value")
    return value * KM_TO_MI
