from __future__ import annotations

import math
from dataclasses import dataclass

from geopoint.domain.exceptions import (
    InvalidDistance,
    InvalidGeoPoint,
    InvalidInput,
    LatitudeOutOfBounds,
    LongitudeOutOfBounds,
)
from geopoint.domain.units import (
    FULL_CIRCLE_RAD,
    MAX_LAT,
    MAX_LON,
    MIN_LAT,
    MIN_LON,
    degrees_to_radians,
    earth_radius,
    is_number,
    radians_to_degrees,
)

from .options import BoundingOptions


def _central_angle_cosine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    # Unclamped: may drift just outside [-1, 1] for identical or antipodal points.
    return math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(
        lat2
    ) * math.cos(lon1 - lon2)


@dataclass(frozen=True, slots=True, init=False)
class GeoPoint:
    """A point on a sphere, cached in both degrees and radians."""

    deg_lat: float
    deg_lon: float
    rad_lat: float
    rad_lon: float

    def __init__(self, lat: float, lon: float, in_radians: bool = False) -> None:
        if not is_number(lat):
            raise InvalidInput("latitude")
        if not is_number(lon):
            raise InvalidInput("longitude")

        if in_radians:
            deg_lat, deg_lon = radians_to_degrees(lat), radians_to_degrees(lon)
            rad_lat, rad_lon = lat, lon
        else:
            deg_lat, deg_lon = lat, lon
            rad_lat, rad_lon = degrees_to_radians(lat), degrees_to_radians(lon)

        if not (MIN_LAT <= rad_lat <= MAX_LAT):
            raise LatitudeOutOfBounds()
        if not (MIN_LON <= rad_lon <= MAX_LON):
            raise LongitudeOutOfBounds()

        object.__setattr__(self, "deg_lat", float(deg_lat))
        object.__setattr__(self, "deg_lon", float(deg_lon))
        object.__setattr__(self, "rad_lat", float(rad_lat))
        object.__setattr__(self, "rad_lon", float(rad_lon))

    def latitude(self, in_radians: bool = False) -> float:
        return self.rad_lat if in_radians else self.deg_lat

    def longitude(self, in_radians: bool = False) -> float:
        return self.rad_lon if in_radians else self.deg_lon

    def distance_to(self, other: GeoPoint, in_kilometers: bool = False) -> float:
        """Great-circle distance using the spherical law of cosines.

        Returns ``nan`` when rounding pushes the cosine of the central angle
        outside [-1, 1], which can happen for identical or antipodal points.
        Use ``haversine_distance`` when those cases matter.
        """

        if not isinstance(other, GeoPoint):
            raise InvalidGeoPoint()

        result = _central_angle_cosine(
            self.rad_lat, self.rad_lon, other.rad_lat, other.rad_lon
        )
        if not (-1.0 <= result <= 1.0):
            return math.nan
        return math.acos(result) * earth_radius(in_kilometers)

    def bounding_coordinates(
        self, distance: float, options: BoundingOptions | bool | None = None
    ) -> tuple[GeoPoint, GeoPoint]:
        """Southwest and northeast corners of a box enclosing a circle.

        Every point within ``distance`` of this point lies inside the box.
        The box spans all longitudes when the circle reaches a pole, and its
        southwest longitude is greater than its northeast longitude when it
        crosses the 180th meridian.
        """

        if not is_number(distance) or distance <= 0:
            raise InvalidDistance()

        opts = BoundingOptions.coerce(options)
        rad_dist = distance / opts.effective_radius

        min_lat = self.rad_lat - rad_dist
        max_lat = self.rad_lat + rad_dist

        if min_lat > MIN_LAT and max_lat < MAX_LAT:
            delta_lon = math.asin(math.sin(rad_dist) / math.cos(self.rad_lat))

            min_lon = self.rad_lon - delta_lon
            if min_lon < MIN_LON:
                min_lon += FULL_CIRCLE_RAD

            max_lon = self.rad_lon + delta_lon
            if max_lon > MAX_LON:
                max_lon -= FULL_CIRCLE_RAD
        else:
            min_lat = max(min_lat, MIN_LAT)
            max_lat = min(max_lat, MAX_LAT)
            min_lon = MIN_LON
            max_lon = MAX_LON

        return (
            GeoPoint(min_lat, min_lon, in_radians=True),
            GeoPoint(max_lat, max_lon, in_radians=True),
        )
