from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from geopoint.domain.exceptions import InvalidGeoPoint
from geopoint.domain.models import BoundingOptions, GeoPoint
from geopoint.domain.units import earth_radius

logger = logging.getLogger(__name__)


def _central_angle(a: GeoPoint, b: GeoPoint) -> float:
    dlat = b.rad_lat - a.rad_lat
    dlon = b.rad_lon - a.rad_lon

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(a.rad_lat) * math.cos(b.rad_lat) * math.sin(dlon / 2.0) ** 2
    )
    return 2.0 * math.asin(min(1.0, math.sqrt(s)))


def haversine_distance(a: GeoPoint, b: GeoPoint, in_kilometers: bool = False) -> float:
    """Great-circle distance in miles (or kilometers).

    Unlike ``GeoPoint.distance_to`` this never returns ``nan``.
    """

    if not isinstance(a, GeoPoint) or not isinstance(b, GeoPoint):
        raise InvalidGeoPoint()
    return _central_angle(a, b) * earth_radius(in_kilometers)


def in_bounding_box(point: GeoPoint, box: tuple[GeoPoint, GeoPoint]) -> bool:
    sw, ne = box
    if not (sw.rad_lat <= point.rad_lat <= ne.rad_lat):
        return False
    if sw.rad_lon <= ne.rad_lon:
        return sw.rad_lon <= point.rad_lon <= ne.rad_lon
    # Box wraps across the 180th meridian.
    return point.rad_lon >= sw.rad_lon or point.rad_lon <= ne.rad_lon


def points_within(
    origin: GeoPoint,
    candidates: Iterable[GeoPoint],
    distance: float,
    options: BoundingOptions | bool | None = None,
    *,
    max_count: int | None = None,
) -> list[tuple[float, GeoPoint]]:
    """Candidates within ``distance`` of ``origin``, nearest first.

    The bounding box discards most candidates before the exact distance
    is computed. Distances are in the unit selected by ``options``.
    """

    if max_count is not None and (
        isinstance(max_count, bool) or not isinstance(max_count, int) or max_count <= 0
    ):
        raise ValueError(f"Invalid max_count: {max_count}")

    opts = BoundingOptions.coerce(options)
    box = origin.bounding_coordinates(distance, opts)
    radius = opts.effective_radius

    total = 0
    scored: list[tuple[float, GeoPoint]] = []
    for point in candidates:
        if not isinstance(point, GeoPoint):
            raise InvalidGeoPoint()
        total += 1
        if not in_bounding_box(point, box):
            continue
        d = _central_angle(origin, point) * radius
        if d <= distance:
            scored.append((d, point))

    logger.debug("Proximity search kept %d of %d candidates", len(scored), total)

    scored.sort(key=lambda x: x[0])
    if max_count is not None:
        return scored[:max_count]
    return scored
