from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from geopoint.domain.units import earth_radius, is_number


class BoundingOptions(BaseModel):
    """Sphere used by bounding box and proximity calculations.

    An explicit positive radius wins over ``in_kilometers``; otherwise the
    mean earth radius in kilometers or miles is used. The distance passed
    alongside these options must be in the same unit as the radius.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    radius: float | None = None
    in_kilometers: bool = False

    @classmethod
    def coerce(cls, options: BoundingOptions | bool | None) -> BoundingOptions:
        """Accept an options model, ``None``, or a bare ``in_kilometers`` flag."""

        if options is None:
            return cls()
        if isinstance(options, bool):
            return cls(in_kilometers=options)
        if isinstance(options, cls):
            return options
        raise TypeError(f"Invalid options: {options!r}")

    @property
    def effective_radius(self) -> float:
        if self.radius is not None and is_number(self.radius) and self.radius > 0:
            return self.radius
        return earth_radius(self.in_kilometers)
