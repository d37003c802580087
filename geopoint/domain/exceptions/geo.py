from __future__ import annotations


class GeoPointError(ValueError):
    """Base exception for invalid coordinates and geometric arguments."""


class InvalidInput(GeoPointError):
    """Raised when a numeric argument is missing, non-numeric or not finite."""

    def __init__(self, kind: str, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or f"Invalid {kind}")

    def __reduce__(self):
        return (type(self), (self.kind, str(self)))


class LatitudeOutOfBounds(GeoPointError):
    def __init__(self, message: str = "Latitude out of bounds") -> None:
        super().__init__(message)


class LongitudeOutOfBounds(GeoPointError):
    def __init__(self, message: str = "Longitude out of bounds") -> None:
        super().__init__(message)


class InvalidGeoPoint(GeoPointError, TypeError):
    """Raised when a distance target is not a GeoPoint."""

    def __init__(self, message: str = "Invalid GeoPoint") -> None:
        super().__init__(message)


class InvalidDistance(GeoPointError):
    """Raised when a search distance is not a positive finite number."""

    def __init__(self, message: str = "Invalid distance") -> None:
        super().__init__(message)
