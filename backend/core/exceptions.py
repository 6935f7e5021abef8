from __future__ import annotations


class AppError(Exception):
    """Base app error."""


class GeocodingRequestError(AppError):
    """Raised when the geocoding provider fails or answers garbage."""


class RouteRequestError(AppError):
    """Raised when the routing provider fails or answers garbage."""
