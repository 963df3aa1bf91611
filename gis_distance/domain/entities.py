"""
Domain value objects.

- ``Coordinate`` is an immutable (latitude, longitude) pair in degrees.
- ``Distance`` is a kilometer ``float`` that knows how to express itself
  in miles, so callers can write ``calc.distance().to_miles()`` without
  touching the builtin ``float`` type.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal

from .errors import ValidationError

KM_TO_MILES = 0.621371192

LATITUDE_BOUNDS = (-90.0, 90.0)
LONGITUDE_BOUNDS = (-180.0, 180.0)


def to_miles(km: float) -> float:
    """Convert kilometers to statute miles."""
    return km * KM_TO_MILES


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    @property
    def radians(self) -> tuple[float, float]:
        return math.radians(self.latitude), math.radians(self.longitude)


class Distance(float):
    """A distance in kilometers."""

    __slots__ = ()

    @property
    def km(self) -> float:
        return float(self)

    @property
    def miles(self) -> float:
        return to_miles(float(self))

    def to_miles(self) -> float:
        return self.miles

    def __repr__(self) -> str:
        return f"Distance({float(self)!r} km)"


# ── Validation ────────────────────────────────────────────────────────


def _is_number(value: object) -> bool:
    # Decimal is not registered as numbers.Real
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def validate_coordinates(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> tuple[Coordinate, Coordinate]:
    """
    Check and normalise four raw coordinate values.

    Order is fixed: every value is type-checked first, then both latitudes
    are range-checked, then both longitudes. The first failure raises
    ``ValidationError``. NaN never satisfies a range check. Any real number
    or ``Decimal`` is accepted; ``bool`` and ``complex`` are not.
    """
    roles = (
        ("Latitude", lat1),
        ("Longitude", lon1),
        ("Latitude", lat2),
        ("Longitude", lon2),
    )
    values = []
    for role, value in roles:
        message = f"{role} {value!r} is invalid - must be a number"
        if not _is_number(value):
            raise ValidationError(message)
        try:
            values.append(float(value))
        except ValueError as exc:  # signalling Decimal NaN
            raise ValidationError(message) from exc
    lat1, lon1, lat2, lon2 = values

    low, high = LATITUDE_BOUNDS
    for lat in (lat1, lat2):
        if not low <= lat <= high:
            raise ValidationError(
                f"Latitude '{lat}' is invalid - must be between -90 and 90"
            )

    low, high = LONGITUDE_BOUNDS
    for lon in (lon1, lon2):
        if not low <= lon <= high:
            raise ValidationError(
                f"Longitude '{lon}' is invalid - must be between -180 and 180"
            )

    return Coordinate(lat1, lon1), Coordinate(lat2, lon2)
