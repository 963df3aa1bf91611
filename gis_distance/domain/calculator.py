"""
Distance Calculator  (Facade)
=============================

Holds two fixed coordinates plus a mutable ``(radius, formula)``
configuration and memoises one result per configuration.

Caching
-------
The cache maps ``(formula, radius)`` to a computed ``Distance``.  Any
change of radius or formula to a *different* value clears it, so the
cache never holds more than one entry per formula for the current radius.

Concurrency safety
------------------
Configuration and cache are guarded by a per-instance ``RLock``.  The
formula itself runs outside the lock; its result is stored only if the
configuration is unchanged when it finishes.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from gis_distance.config import MAX_RADIUS_KM, MIN_RADIUS_KM, Settings, settings

from .distance import DistanceFormula, build_formulas
from .entities import Coordinate, Distance, validate_coordinates
from .enums import SUPPORTED_FORMULAS, FormulaKind
from .errors import RangeError, UnsupportedFormulaError

logger = logging.getLogger(__name__)

CacheKey = tuple[FormulaKind, float]


class DistanceCalculator:
    """Great-circle / ellipsoidal distance between two fixed points, in km."""

    def __init__(
        self,
        latitude1: float,
        longitude1: float,
        latitude2: float,
        longitude2: float,
        config: Optional[Settings] = None,
    ):
        self._point_a, self._point_b = validate_coordinates(
            latitude1, longitude1, latitude2, longitude2
        )
        if config is None:
            config = settings
        self._radius = float(config.default_radius_km)
        self._formula = config.default_formula
        self._formulas: dict[FormulaKind, DistanceFormula] = build_formulas(
            config.vincenty_max_iterations, config.vincenty_tolerance
        )
        self._cache: dict[CacheKey, Distance] = {}
        self._lock = threading.RLock()

    # ── Points ────────────────────────────────────────────────────────

    @property
    def point_a(self) -> Coordinate:
        return self._point_a

    @property
    def point_b(self) -> Coordinate:
        return self._point_b

    # ── Radius ────────────────────────────────────────────────────────

    @property
    def radius(self) -> float:
        """Earth radius in kilometers used by the spherical formulas."""
        return self._radius

    @radius.setter
    def radius(self, kms: float) -> None:
        self.set_radius(kms)

    def set_radius(self, kms: float) -> None:
        """
        Set the Earth radius in kilometers.

        The Earth is not a perfect sphere, so the radius is adjustable, but
        only within [6357.0, 6378.0] (polar to equatorial).  Anything else
        raises ``RangeError`` and leaves the current radius in place.
        """
        try:
            value = float(kms)
        except (TypeError, ValueError) as exc:
            raise RangeError(
                f"Proposed radius {kms!r} is not a number; "
                f"must be between {MIN_RADIUS_KM} and {MAX_RADIUS_KM}"
            ) from exc

        if not MIN_RADIUS_KM <= value <= MAX_RADIUS_KM:
            raise RangeError(
                f"Proposed radius '{value}' is out of range; "
                f"must be between {MIN_RADIUS_KM} and {MAX_RADIUS_KM}"
            )

        with self._lock:
            if value == self._radius:
                return
            logger.info("Radius changed %s -> %s km", self._radius, value)
            self._radius = value
            self._cache.clear()

    # ── Formula ───────────────────────────────────────────────────────

    @property
    def formula(self) -> FormulaKind:
        return self._formula

    @formula.setter
    def formula(self, name: "str | FormulaKind") -> None:
        self.set_formula(name)

    def set_formula(self, name: "str | FormulaKind") -> None:
        """Select the formula by case-insensitive name."""
        kind = FormulaKind.parse(name)
        if kind is None:
            raise UnsupportedFormulaError(
                f"Formula {name!r} not supported; "
                f"choose one of: {', '.join(SUPPORTED_FORMULAS)}"
            )

        with self._lock:
            if kind is self._formula:
                return
            logger.info("Formula changed %s -> %s", self._formula.value, kind.value)
            self._formula = kind
            self._cache.clear()

    # ── Distance ──────────────────────────────────────────────────────

    def distance(self) -> Distance:
        """Distance in kilometers between the two points."""
        with self._lock:
            key: CacheKey = (self._formula, self._radius)
            cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        logger.debug("Cache miss for %s; computing", key)
        formula, radius = key
        result = Distance(
            self._formulas[formula].calculate(self._point_a, self._point_b, radius)
        )

        with self._lock:
            if key == (self._formula, self._radius):
                self._cache[key] = result
        return result

    def __repr__(self) -> str:
        return (
            f"DistanceCalculator({self._point_a}, {self._point_b}, "
            f"radius={self._radius}, formula={self._formula.value!r})"
        )
