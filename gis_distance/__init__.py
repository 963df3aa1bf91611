"""
gis-distance
============

Distance between two latitude/longitude pairs, in kilometers, using the
haversine formula, the spherical law of cosines or Vincenty's formula on
the WGS-84 ellipsoid.

    calc = DistanceCalculator(40.47, 73.58, 34.3, 118.15)
    calc.distance()             # ~3952.39 km
    calc.distance().to_miles()  # ~2455.9 mi
"""

from gis_distance.config import (
    DEFAULT_RADIUS_KM,
    MAX_RADIUS_KM,
    MIN_RADIUS_KM,
    Settings,
    settings,
)
from gis_distance.domain.calculator import DistanceCalculator
from gis_distance.domain.distance import WGS84_A, WGS84_B, WGS84_F
from gis_distance.domain.entities import KM_TO_MILES, Coordinate, Distance, to_miles
from gis_distance.domain.enums import SUPPORTED_FORMULAS, FormulaKind
from gis_distance.domain.errors import (
    ConvergenceError,
    DistanceError,
    RangeError,
    UnsupportedFormulaError,
    ValidationError,
)

__version__ = "1.1.0"

__all__ = [
    "ConvergenceError",
    "Coordinate",
    "DEFAULT_RADIUS_KM",
    "Distance",
    "DistanceCalculator",
    "DistanceError",
    "FormulaKind",
    "KM_TO_MILES",
    "MAX_RADIUS_KM",
    "MIN_RADIUS_KM",
    "RangeError",
    "SUPPORTED_FORMULAS",
    "Settings",
    "UnsupportedFormulaError",
    "ValidationError",
    "WGS84_A",
    "WGS84_B",
    "WGS84_F",
    "settings",
    "to_miles",
]
