"""
Distance formulas  (Strategy Pattern)
=====================================

Spherical
---------
* **Haversine**      -- half-angle sines, stable at short range.
* **Law of cosines** -- ``acos`` of the central-angle cosine; loses
  precision for very short distances because ``acos`` is flat near 1.0.

Both scale with the caller-supplied Earth radius.

Ellipsoidal
-----------
* **Vincenty** -- iterative inverse solution on the WGS-84 ellipsoid.
  The configured radius is **not** used: the ellipsoid axes are fixed, so
  changing the radius never changes a Vincenty result.  It can fail to
  converge for nearly antipodal points, in which case ``ConvergenceError``
  is raised.

Complexity: O(1) per call (Vincenty is bounded by its iteration limit).
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

from .entities import Coordinate
from .enums import FormulaKind
from .errors import ConvergenceError

logger = logging.getLogger(__name__)

WGS84_A = 6_378_137.0  # semi-major axis, metres
WGS84_F = 1 / 298.257223563  # flattening
WGS84_B = (1 - WGS84_F) * WGS84_A  # semi-minor axis, metres


# ── Strategy hierarchy ────────────────────────────────────────────────


class DistanceFormula(ABC):
    kind: FormulaKind

    @abstractmethod
    def calculate(self, a: Coordinate, b: Coordinate, radius_km: float) -> float: ...


class HaversineFormula(DistanceFormula):
    kind = FormulaKind.HAVERSINE

    def calculate(self, a: Coordinate, b: Coordinate, radius_km: float) -> float:
        lat1, lon1 = a.radians
        lat2, lon2 = b.radians
        dlat = lat2 - lat1
        dlon = lon2 - lon1

        h = (
            math.sin(dlat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        )
        # near-antipodal rounding can push h a hair past 1
        h = min(1.0, max(0.0, h))
        c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
        return radius_km * c


class LawOfCosinesFormula(DistanceFormula):
    kind = FormulaKind.COSINES

    def calculate(self, a: Coordinate, b: Coordinate, radius_km: float) -> float:
        if a == b:
            return 0.0

        lat1, lon1 = a.radians
        lat2, lon2 = b.radians

        cos_sigma = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(
            lat2
        ) * math.cos(lon2 - lon1)
        # rounding can push the cosine a hair past +/-1
        cos_sigma = max(-1.0, min(1.0, cos_sigma))
        return radius_km * math.acos(cos_sigma)


class VincentyFormula(DistanceFormula):
    """Vincenty (1975) inverse solution on WGS-84; ``radius_km`` is ignored."""

    kind = FormulaKind.VINCENTY

    def __init__(self, max_iterations: int = 100, tolerance: float = 1e-12):
        self.max_iterations = max_iterations
        self.tolerance = tolerance

    def calculate(self, a: Coordinate, b: Coordinate, radius_km: float) -> float:
        if a == b:
            return 0.0

        f = WGS84_F
        L = math.radians(b.longitude - a.longitude)

        # Reduced latitudes
        u1 = math.atan((1 - f) * math.tan(math.radians(a.latitude)))
        u2 = math.atan((1 - f) * math.tan(math.radians(b.latitude)))
        sin_u1, cos_u1 = math.sin(u1), math.cos(u1)
        sin_u2, cos_u2 = math.sin(u2), math.cos(u2)

        lam = L
        for iteration in range(1, self.max_iterations + 1):
            sin_lam, cos_lam = math.sin(lam), math.cos(lam)
            sin_sigma = math.sqrt(
                (cos_u2 * sin_lam) ** 2
                + (cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam) ** 2
            )
            if sin_sigma == 0.0:
                return 0.0

            cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
            sigma = math.atan2(sin_sigma, cos_sigma)
            sin_alpha = cos_u1 * cos_u2 * sin_lam / sin_sigma
            cos2_alpha = 1 - sin_alpha**2
            # equatorial line: cos2_alpha == 0
            cos_2sigma_m = (
                cos_sigma - 2 * sin_u1 * sin_u2 / cos2_alpha if cos2_alpha else 0.0
            )

            c = f / 16 * cos2_alpha * (4 + f * (4 - 3 * cos2_alpha))
            lam_prev = lam
            lam = L + (1 - c) * f * sin_alpha * (
                sigma
                + c
                * sin_sigma
                * (cos_2sigma_m + c * cos_sigma * (-1 + 2 * cos_2sigma_m**2))
            )
            if abs(lam - lam_prev) <= self.tolerance:
                logger.debug("Vincenty converged after %d iterations", iteration)
                break
        else:
            logger.warning(
                "Vincenty failed to converge after %d iterations for %s -> %s",
                self.max_iterations,
                a,
                b,
            )
            raise ConvergenceError(
                f"Vincenty formula failed to converge within "
                f"{self.max_iterations} iterations",
                iterations=self.max_iterations,
            )

        u_sq = cos2_alpha * (WGS84_A**2 - WGS84_B**2) / WGS84_B**2
        big_a = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
        big_b = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
        delta_sigma = (
            big_b
            * sin_sigma
            * (
                cos_2sigma_m
                + big_b
                / 4
                * (
                    cos_sigma * (-1 + 2 * cos_2sigma_m**2)
                    - big_b
                    / 6
                    * cos_2sigma_m
                    * (-3 + 4 * sin_sigma**2)
                    * (-3 + 4 * cos_2sigma_m**2)
                )
            )
        )

        metres = WGS84_B * big_a * (sigma - delta_sigma)
        return metres / 1000.0


def build_formulas(
    max_iterations: int = 100, tolerance: float = 1e-12
) -> dict[FormulaKind, DistanceFormula]:
    """One strategy per ``FormulaKind``."""
    formulas: dict[FormulaKind, DistanceFormula] = {
        FormulaKind.HAVERSINE: HaversineFormula(),
        FormulaKind.COSINES: LawOfCosinesFormula(),
        FormulaKind.VINCENTY: VincentyFormula(max_iterations, tolerance),
    }
    return formulas
