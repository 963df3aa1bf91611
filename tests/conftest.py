"""
Shared test fixtures.

Strips any ``GIS_DISTANCE_*`` variables from the environment before the
package is imported so the module-level settings singleton always carries
the library defaults during the test run.
"""

import os

for _key in [k for k in os.environ if k.startswith("GIS_DISTANCE_")]:
    del os.environ[_key]

import pytest  # noqa: E402

from gis_distance.domain.calculator import DistanceCalculator  # noqa: E402

# New York-ish to Los Angeles-ish, as used by the original gem's suite
POINTS = (40.47, 73.58, 34.3, 118.15)


@pytest.fixture
def calc() -> DistanceCalculator:
    return DistanceCalculator(*POINTS)
