"""
Concurrency safety tests.

Demonstrates:
1. Concurrent readers and writers on one calculator never observe a
   distance computed for a different radius than the one cached.
2. A result computed while the configuration changed is not cached.
"""

from __future__ import annotations

import threading

import pytest

from gis_distance.domain.calculator import DistanceCalculator
from gis_distance.domain.distance import HaversineFormula
from gis_distance.domain.enums import FormulaKind

from tests.conftest import POINTS


class TestSharedCalculator:
    def test_concurrent_mutation_and_reads(self):
        calc = DistanceCalculator(*POINTS)
        radii = [6357.0 + i for i in range(22)]
        errors: list[BaseException] = []
        start = threading.Barrier(8)

        def writer(offset: int):
            start.wait()
            for i in range(200):
                calc.set_radius(radii[(i + offset) % len(radii)])
                calc.set_formula("cosines" if i % 2 else "haversine")

        def reader():
            start.wait()
            try:
                for _ in range(200):
                    assert calc.distance() > 0
            except BaseException as exc:  # surfaced in the main thread
                errors.append(exc)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        threads += [threading.Thread(target=reader) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        calc.set_formula("haversine")
        expected = HaversineFormula().calculate(calc.point_a, calc.point_b, calc.radius)
        assert calc.distance() == pytest.approx(expected)


class TestStaleResults:
    def test_result_for_superseded_config_is_not_cached(self):
        calc = DistanceCalculator(*POINTS)
        real = HaversineFormula()

        class Meddling(HaversineFormula):
            def calculate(self, a, b, radius_km):
                calc.set_radius(6370.0)
                return real.calculate(a, b, radius_km)

        calc._formulas[FormulaKind.HAVERSINE] = Meddling()
        stale = calc.distance()
        assert stale == pytest.approx(real.calculate(calc.point_a, calc.point_b, 6367.45))
        assert calc._cache == {}
