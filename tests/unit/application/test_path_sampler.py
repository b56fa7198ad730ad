import math

import numpy as np
import pytest

from rrl_profile.application.services.coordinates import CoordinatesService
from rrl_profile.application.services.profile import PathSampler
from rrl_profile.domain.exceptions import CalculationError, ValidationError
from rrl_profile.domain.models.coordinates import GeoPoint
from rrl_profile.domain.validators import expected_sample_count

SITE_A = GeoPoint(52.072472, 113.376417, "A")
SITE_B = GeoPoint(52.074328, 113.385764, "B")


class TestPathSampler:
    def setup_method(self):
        self.sampler = PathSampler()
        self.distance = CoordinatesService(SITE_A, SITE_B).get_distance()
        self.points = self.sampler.sample(SITE_A, SITE_B, 30.0)

    def test_path_length(self):
        assert 650 < self.distance < 700

    def test_endpoints_are_pinned_to_sites(self):
        first, last = self.points[0], self.points[-1]

        assert (first.lat, first.lon, first.distance_meters) == (SITE_A.lat, SITE_A.lon, 0.0)
        assert (last.lat, last.lon) == (SITE_B.lat, SITE_B.lon)
        assert last.distance_meters == self.distance

    def test_sample_count(self):
        assert len(self.points) == expected_sample_count(self.distance, 30.0)
        assert [p.index for p in self.points] == list(range(len(self.points)))

    def test_distances_increase_with_even_spacing(self):
        distances = np.array([p.distance_meters for p in self.points])
        segments = len(self.points) - 1

        assert np.all(np.diff(distances) > 0)
        np.testing.assert_allclose(np.diff(distances), self.distance / segments)

    def test_points_lie_on_the_great_circle(self):
        for point in self.points[1:-1]:
            from_a = CoordinatesService(SITE_A, GeoPoint(point.lat, point.lon)).get_distance()
            to_b = CoordinatesService(GeoPoint(point.lat, point.lon), SITE_B).get_distance()

            assert from_a == pytest.approx(point.distance_meters, abs=1e-3)
            assert from_a + to_b == pytest.approx(self.distance, abs=1e-3)


def test_large_step_still_yields_three_points():
    points = PathSampler().sample(SITE_A, SITE_B, 1000.0)

    assert len(points) == 3


def test_request_size_limit():
    with pytest.raises(ValidationError, match="limit is 10"):
        PathSampler(max_samples=10).sample(SITE_A, SITE_B, 30.0)


def test_path_too_short():
    with pytest.raises(CalculationError, match="too short"):
        PathSampler().sample(GeoPoint(52.0, 113.0), GeoPoint(52.00005, 113.0), 30.0)


def test_path_across_antimeridian():
    a, b = GeoPoint(0.0, 179.999), GeoPoint(0.0, -179.999)

    points = PathSampler().sample(a, b, 30.0)
    distance = points[-1].distance_meters

    assert distance == pytest.approx(2 * math.radians(0.001) * 6_371_000, rel=1e-6)
    assert all(-180 <= p.lon <= 180 for p in points)
    assert all(abs(abs(p.lon) - 180) < 0.0011 for p in points)
