# tests/unit/domain/test_curvature.py
import numpy as np
import pytest

from rrl_profile.domain.constants import EARTH_RADIUS_M
from rrl_profile.domain.curvature import apply_geometric_curvature, effective_earth_radius


def test_apply_geometric_curvature_upward_bulge():
    """
    Test that apply_geometric_curvature produces an upward bulge relative to endpoints.
    """
    # Arrange: A simple 100 km path
    distances_m = np.array([0.0, 25_000.0, 50_000.0, 75_000.0, 100_000.0])

    # Act
    bulge = apply_geometric_curvature(distances_m, 100_000.0, k_factor=1.0)

    # Assert
    # The bulge is exactly 0 at the start and end
    assert bulge[0] == 0.0
    assert bulge[-1] == 0.0

    # Positive in the middle and symmetrical
    assert bulge[2] > bulge[1] > 0
    assert np.isclose(bulge[1], bulge[3])

    # h = d * (D - d) / (2 * k * R)
    expected_midpoint_height = 50_000.0 * 50_000.0 / (2 * EARTH_RADIUS_M)
    assert np.isclose(bulge[2], expected_midpoint_height)


def test_apply_geometric_curvature_k_factor_flattens_earth():
    distances_m = np.array([0.0, 500.0, 1000.0])

    plain = apply_geometric_curvature(distances_m, 1000.0, k_factor=1.0)
    refracted = apply_geometric_curvature(distances_m, 1000.0, k_factor=4 / 3)

    assert np.isclose(refracted[1], plain[1] * 0.75)


def test_apply_geometric_curvature_short_hop_value():
    bulge = apply_geometric_curvature(np.array([0.0, 500.0, 1000.0]), 1000.0, 1.33)

    assert bulge[1] == pytest.approx(0.014752, abs=1e-5)


def test_apply_geometric_curvature_empty_input():
    bulge = apply_geometric_curvature(np.array([]), 1000.0, 1.33)

    assert bulge.shape == (0,)


def test_effective_earth_radius():
    assert effective_earth_radius(1.0) == EARTH_RADIUS_M
    assert effective_earth_radius(1.33) == pytest.approx(8_473_430.0)
