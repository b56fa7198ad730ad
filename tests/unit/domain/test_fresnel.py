import numpy as np
import pytest

from rrl_profile.domain.fresnel import first_fresnel_radius, wavelength


def test_wavelength_at_18_ghz():
    assert wavelength(18) == pytest.approx(0.016655, abs=1e-6)


def test_wavelength_scales_inversely_with_frequency():
    assert wavelength(6) == pytest.approx(2 * wavelength(12))


def test_first_fresnel_radius_zero_at_endpoints():
    radii = first_fresnel_radius(np.array([0.0, 250.0, 500.0, 750.0, 1000.0]), 1000.0, 18)

    assert radii[0] == 0.0
    assert radii[-1] == 0.0
    assert np.isclose(radii[1], radii[3])
    assert radii[2] == np.max(radii)


def test_first_fresnel_radius_midpoint_value():
    radii = first_fresnel_radius(np.array([0.0, 500.0, 1000.0]), 1000.0, 18)

    # sqrt(lambda * 500 * 500 / 1000)
    assert radii[1] == pytest.approx(2.0405, abs=1e-3)


def test_first_fresnel_radius_shrinks_with_frequency():
    distances = np.array([0.0, 5000.0, 10_000.0])

    low = first_fresnel_radius(distances, 10_000.0, 6)
    high = first_fresnel_radius(distances, 10_000.0, 24)

    assert np.isclose(high[1], low[1] / 2)
