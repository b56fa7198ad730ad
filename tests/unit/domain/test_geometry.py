import numpy as np
import pytest

from rrl_profile.domain.geometry import clearance_above, line_of_sight, mast_influence


def test_line_of_sight_connects_mast_tops():
    los = line_of_sight(np.array([0.0, 250.0, 500.0, 1000.0]), 1000.0, 130.0, 120.0)

    np.testing.assert_allclose(los, [130.0, 127.5, 125.0, 120.0])


def test_line_of_sight_is_exact_at_endpoints():
    los = line_of_sight(np.array([0.0, 333.3, 997.1]), 997.1, 101.7, 243.9)

    assert los[0] == 101.7
    assert los[-1] == pytest.approx(243.9)


@pytest.mark.parametrize(
    "distance, expected",
    [
        (0.0, (1.0, 0.0)),
        (250.0, (0.75, 0.25)),
        (1000.0, (0.0, 1.0)),
    ],
)
def test_mast_influence(distance, expected):
    influence_a, influence_b = mast_influence(distance, 1000.0)

    assert influence_a == pytest.approx(expected[0])
    assert influence_b == pytest.approx(expected[1])
    assert influence_a + influence_b == pytest.approx(1.0)


def test_clearance_above_is_signed():
    clearance = clearance_above(np.array([10.0, 10.0]), np.array([4.0, 12.5]))

    np.testing.assert_allclose(clearance, [6.0, -2.5])
