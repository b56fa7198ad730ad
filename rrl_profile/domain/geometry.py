import numpy as np
from numpy.typing import NDArray


def line_of_sight(
    distances_m: NDArray[np.float64], total_m: float, top_a: float, top_b: float
) -> NDArray[np.float64]:
    """
    Height of the straight line between the mast tops at each distance.

    Args:
        distances_m: 1D array of distances from site A in meters.
        total_m: Total path length in meters.
        top_a: Absolute height of the antenna at site A (ground + mast).
        top_b: Absolute height of the antenna at site B (ground + mast).

    Returns:
        1D array of line of sight heights above sea level.
    """
    fraction = distances_m / total_m
    return top_a + fraction * (top_b - top_a)


def mast_influence(distance_m: float, total_m: float) -> tuple[float, float]:
    """
    How much one meter of mast lift at A and at B raises the line of sight at a point.

    Returns:
        Tuple (influence_a, influence_b) that always sums to 1.
    """
    fraction = distance_m / total_m
    return 1.0 - fraction, fraction


def clearance_above(
    line: NDArray[np.float64], terrain_eff: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Signed vertical distance between a reference line and the effective terrain."""
    return line - terrain_eff
