# rrl_profile/domain/curvature.py
import numpy as np
from numpy.typing import NDArray

from rrl_profile.domain.constants import EARTH_RADIUS_M


def effective_earth_radius(k_factor: float) -> float:
    """Earth radius scaled by the atmospheric refraction factor, in meters."""
    return k_factor * EARTH_RADIUS_M


def apply_geometric_curvature(
    distances_m: NDArray[np.float64], total_m: float, k_factor: float
) -> NDArray[np.float64]:
    """
    Apply Earth curvature correction (bulge) relative to the chord between the sites.

    Args:
        distances_m: 1D array of distances from site A in meters.
        total_m: Total path length in meters.
        k_factor: Effective Earth radius factor (e.g. 4/3).

    Returns:
        1D array of curvature corrections in meters (positive values).
    """
    # Formula: h = d * (D - d) / (2 * k * R)
    # One factor of the numerator is exactly zero at each endpoint
    return distances_m * (total_m - distances_m) / (2 * effective_earth_radius(k_factor))
