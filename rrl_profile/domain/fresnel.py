# rrl_profile/domain/fresnel.py
import numpy as np
from numpy.typing import NDArray

from rrl_profile.domain.constants import SPEED_OF_LIGHT
from rrl_profile.domain.models.units import GigaHertz, Meters


def wavelength(freq_ghz: GigaHertz) -> Meters:
    """Radio wavelength in meters for a carrier frequency in GHz."""
    return Meters(SPEED_OF_LIGHT / (freq_ghz * 1e9))


def first_fresnel_radius(
    distances_m: NDArray[np.float64], total_m: float, freq_ghz: GigaHertz
) -> NDArray[np.float64]:
    """
    Radius of the first Fresnel zone along the path.

    Args:
        distances_m: 1D array of distances from site A in meters.
        total_m: Total path length in meters.
        freq_ghz: Carrier frequency in GHz.

    Returns:
        1D array of radii in meters, zero at both endpoints.
    """
    lam = wavelength(freq_ghz)
    # r1 = sqrt(lambda * d1 * d2 / D)
    return np.sqrt(lam * distances_m * (total_m - distances_m) / total_m)
