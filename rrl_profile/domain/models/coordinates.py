from dataclasses import dataclass
from typing import NamedTuple

from .units import Degrees, GigaHertz, Meters


class GeoPoint(NamedTuple):
    lat: Degrees
    lon: Degrees
    name: str | None = None


@dataclass(frozen=True, slots=True)
class ProfileRequest:
    """
    Model that holds a path profile request.

    Sites A and B, antenna mast heights above ground, carrier frequency,
    effective Earth radius factor and the sampling step along the path.
    """

    a: GeoPoint
    b: GeoPoint
    antenna_a: Meters
    antenna_b: Meters
    freq_ghz: GigaHertz
    k_factor: float = 1.33
    step_meters: Meters = Meters(30.0)

    def to_dict(self) -> dict:
        return {
            "a": self.a._asdict(),
            "b": self.b._asdict(),
            "antenna_a": self.antenna_a,
            "antenna_b": self.antenna_b,
            "freq_ghz": self.freq_ghz,
            "k_factor": self.k_factor,
            "step_meters": self.step_meters,
        }
