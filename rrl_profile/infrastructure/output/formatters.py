"""Output formatting services for console and JSON display."""

import json
from typing import Protocol

from rrl_profile.domain.exceptions import RrlProfileException
from rrl_profile.domain.models.analysis import ProfileResult


def _format_dict_floats(d, precision):
    for k, v in d.items():
        if isinstance(v, float):
            d[k] = round(v, precision)
        elif isinstance(v, dict):
            _format_dict_floats(v, precision)
        elif isinstance(v, list):
            d[k] = [
                _format_dict_floats(i, precision)
                if isinstance(i, dict)
                else (round(i, precision) if isinstance(i, float) else i)
                for i in v
            ]
    return d


def _build_output_dict(result: ProfileResult, include_samples: bool = True) -> dict:
    output_dict = _format_dict_floats(result.to_dict(), 3)
    if not include_samples:
        output_dict.pop("samples", None)
    return output_dict


def _format_meters(value: float | None) -> str:
    if value is None:
        return "not achievable"
    return f"{value:.2f} m"


def _site_label(point, default: str) -> str:
    return point.name or default


class OutputFormatter(Protocol):
    """Protocol for output formatting strategies"""

    def format_result(self, result: ProfileResult, include_samples: bool = False) -> str:
        """Render a profile result"""
        ...

    def format_error(self, error: RrlProfileException) -> str:
        """Render a pipeline failure"""
        ...


class ConsoleOutputFormatter:
    """Format profile results for console output"""

    def format_result(self, result: ProfileResult, include_samples: bool = False) -> str:
        request = result.input
        summary = result.summary
        critical = summary.critical_point
        lift = summary.recommended_lift

        output = []
        output.append(f"\n{'=' * 60}")
        output.append("RRL Path Profile")
        output.append(f"{'=' * 60}")

        output.append("\n📍 Sites:")
        output.append(
            f"  {_site_label(request.a, 'Site A') + ':':<24} {request.a.lat:.6f}°, "
            f"{request.a.lon:.6f}°, mast {request.antenna_a:.1f} m"
        )
        output.append(
            f"  {_site_label(request.b, 'Site B') + ':':<24} {request.b.lat:.6f}°, "
            f"{request.b.lon:.6f}°, mast {request.antenna_b:.1f} m"
        )

        output.append("\n📡 Link Parameters:")
        output.append(f"  Distance:                {summary.distance_meters / 1000:.3f} km")
        output.append(f"  Frequency:               {request.freq_ghz:.2f} GHz")
        output.append(f"  k-factor:                {request.k_factor:.2f}")
        output.append(f"  Samples:                 {len(result.samples)}")
        if result.elevation_provider:
            output.append(f"  Elevation source:        {result.elevation_provider}")

        output.append("\n📐 Clearance:")
        output.append(
            f"  Line of sight:           {'OK' if summary.los_ok else 'BLOCKED'}"
        )
        output.append(
            f"  Fresnel 60%:             {'OK' if summary.fresnel_ok else 'VIOLATED'}"
        )
        output.append(f"  Min clearance:           {_format_meters(summary.min_clearance)}")
        output.append(f"  Min 60% clearance:       {_format_meters(summary.min_clearance60)}")
        output.append(
            f"  Critical point:          {critical.distance_meters / 1000:.3f} km, "
            f"lat {critical.lat:.6f}, lon {critical.lon:.6f}"
        )

        output.append("\n🗼 Recommended Mast Lift:")
        output.append(f"  Only A:                  {_format_meters(lift.only_a)}")
        output.append(f"  Only B:                  {_format_meters(lift.only_b)}")
        output.append(f"  Both equally:            {_format_meters(lift.both_equal)}")

        if include_samples:
            output.append("\n📊 Samples:")
            output.append(
                f"  {'#':>5} {'dist, m':>10} {'terrain':>9} {'terr+k':>9} "
                f"{'LoS':>9} {'R1':>7} {'clr':>8} {'clr60':>8}"
            )
            for s in result.samples:
                output.append(
                    f"  {s.index:>5} {s.distance_meters:>10.1f} {s.terrain:>9.2f} "
                    f"{s.terrain_eff:>9.2f} {s.los:>9.2f} {s.fresnel_r1:>7.2f} "
                    f"{s.clearance:>8.2f} {s.clearance60:>8.2f}"
                )

        return "\n".join(output)

    def format_error(self, error: RrlProfileException) -> str:
        text = f"❌ {error.code}: {error.message}"
        if error.details:
            text += f"\n   {error.details}"
        return text


class JSONOutputFormatter:
    """Format profile results as JSON"""

    def format_result(self, result: ProfileResult, include_samples: bool = True) -> str:
        return json.dumps(
            _build_output_dict(result, include_samples), indent=2, ensure_ascii=False
        )

    def format_error(self, error: RrlProfileException) -> str:
        return json.dumps(error.to_payload(), indent=2, ensure_ascii=False)
