import argparse
import asyncio
import sys

from environs import Env

from rrl_profile.logging_config import setup_logging
from rrl_profile.adapter import RrlProfileAPI
from rrl_profile.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
    OutputFormatter,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="RRL path profile: line of sight and Fresnel zone clearance"
    )
    parser.add_argument(
        "--a", type=float, nargs=2, required=True, metavar=("LAT", "LON"),
        help="Site A coordinates in decimal degrees",
    )
    parser.add_argument(
        "--b", type=float, nargs=2, required=True, metavar=("LAT", "LON"),
        help="Site B coordinates in decimal degrees",
    )
    parser.add_argument("--antenna-a", type=float, required=True, help="Mast height at A, m")
    parser.add_argument("--antenna-b", type=float, required=True, help="Mast height at B, m")
    parser.add_argument("--freq", type=float, required=True, help="Frequency, GHz")
    parser.add_argument("--k", type=float, default=1.33, help="Refraction k-factor")
    parser.add_argument("--step", type=float, default=30.0, help="Sampling step, m")
    parser.add_argument("--name-a", type=str, default=None, help="Site A name")
    parser.add_argument("--name-b", type=str, default=None, help="Site B name")
    parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )
    parser.add_argument(
        "--samples", action="store_true", help="Include the per-sample listing"
    )
    return parser


async def run(args: argparse.Namespace, env: Env) -> int:
    api = RrlProfileAPI.create_from_env(env)
    formatter: OutputFormatter = JSONOutputFormatter() if args.json else ConsoleOutputFormatter()

    request = RrlProfileAPI.build_request(
        coord_a=args.a,
        coord_b=args.b,
        antenna_a=args.antenna_a,
        antenna_b=args.antenna_b,
        freq_ghz=args.freq,
        k_factor=args.k,
        step_meters=args.step,
        name_a=args.name_a,
        name_b=args.name_b,
    )
    outcome = await api.calculate_outcome(request)

    if not outcome.ok:
        print(formatter.format_error(outcome.error), file=sys.stderr)
        return 1

    print(formatter.format_result(outcome.value, include_samples=args.samples or args.json))
    return 0


def main() -> None:
    args = build_parser().parse_args()

    # Load environment variables as early as possible within main()
    env = Env()
    env.read_env(".env")

    setup_logging(env)

    sys.exit(asyncio.run(run(args, env)))


if __name__ == "__main__":
    main()
