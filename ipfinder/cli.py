"""Command-line front-end: print each provider's answer as soon as it arrives."""

import argparse
import asyncio
import sys

from ipfinder.clients.provider_client import DEFAULT_TIMEOUT_SECONDS
from ipfinder.engine import LookupEngine
from ipfinder.formatting import format_result
from ipfinder.logger import configure_logging, logger
from ipfinder.models.request_models import DEFAULT_LOOKUP_IP, validate_ip


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ipfinder",
        description="Look up the location and network owner of an IP address across several providers.",
    )
    parser.add_argument(
        "ip",
        nargs="?",
        default=DEFAULT_LOOKUP_IP,
        help=f"IPv4 or IPv6 address to look up (default: {DEFAULT_LOOKUP_IP})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_SECONDS,
        help=f"Per-provider request timeout in seconds (default: {DEFAULT_TIMEOUT_SECONDS})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log provider failures")
    return parser


async def run_lookup(engine: LookupEngine, ip: str) -> int:
    """Print every non-empty result and return how many were printed."""
    found = 0
    async for result in engine.lookup(ip):
        if result.is_empty:
            continue
        if found:
            print()
        print("\n".join(format_result(result)))
        found += 1
    return found


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        ip = validate_ip(args.ip.strip() or DEFAULT_LOOKUP_IP)
    except ValueError as exc:
        parser.error(str(exc))

    configure_logging("DEBUG" if args.verbose else "WARNING")

    engine = LookupEngine(timeout_seconds=args.timeout)
    found = asyncio.run(run_lookup(engine, ip))
    if not found:
        logger.warning(f"No provider returned data for ip={ip}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
