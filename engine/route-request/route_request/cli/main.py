"""
CLI entrypoint for route-request.
Translates a plan-query argument document (JSON) into a RouteRequest and prints it.

JSON / pretty output goes to stdout via oprint().
Diagnostics/trace/debug go to stderr via logging.

Exit codes:
    0  translated
    2  invalid input (bad argument value, unreadable file, unknown time zone)
    3  schema contract violation (argument of the wrong runtime type)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from route_request.cli.logging_setup import setup_cli_logging
from route_request.config.config import load_route_request_defaults
from route_request.context import ServerRequestContext
from route_request.contracts.enums import BicycleOptimizeType
from route_request.contracts.errors import InvalidArgument, SchemaContractViolation
from route_request.mapping.route_request_mapper import to_route_request
from route_request.model.route_request import RouteRequest

logger = logging.getLogger("route_request.cli")

EXIT_INVALID_ARGUMENT = 2
EXIT_SCHEMA_CONTRACT_VIOLATION = 3


def oprint(*args, **kwargs) -> None:
    """
    User-facing output printer (stdout).
    Use this for --output=pretty so pipes/redirection work as expected.
    """
    try:
        print(*args, file=sys.stdout, flush=True, **kwargs)
    except BrokenPipeError:
        raise SystemExit(0)


def _read_arguments(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, "r", encoding="utf-8") as fh:
        return json.load(fh)


def _print_section(title: str) -> None:
    oprint("")
    oprint(title)
    oprint("=" * len(title))


def _fmt_place(place) -> str:
    if place is None:
        return "-"
    if place.stop_id is not None:
        where = str(place.stop_id)
    elif place.lat is not None and place.lng is not None:
        where = f"{place.lat:.5f},{place.lng:.5f}"
    else:
        where = "(unspecified)"
    return f"{place.label} [{where}]" if place.label else where


def _print_pretty(request: RouteRequest) -> None:
    journey = request.journey
    prefs = request.preferences

    oprint("Route request")
    oprint("-------------")
    oprint(f"From:        {_fmt_place(request.from_place)}")
    oprint(f"To:          {_fmt_place(request.to_place)}")
    oprint(f"Time:        {request.date_time.isoformat()} ({'arrive by' if request.arrive_by else 'depart at'})")
    oprint(f"Itineraries: {request.num_itineraries} | Wheelchair: {request.wheelchair} | Locale: {request.locale}")

    _print_section("Modes")
    oprint(f"Access:   {journey.access.mode.value}")
    oprint(f"Egress:   {journey.egress.mode.value}")
    oprint(f"Direct:   {journey.direct.mode.value}")
    oprint(f"Transfer: {journey.transfer.mode.value}")

    _print_section("Transit")
    oprint(f"Enabled: {journey.transit.enabled}")
    if journey.transit.enabled:
        for i, f in enumerate(journey.transit.filters, 1):
            oprint(f"{i}. select={len(f.select)} not={len(f.not_)}")
    oprint(f"Unpreferred cost: {prefs.transit.unpreferred_cost.serialize()}")

    _print_section("Bike")
    oprint(f"Optimize: {prefs.bike.optimize_type.value}")
    if prefs.bike.optimize_type == BicycleOptimizeType.TRIANGLE:
        t = prefs.bike.optimize_triangle
        oprint(f"Triangle: time={t.time:.2f} slope={t.slope:.2f} safety={t.safety:.2f}")


def _build_context(args: argparse.Namespace) -> ServerRequestContext:
    return ServerRequestContext(
        route_request_defaults=load_route_request_defaults(path=args.defaults),
        time_zone=ZoneInfo(args.time_zone),
        default_locale=args.locale_default,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    p = argparse.ArgumentParser(prog="route-request")
    p.add_argument("--arguments", required=True, help="JSON file with plan-query arguments, or '-' for stdin")
    p.add_argument("--defaults", default=None, help="JSON file merged over the built-in routing defaults")
    p.add_argument("--time-zone", default="UTC")
    p.add_argument("--locale-default", default="en")

    p.add_argument("--output", choices=["pretty", "json"], default="pretty")
    p.add_argument("--json-indent", type=int, default=2)

    p.add_argument("--quiet", action="store_true")
    p.add_argument("--trace", action="store_true")

    args = p.parse_args(argv)

    setup_cli_logging(trace=args.trace, quiet=args.quiet)

    try:
        context = _build_context(args)
        arguments = _read_arguments(args.arguments)
    except (OSError, ValueError, ZoneInfoNotFoundError) as e:
        # Clean CLI failure (no traceback) for expected config/user errors.
        logger.error(str(e))
        raise SystemExit(EXIT_INVALID_ARGUMENT)

    try:
        request = to_route_request(arguments, context)
    except InvalidArgument as e:
        logger.error(str(e))
        raise SystemExit(EXIT_INVALID_ARGUMENT)
    except SchemaContractViolation as e:
        logger.error(str(e))
        raise SystemExit(EXIT_SCHEMA_CONTRACT_VIOLATION)

    if args.output == "json":
        payload = {
            "request": request.model_dump(mode="json", by_alias=True),
            "transit_enabled": request.journey.transit.enabled,
        }
        try:
            sys.stdout.write(json.dumps(payload, indent=args.json_indent) + "\n")
            sys.stdout.flush()
        except BrokenPipeError:
            return
    else:
        _print_pretty(request)

    if args.trace:
        logger.debug("argument keys=%s", sorted(arguments) if isinstance(arguments, dict) else "-")


if __name__ == "__main__":
    main()
