"""check_brandmeister command-line entry point.

Called by Nagios / LibreNMS, but can be run by hand:

    check_brandmeister --repeater 270107
    BrandMeister repeater 270107 is OK: online status| 'last_seen_min'=0;10;15;;

Exit codes follow the plugin convention: 0 OK, 1 WARNING, 2 CRITICAL,
3 UNKNOWN (including usage errors).
"""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from check_brandmeister import __version__
from check_brandmeister.brandmeister_client import BrandMeisterClient
from check_brandmeister.checks import Status, check_repeater
from check_brandmeister.config import Settings
from check_brandmeister.plugin import render, render_config_error


class PluginArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors as UNKNOWN."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(Status.UNKNOWN, f"{self.prog}: error: {message}\n")


def repeater_id(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid repeater id: {value!r}") from None
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"repeater id must be positive: {value!r}")
    return parsed


def minutes(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid minutes: {value!r}") from None
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"minutes must not be negative: {value!r}")
    return parsed


def build_parser(settings: Settings) -> PluginArgumentParser:
    parser = PluginArgumentParser(
        prog="check_brandmeister",
        description="Check when a ham-radio repeater was last seen on the BrandMeister network.",
    )
    parser.add_argument(
        "-r", "--repeater",
        type=repeater_id,
        required=True,
        metavar="repeater",
        help="BM repeater id, e.g. 270107",
    )
    parser.add_argument(
        "-w", "--warn",
        type=minutes,
        default=settings.warn_minutes,
        metavar="warn_minutes",
        help="Inactive time in minutes before Warning state (default: %(default)s)",
    )
    parser.add_argument(
        "-c", "--critical",
        type=minutes,
        default=settings.critical_minutes,
        metavar="critical_minutes",
        help="Inactive time in minutes before Critical state (default: %(default)s)",
    )
    parser.add_argument(
        "-H", "--host",
        metavar="host",
        help="Ignored. For compatibility with nagios Host",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        settings = Settings()
    except ValidationError as e:
        print(render_config_error(e))
        print(e, file=sys.stderr)
        return int(Status.UNKNOWN)

    args = build_parser(settings).parse_args(argv)

    client = BrandMeisterClient(settings.brandmeister_api_url)
    result = check_repeater(client, args.repeater, args.warn, args.critical)

    print(render(result))
    return int(result.status)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
