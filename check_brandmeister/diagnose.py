"""Diagnostic tool for check_brandmeister.

Shows the effective configuration and queries the BrandMeister API so a
failing check can be told apart from a misconfigured host.

Usage:
    check_brandmeister_diagnose
    check_brandmeister_diagnose --step config
    check_brandmeister_diagnose --step api --repeater 270107
"""

from __future__ import annotations

import argparse
import sys
import time
import traceback
from datetime import datetime, timezone

from check_brandmeister.log import setup_logging

setup_logging("DEBUG")

from check_brandmeister.brandmeister_client import BrandMeisterClient, FetchError  # noqa: E402
from check_brandmeister.checks import InvalidTimestamp, evaluate  # noqa: E402
from check_brandmeister.config import Settings  # noqa: E402


PASS = "\033[92m PASS \033[0m"
FAIL = "\033[91m FAIL \033[0m"
WARN = "\033[93m WARN \033[0m"

DEFAULT_REPEATER = 270107


def header(title: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}")


def result(label: str, ok: bool, detail: str = "") -> None:
    status = PASS if ok else FAIL
    print(f"  [{status}] {label}")
    if detail:
        for line in detail.strip().split("\n"):
            print(f"         {line}")


def warn(label: str, detail: str = "") -> None:
    print(f"  [{WARN}] {label}")
    if detail:
        for line in detail.strip().split("\n"):
            print(f"         {line}")


# -- Step: Config ──────────────────────────────────────────────

def check_config() -> Settings | None:
    header("Configuration")
    try:
        s = Settings()
    except Exception:
        result("Config loaded", False, traceback.format_exc())
        return None

    result("Config loaded", True)
    values = {
        "BRANDMEISTER_API_URL": s.brandmeister_api_url,
        "WARN_MINUTES": str(s.warn_minutes),
        "CRITICAL_MINUTES": str(s.critical_minutes),
        "LOG_LEVEL": s.log_level,
        "LOG_FORMAT": s.log_format,
    }
    for key, val in values.items():
        print(f"         {key} = {val}")

    if s.warn_minutes > s.critical_minutes:
        warn("WARN_MINUTES is above CRITICAL_MINUTES, WARNING state is unreachable")
    return s


# -- Step: API ─────────────────────────────────────────────────

def check_api(settings: Settings, repeater: int) -> bool:
    header(f"BrandMeister API (repeater {repeater})")
    client = BrandMeisterClient(settings.brandmeister_api_url)

    t0 = time.monotonic()
    try:
        last_updated = client.fetch_last_updated(repeater)
    except FetchError as e:
        cause = e.__cause__
        detail = f"{e}\n{type(cause).__name__}: {cause}" if cause else str(e)
        result("Repeater status", False, detail)
        return False
    elapsed_ms = int((time.monotonic() - t0) * 1000)
    result("Repeater status", True, f"last_updated = {last_updated} ({elapsed_ms} ms)")

    try:
        evaluation = evaluate(
            last_updated,
            settings.warn_minutes,
            settings.critical_minutes,
            datetime.now(timezone.utc),
        )
    except InvalidTimestamp as e:
        result("Timestamp parsed", False, str(e))
        return False
    result(
        "Timestamp parsed", True,
        f"last seen {evaluation.elapsed_minutes} min ago → {evaluation.status.name}",
    )
    if evaluation.elapsed_minutes < 0:
        warn("Remote clock is ahead of the local clock")
    return True


# -- Main ──────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="check_brandmeister diagnostic tool")
    parser.add_argument(
        "--step",
        choices=["config", "api", "all"],
        default="all",
        help="Which check to run (default: all)",
    )
    parser.add_argument(
        "--repeater",
        type=int,
        default=DEFAULT_REPEATER,
        help=f"Repeater id used for the API check (default: {DEFAULT_REPEATER})",
    )
    args = parser.parse_args(argv)

    print("\n" + "=" * 60)
    print("  CHECK_BRANDMEISTER DIAGNOSTIC TOOL")
    print("=" * 60)

    settings = check_config()
    if not settings:
        print("\n  Cannot proceed without valid config. Fix .env first.")
        return 1

    ok = True
    if args.step in ("all", "api"):
        ok = check_api(settings, args.repeater)

    print(f"\n{'='*60}")
    print("  DONE")
    print(f"{'='*60}\n")
    return 0 if ok else 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
