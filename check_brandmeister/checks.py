"""Repeater last-seen evaluation.

``evaluate`` turns a ``last_updated`` timestamp into elapsed minutes and a
status. ``check_repeater`` runs the whole fetch + evaluate path and folds
the two expected failure kinds into an UNKNOWN result.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import IntEnum

from check_brandmeister.brandmeister_client import BrandMeisterClient, FetchError
from check_brandmeister.log import get_logger

logger = get_logger("checks")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Status(IntEnum):
    """Plugin states; the value is the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


class InvalidTimestamp(ValueError):
    """The API timestamp did not match ``YYYY-MM-DD HH:MM:SS``."""

    def __init__(self, timestamp: str) -> None:
        super().__init__(f"invalid last_updated timestamp {timestamp!r}")
        self.timestamp = timestamp


@dataclass(frozen=True)
class EvaluationResult:
    elapsed_minutes: int
    status: Status
    warn_minutes: int
    critical_minutes: int


@dataclass(frozen=True)
class CheckResult:
    repeater_id: int
    status: Status
    evaluation: EvaluationResult | None = None
    detail: str = ""  # failure reason when no evaluation is available


def parse_timestamp(timestamp: str) -> datetime:
    """Parse an API timestamp as UTC."""
    try:
        parsed = datetime.strptime(timestamp, TIMESTAMP_FORMAT)
    except (TypeError, ValueError) as e:
        raise InvalidTimestamp(timestamp) from e
    return parsed.replace(tzinfo=timezone.utc)


def whole_minutes(delta: timedelta) -> int:
    """Minutes in ``delta``, truncated toward zero."""
    minutes = abs(delta) // timedelta(minutes=1)
    return -minutes if delta < timedelta(0) else minutes


def classify(elapsed_minutes: int, warn_minutes: int, critical_minutes: int) -> Status:
    # Critical is checked first so it wins when warn > critical.
    if elapsed_minutes >= critical_minutes:
        return Status.CRITICAL
    if elapsed_minutes >= warn_minutes:
        return Status.WARNING
    return Status.OK


def evaluate(
    timestamp: str,
    warn_minutes: int,
    critical_minutes: int,
    now: datetime,
) -> EvaluationResult:
    """Evaluate a ``last_updated`` timestamp against the thresholds.

    ``now`` is treated as UTC when it carries no tzinfo. A timestamp in the
    future yields negative elapsed minutes, which are kept as-is.

    Raises:
        InvalidTimestamp: if ``timestamp`` cannot be parsed.
    """
    last_seen = parse_timestamp(timestamp)
    elapsed = whole_minutes(_as_utc(now) - last_seen)
    return EvaluationResult(
        elapsed_minutes=elapsed,
        status=classify(elapsed, warn_minutes, critical_minutes),
        warn_minutes=warn_minutes,
        critical_minutes=critical_minutes,
    )


def check_repeater(
    client: BrandMeisterClient,
    repeater_id: int,
    warn_minutes: int,
    critical_minutes: int,
    now: datetime | None = None,
) -> CheckResult:
    """Fetch and evaluate one repeater; fetch or parse failures become UNKNOWN."""
    try:
        last_updated = client.fetch_last_updated(repeater_id)
        evaluation = evaluate(
            last_updated,
            warn_minutes,
            critical_minutes,
            now or datetime.now(timezone.utc),
        )
    except (FetchError, InvalidTimestamp) as e:
        logger.warning("repeater_check_unknown", repeater_id=repeater_id, error=str(e))
        return CheckResult(repeater_id, Status.UNKNOWN, detail=str(e))

    logger.info(
        "repeater_evaluated",
        repeater_id=repeater_id,
        elapsed_minutes=evaluation.elapsed_minutes,
        status=evaluation.status.name,
    )
    return CheckResult(repeater_id, evaluation.status, evaluation=evaluation)


def last_seen_minutes(
    repeater_id: int,
    client: BrandMeisterClient | None = None,
    now: datetime | None = None,
) -> int:
    """Return the number of minutes since the repeater was seen on BrandMeister.

    Example:
        from check_brandmeister import last_seen_minutes
        minutes = last_seen_minutes(270107)

    Raises:
        FetchError: if the API could not be queried.
        InvalidTimestamp: if the API returned an unparsable timestamp.
    """
    client = client or BrandMeisterClient()
    last_seen = parse_timestamp(client.fetch_last_updated(repeater_id))
    return whole_minutes(_as_utc(now or datetime.now(timezone.utc)) - last_seen)


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
