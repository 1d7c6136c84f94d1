"""Nagios plugin output.

Renders a ``CheckResult`` into the single status line the monitoring
framework parses:

    BrandMeister repeater 270107 is OK: online status| 'last_seen_min'=0;10;15;;

UNKNOWN results carry the failure reason and no performance data.
"""

from __future__ import annotations

from pydantic import ValidationError

from check_brandmeister.checks import CheckResult, EvaluationResult, Status

PLUGIN_NAME = "BrandMeister"
PERFDATA_LABEL = "last_seen_min"


def perfdata(evaluation: EvaluationResult) -> str:
    return (
        f"'{PERFDATA_LABEL}'={evaluation.elapsed_minutes};"
        f"{evaluation.warn_minutes};{evaluation.critical_minutes};;"
    )


def status_text(evaluation: EvaluationResult) -> str:
    if evaluation.status == Status.OK:
        return "online status"
    return f"last seen {evaluation.elapsed_minutes} minutes ago"


def render(result: CheckResult) -> str:
    """Format the status line for a check result."""
    prefix = f"{PLUGIN_NAME} repeater {result.repeater_id} is {result.status.name}"
    if result.evaluation is None:
        return f"{prefix}: {result.detail}"
    return f"{prefix}: {status_text(result.evaluation)}| {perfdata(result.evaluation)}"


def render_config_error(error: ValidationError) -> str:
    """Status line for settings that failed validation, no perfdata."""
    fields = ", ".join(
        ".".join(str(part) for part in err["loc"]).upper() for err in error.errors()
    )
    return f"{PLUGIN_NAME} is UNKNOWN: invalid configuration ({fields})"
