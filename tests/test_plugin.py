"""Tests for plugin status line rendering."""
from check_brandmeister.checks import CheckResult, EvaluationResult, Status
from check_brandmeister.plugin import perfdata, render


def _result(elapsed: int, status: Status, warn: int = 10, crit: int = 15) -> CheckResult:
    return CheckResult(270107, status, evaluation=EvaluationResult(elapsed, status, warn, crit))


def test_render_ok_line():
    """Test the OK line matches the documented example exactly."""
    line = render(_result(0, Status.OK))

    assert line == "BrandMeister repeater 270107 is OK: online status| 'last_seen_min'=0;10;15;;"


def test_render_warning_line():
    """Test the WARNING line reports elapsed minutes and perfdata."""
    line = render(_result(12, Status.WARNING))

    assert line == (
        "BrandMeister repeater 270107 is WARNING: last seen 12 minutes ago"
        "| 'last_seen_min'=12;10;15;;"
    )


def test_render_critical_line():
    """Test the CRITICAL line."""
    line = render(_result(20, Status.CRITICAL))

    assert line.startswith("BrandMeister repeater 270107 is CRITICAL: ")
    assert line.endswith("| 'last_seen_min'=20;10;15;;")


def test_perfdata_keeps_negative_elapsed():
    """Test negative elapsed minutes are reported unchanged."""
    assert perfdata(EvaluationResult(-5, Status.OK, 10, 15)) == "'last_seen_min'=-5;10;15;;"


def test_render_unknown_has_no_perfdata():
    """Test UNKNOWN lines carry the reason and no perfdata."""
    result = CheckResult(270107, Status.UNKNOWN, detail="error parsing API result, ensure repeater id is valid")

    line = render(result)

    assert line == (
        "BrandMeister repeater 270107 is UNKNOWN: "
        "error parsing API result, ensure repeater id is valid"
    )
    assert "|" not in line
