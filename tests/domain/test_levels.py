from __future__ import annotations

import pytest

from verbose_slack.domain.levels import LogEventLevel


def test_levels_order_by_severity() -> None:
    # Ordering follows severity, not alphabetical string order.
    assert (
        LogEventLevel.VERBOSE
        < LogEventLevel.DEBUG
        < LogEventLevel.INFORMATION
        < LogEventLevel.WARNING
        < LogEventLevel.ERROR
        < LogEventLevel.FATAL
    )
    assert LogEventLevel.FATAL >= LogEventLevel.ERROR
    assert max(LogEventLevel) == LogEventLevel.FATAL


def test_parse_accepts_names_and_aliases() -> None:
    assert LogEventLevel.parse("warning") == LogEventLevel.WARNING
    assert LogEventLevel.parse(" Information ") == LogEventLevel.INFORMATION
    assert LogEventLevel.parse("FTL") == LogEventLevel.FATAL
    assert LogEventLevel.parse("dbg") == LogEventLevel.DEBUG


def test_parse_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        LogEventLevel.parse("Critical")
