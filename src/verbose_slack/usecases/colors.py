from __future__ import annotations

from verbose_slack.domain.levels import LogEventLevel

INFORMATION_COLOR = "#5bc0de"
WARNING_COLOR = "#f0ad4e"
DANGER_COLOR = "#d9534f"
DEFAULT_COLOR = "#777"

_LEVEL_COLORS = {
    LogEventLevel.INFORMATION: INFORMATION_COLOR,
    LogEventLevel.WARNING: WARNING_COLOR,
    LogEventLevel.ERROR: DANGER_COLOR,
    LogEventLevel.FATAL: DANGER_COLOR,
}


def attachment_color(level: LogEventLevel) -> str:
    return _LEVEL_COLORS.get(level, DEFAULT_COLOR)
