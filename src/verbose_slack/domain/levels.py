from __future__ import annotations

from enum import Enum


class LogEventLevel(str, Enum):
    # Severity values are ordered Verbose < Debug < Information < Warning < Error < Fatal.
    VERBOSE = "Verbose"
    DEBUG = "Debug"
    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"
    FATAL = "Fatal"

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    # str comparisons would order levels alphabetically; compare by severity instead.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogEventLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LogEventLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LogEventLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LogEventLevel):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, text: str) -> LogEventLevel:
        # Accepts full names in any case and the three-letter compact aliases.
        level = _BY_NAME.get(text.strip().lower())
        if level is None:
            raise ValueError(f"unknown log level: {text!r}")
        return level


_ORDER = list(LogEventLevel)

_BY_NAME: dict[str, LogEventLevel] = {level.value.lower(): level for level in LogEventLevel}
_BY_NAME.update(
    {
        "vrb": LogEventLevel.VERBOSE,
        "dbg": LogEventLevel.DEBUG,
        "inf": LogEventLevel.INFORMATION,
        "wrn": LogEventLevel.WARNING,
        "err": LogEventLevel.ERROR,
        "ftl": LogEventLevel.FATAL,
    }
)
