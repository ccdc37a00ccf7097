from __future__ import annotations

import traceback
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType

from .formatting import FormatOptions
from .levels import LogEventLevel
from .templates import render_template
from .values import DEFAULT_MAX_DEPTH, PropertyValue, capture_properties

_PY_TRACEBACK_HEADER = "Traceback (most recent call last)"


@dataclass(frozen=True, slots=True)
class ExceptionInfo:
    # Exception details carried by a log event; type_name is the concrete class name.
    type_name: str
    message: str
    stack_trace: str = ""

    @classmethod
    def from_exception(cls, exc: BaseException) -> ExceptionInfo:
        frames = traceback.format_tb(exc.__traceback__) if exc.__traceback__ else []
        return cls(
            type_name=type(exc).__name__,
            message=str(exc),
            stack_trace="".join(frames).rstrip("\n"),
        )

    @classmethod
    def parse(cls, text: str) -> ExceptionInfo:
        # Accepts "Type: message" followed by trace lines, or a Python traceback
        # where the "Type: message" line comes last.
        lines = text.strip("\n").splitlines()
        if not lines:
            raise ValueError("exception text is empty")
        if lines[0].startswith(_PY_TRACEBACK_HEADER):
            head, trace = lines[-1], lines[1:-1]
        else:
            head, trace = lines[0], lines[1:]

        type_name, _, message = head.partition(":")
        type_name = type_name.strip()
        if not type_name or " " in type_name:
            raise ValueError("exception text must contain a 'Type: message' line")
        return cls(type_name=type_name, message=message.strip(), stack_trace="\n".join(trace))


@dataclass(frozen=True, slots=True)
class LogEvent:
    # Immutable log event; properties keep insertion order.
    timestamp: datetime
    level: LogEventLevel
    message_template: str
    properties: Mapping[str, PropertyValue] = field(default_factory=dict)
    exception: ExceptionInfo | None = None
    rendered_message: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.level, LogEventLevel):
            raise TypeError("LogEvent.level must be a LogEventLevel")
        if self.timestamp.tzinfo is None:
            raise ValueError("LogEvent.timestamp must be timezone-aware")
        # Freeze the mapping so an event can be shared across concurrent renders.
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @classmethod
    def create(
        cls,
        level: LogEventLevel,
        message_template: str,
        *,
        timestamp: datetime,
        exception: BaseException | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        **properties: object,
    ) -> LogEvent:
        return cls(
            timestamp=timestamp,
            level=level,
            message_template=message_template,
            properties=capture_properties(properties, max_depth=max_depth),
            exception=ExceptionInfo.from_exception(exception) if exception is not None else None,
        )

    def render_message(
        self, options: FormatOptions | None = None, *, max_depth: int = DEFAULT_MAX_DEPTH
    ) -> str:
        if self.rendered_message is not None:
            return self.rendered_message
        return render_template(
            self.message_template, self.properties, options, max_depth=max_depth
        )
