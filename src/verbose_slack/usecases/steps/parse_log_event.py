from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from verbose_slack.domain.errors import PropertyDepthError
from verbose_slack.domain.events import ExceptionInfo, LogEvent
from verbose_slack.domain.levels import LogEventLevel
from verbose_slack.domain.reasons import ReasonCode
from verbose_slack.domain.values import (
    DEFAULT_MAX_DEPTH,
    LogEventProperty,
    PropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)
from verbose_slack.usecases.messages import ParsedEvent, RawLine, RejectedLine

# Structure members named "$type" carry the type tag rather than a member value.
_TYPE_TAG_KEY = "$type"


class _RawException(BaseModel):
    type: str
    message: str = ""
    stack_trace: str = ""

    model_config = ConfigDict(extra="ignore")


class ParseLogEvent:
    """Parse one compact-JSON log event line.

    Reserved members: ``@t`` timestamp, ``@l`` level, ``@mt`` template, ``@m``
    rendered message and ``@x`` exception. Other ``@`` members are ignored and
    ``@@name`` escapes a property literally named ``@name``.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self._max_depth = max_depth

    def __call__(self, msg: RawLine, ctx: object | None) -> list[ParsedEvent | RejectedLine]:
        # Exactly one output per input line.
        try:
            payload = json.loads(msg.raw_text)
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError is a ValueError; very deep nesting exhausts the decoder stack.
            return [RejectedLine(msg.line_no, ReasonCode.INPUT_PARSE_ERROR, str(exc))]

        if not isinstance(payload, dict):
            return [RejectedLine(msg.line_no, ReasonCode.INPUT_PARSE_ERROR, "not a JSON object")]

        try:
            timestamp = _parse_timestamp(payload.get("@t"))
        except ValueError as exc:
            return [RejectedLine(msg.line_no, ReasonCode.INVALID_TIMESTAMP, str(exc))]

        level_text = payload.get("@l", LogEventLevel.INFORMATION.value)
        try:
            if not isinstance(level_text, str):
                raise ValueError("level must be a string")
            level = LogEventLevel.parse(level_text)
        except ValueError as exc:
            return [RejectedLine(msg.line_no, ReasonCode.INVALID_LEVEL, str(exc))]

        template = payload.get("@mt")
        rendered = payload.get("@m")
        if not isinstance(template, str) and not isinstance(rendered, str):
            return [
                RejectedLine(msg.line_no, ReasonCode.MISSING_MESSAGE, "either @mt or @m is required")
            ]

        try:
            exception = _parse_exception(payload.get("@x"))
        except (ValueError, ValidationError) as exc:
            return [RejectedLine(msg.line_no, ReasonCode.INVALID_EXCEPTION, str(exc))]

        try:
            properties = {
                name: _to_property_value(value, 1, self._max_depth)
                for name, value in _property_members(payload)
            }
        except (PropertyDepthError, ValueError) as exc:
            return [RejectedLine(msg.line_no, ReasonCode.INPUT_PARSE_ERROR, str(exc))]

        event = LogEvent(
            timestamp=timestamp,
            level=level,
            message_template=template if isinstance(template, str) else rendered,
            properties=properties,
            exception=exception,
            rendered_message=rendered if isinstance(rendered, str) else None,
        )
        return [ParsedEvent(line_no=msg.line_no, event=event)]


def _property_members(payload: dict[str, Any]) -> list[tuple[str, Any]]:
    members: list[tuple[str, Any]] = []
    for key, value in payload.items():
        if key.startswith("@@"):
            members.append((key[1:], value))
        elif not key.startswith("@"):
            members.append((key, value))
    return members


def _parse_timestamp(value: object) -> datetime:
    # ISO 8601 with an explicit offset; the offset is preserved as given.
    if not isinstance(value, str) or not value.strip():
        raise ValueError("@t is required")
    try:
        ts = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError as exc:
        raise ValueError("invalid timestamp") from exc
    if ts.tzinfo is None:
        raise ValueError("timestamp missing timezone")
    return ts


def _parse_exception(value: object) -> ExceptionInfo | None:
    if value is None:
        return None
    if isinstance(value, str):
        return ExceptionInfo.parse(value)
    if isinstance(value, dict):
        raw = _RawException.model_validate(value)
        return ExceptionInfo(type_name=raw.type, message=raw.message, stack_trace=raw.stack_trace)
    raise ValueError("@x must be a string or an object")


def _to_property_value(value: Any, depth: int, max_depth: int) -> PropertyValue:
    if depth > max_depth:
        raise PropertyDepthError(f"depth {depth}", max_depth)

    if isinstance(value, dict):
        tag = value.get(_TYPE_TAG_KEY)
        return StructureValue(
            properties=tuple(
                LogEventProperty(name=k, value=_to_property_value(v, depth + 1, max_depth))
                for k, v in value.items()
                if k != _TYPE_TAG_KEY
            ),
            type_tag=tag if isinstance(tag, str) else None,
        )
    if isinstance(value, list):
        return SequenceValue(
            elements=tuple(_to_property_value(v, depth + 1, max_depth) for v in value)
        )
    return ScalarValue(value)
