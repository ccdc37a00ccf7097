from __future__ import annotations

from dataclasses import dataclass

from verbose_slack.domain.events import LogEvent
from verbose_slack.domain.reasons import ReasonCode


@dataclass(frozen=True, slots=True)
class RawLine:
    # RawLine preserves input order via line_no.
    line_no: int
    raw_text: str


@dataclass(frozen=True, slots=True)
class ParsedEvent:
    line_no: int
    event: LogEvent


@dataclass(frozen=True, slots=True)
class RejectedLine:
    # Input line that could not become a log event; reason is a stable code.
    line_no: int
    reason: ReasonCode
    detail: str = ""


@dataclass(frozen=True, slots=True)
class OutputLine:
    # One serialized webhook payload; attachments is taken from the built payload.
    line_no: int
    json_text: str
    attachments: int = 1
