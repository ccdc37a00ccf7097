from __future__ import annotations

import json
from dataclasses import dataclass

from verbose_slack.domain.events import ExceptionInfo, LogEvent
from verbose_slack.domain.formatting import FormatOptions
from verbose_slack.domain.levels import LogEventLevel
from verbose_slack.domain.payload import AttachmentBlock, DisplayField, SlackPayload, payload_to_dict
from verbose_slack.domain.values import DEFAULT_MAX_DEPTH
from verbose_slack.usecases.colors import attachment_color
from verbose_slack.usecases.flatten import flatten_properties
from verbose_slack.usecases.grouping import DEFAULT_SEPARATOR, section_fields


@dataclass(frozen=True, slots=True)
class SlackVerboseRenderer:
    """Render a log event into a section-grouped incoming-webhook payload.

    The renderer holds only immutable settings, so one instance can serve
    concurrent callers. It performs no I/O.
    """

    options: FormatOptions | None = None
    max_depth: int = DEFAULT_MAX_DEPTH
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

    def build_payload(
        self, event: LogEvent, username: str | None = None, icon_emoji: str | None = None
    ) -> SlackPayload:
        if not isinstance(event, LogEvent):
            raise TypeError(f"expected LogEvent, got {type(event).__name__}")

        message = event.render_message(self.options, max_depth=self.max_depth)
        attachments = [self._summary_attachment(event, message)]
        if event.exception is not None:
            attachments.append(_exception_attachment(event.exception))

        return SlackPayload(
            text=message,
            attachments=tuple(attachments),
            username=username or None,
            icon_emoji=icon_emoji or None,
        )

    def render(
        self, event: LogEvent, username: str | None = None, icon_emoji: str | None = None
    ) -> str:
        return self.to_json(self.build_payload(event, username, icon_emoji))

    @staticmethod
    def to_json(payload: SlackPayload) -> str:
        return json.dumps(payload_to_dict(payload), separators=(",", ":"), ensure_ascii=False)

    def _summary_attachment(self, event: LogEvent, message: str) -> AttachmentBlock:
        fields = [
            DisplayField("Level", event.level.value),
            DisplayField("Timestamp", event.timestamp.isoformat()),
        ]
        flattened = flatten_properties(event.properties, self.options, max_depth=self.max_depth)
        fields.extend(section_fields(flattened, self.separator))
        return AttachmentBlock(
            fallback=f"[{event.level.value}]{message}",
            color=attachment_color(event.level),
            fields=tuple(fields),
        )


def _exception_attachment(exc: ExceptionInfo) -> AttachmentBlock:
    # Exception blocks always use the fatal color, whatever the event level.
    return AttachmentBlock(
        title="Exception",
        fallback=f"Exception: {exc.message}\n{exc.stack_trace}",
        color=attachment_color(LogEventLevel.FATAL),
        fields=(
            DisplayField("Message", exc.message),
            DisplayField("Type", f"`{exc.type_name}`"),
            DisplayField("Stack Trace", f"```{exc.stack_trace}```", short=False),
        ),
        markdown_in=("fields",),
    )
