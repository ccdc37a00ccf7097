from __future__ import annotations

from verbose_slack.domain.errors import RenderError
from verbose_slack.domain.reasons import ReasonCode
from verbose_slack.usecases.messages import OutputLine, ParsedEvent, RejectedLine
from verbose_slack.usecases.render import SlackVerboseRenderer


class RenderSlackPayload:
    # Serializes each parsed event into one compact JSON webhook payload.
    def __init__(
        self,
        renderer: SlackVerboseRenderer,
        *,
        username: str | None = None,
        icon_emoji: str | None = None,
    ) -> None:
        self._renderer = renderer
        self._username = username
        self._icon_emoji = icon_emoji

    def __call__(self, msg: ParsedEvent, ctx: object | None) -> list[OutputLine | RejectedLine]:
        # A tree the renderer refuses is rejected like a malformed line.
        try:
            payload = self._renderer.build_payload(msg.event, self._username, self._icon_emoji)
        except RenderError as exc:
            return [RejectedLine(msg.line_no, ReasonCode.RENDER_FAILED, str(exc))]
        return [
            OutputLine(
                line_no=msg.line_no,
                json_text=self._renderer.to_json(payload),
                attachments=len(payload.attachments),
            )
        ]
