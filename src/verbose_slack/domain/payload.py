from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DisplayField:
    # One titled field inside an attachment; short fields render side by side.
    title: str
    value: str
    short: bool = True


@dataclass(frozen=True, slots=True)
class AttachmentBlock:
    fallback: str
    color: str
    fields: tuple[DisplayField, ...] = ()
    title: str | None = None
    markdown_in: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class SlackPayload:
    # Message body posted to an incoming webhook; sender identity is optional.
    text: str
    attachments: tuple[AttachmentBlock, ...]
    username: str | None = None
    icon_emoji: str | None = None

    def __post_init__(self) -> None:
        if not self.attachments:
            raise ValueError("SlackPayload requires at least one attachment")


def payload_to_dict(payload: SlackPayload) -> dict[str, object]:
    # Member order is fixed; absent identity members are omitted instead of nulled.
    body: dict[str, object] = {"text": payload.text}
    if payload.username:
        body["username"] = payload.username
    if payload.icon_emoji:
        body["icon_emoji"] = payload.icon_emoji
    body["attachments"] = [_attachment_to_dict(a) for a in payload.attachments]
    return body


def _attachment_to_dict(attachment: AttachmentBlock) -> dict[str, object]:
    item: dict[str, object] = {}
    if attachment.title is not None:
        item["title"] = attachment.title
    item["fallback"] = attachment.fallback
    item["color"] = attachment.color
    item["fields"] = [
        {"title": f.title, "value": f.value, "short": f.short} for f in attachment.fields
    ]
    if attachment.markdown_in:
        item["mrkdwn_in"] = list(attachment.markdown_in)
    return item
