from .parse_log_event import ParseLogEvent
from .render_payload import RenderSlackPayload

__all__ = [
    "ParseLogEvent",
    "RenderSlackPayload",
]
