from .errors import PropertyDepthError, RenderError, UnsupportedPropertyValueError
from .events import ExceptionInfo, LogEvent
from .formatting import DEFAULT_FORMAT, FormatOptions, render_scalar, render_value
from .levels import LogEventLevel
from .logging import LogMessage
from .payload import AttachmentBlock, DisplayField, SlackPayload, payload_to_dict
from .reasons import ReasonCode
from .templates import render_template
from .values import (
    DEFAULT_MAX_DEPTH,
    DictionaryValue,
    LogEventProperty,
    PropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
    capture,
    capture_properties,
)

# Public domain exports keep imports explicit across layers.
__all__ = [
    "AttachmentBlock",
    "DEFAULT_FORMAT",
    "DEFAULT_MAX_DEPTH",
    "DictionaryValue",
    "DisplayField",
    "ExceptionInfo",
    "FormatOptions",
    "LogEvent",
    "LogEventLevel",
    "LogEventProperty",
    "LogMessage",
    "PropertyDepthError",
    "PropertyValue",
    "ReasonCode",
    "RenderError",
    "ScalarValue",
    "SequenceValue",
    "SlackPayload",
    "StructureValue",
    "UnsupportedPropertyValueError",
    "capture",
    "capture_properties",
    "payload_to_dict",
    "render_scalar",
    "render_template",
    "render_value",
]
