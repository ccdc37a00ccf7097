from __future__ import annotations

from enum import Enum


# Stable reason codes for input lines that could not become a log event.
class ReasonCode(str, Enum):
    INPUT_PARSE_ERROR = "INPUT_PARSE_ERROR"
    INVALID_TIMESTAMP = "INVALID_TIMESTAMP"
    INVALID_LEVEL = "INVALID_LEVEL"
    MISSING_MESSAGE = "MISSING_MESSAGE"
    INVALID_EXCEPTION = "INVALID_EXCEPTION"
    RENDER_FAILED = "RENDER_FAILED"
