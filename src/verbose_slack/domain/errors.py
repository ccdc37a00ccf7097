from __future__ import annotations


class RenderError(Exception):
    # Base class for failures raised while turning a log event into a payload.
    pass


class PropertyDepthError(RenderError):
    # Raised when a property tree nests deeper than the configured bound.
    def __init__(self, path: str, max_depth: int) -> None:
        super().__init__(f"property tree deeper than {max_depth} levels at {path!r}")
        self.path = path
        self.max_depth = max_depth


class UnsupportedPropertyValueError(RenderError, TypeError):
    # A value outside the four known property variants reached a traversal.
    def __init__(self, value: object) -> None:
        super().__init__(f"unsupported property value type: {type(value).__name__}")
        self.value = value
