from .colors import attachment_color
from .flatten import FlattenedField, PathSegment, SegmentKind, flatten_properties, join_path
from .grouping import format_entry, group_sections, section_fields
from .render import SlackVerboseRenderer

__all__ = [
    "FlattenedField",
    "PathSegment",
    "SegmentKind",
    "SlackVerboseRenderer",
    "attachment_color",
    "flatten_properties",
    "format_entry",
    "group_sections",
    "join_path",
    "section_fields",
]
