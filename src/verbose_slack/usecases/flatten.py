from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum

from verbose_slack.domain.errors import PropertyDepthError, UnsupportedPropertyValueError
from verbose_slack.domain.formatting import FormatOptions, render_value
from verbose_slack.domain.values import (
    DEFAULT_MAX_DEPTH,
    DictionaryValue,
    PropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)


class SegmentKind(str, Enum):
    SECTION = "section"
    MEMBER = "member"
    INDEX = "index"
    KEY = "key"


@dataclass(frozen=True, slots=True)
class PathSegment:
    # text already carries its own punctuation (".name", "[0]"), so segments join with "".
    kind: SegmentKind
    text: str

    @classmethod
    def section(cls, name: str) -> PathSegment:
        return cls(SegmentKind.SECTION, name)

    @classmethod
    def member(cls, name: str) -> PathSegment:
        return cls(SegmentKind.MEMBER, f".{name}")

    @classmethod
    def index(cls, position: int) -> PathSegment:
        return cls(SegmentKind.INDEX, f"[{position}]")

    @classmethod
    def key(cls, rendered: str) -> PathSegment:
        return cls(SegmentKind.KEY, rendered)


FieldPath = tuple[PathSegment, ...]


@dataclass(frozen=True, slots=True)
class FlattenedField:
    # One rendered leaf; section is the root property name, subpath the rest of the walk.
    section: str
    subpath: FieldPath
    value: str

    @property
    def subpath_text(self) -> str:
        return join_path(self.subpath)


def join_path(path: FieldPath) -> str:
    return "".join(segment.text for segment in path)


def flatten_properties(
    properties: Mapping[str, PropertyValue],
    options: FormatOptions | None = None,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[FlattenedField]:
    """Walk every property tree depth-first and emit one record per scalar leaf.

    Records come out in property order, then member/key/index order within each
    tree. Empty structures, dictionaries and sequences contribute nothing.
    """
    fields: list[FlattenedField] = []
    for name, value in properties.items():
        fields.extend(_walk(value, (PathSegment.section(name),), options, max_depth))
    return fields


def _walk(
    value: PropertyValue, path: FieldPath, options: FormatOptions | None, max_depth: int
) -> Iterator[FlattenedField]:
    # The path is passed down immutably; each branch extends its own copy.
    if len(path) > max_depth:
        raise PropertyDepthError(join_path(path), max_depth)

    if isinstance(value, ScalarValue):
        yield FlattenedField(
            section=path[0].text,
            subpath=path[1:],
            value=render_value(value, options, max_depth=max_depth),
        )
        return

    if isinstance(value, StructureValue):
        for prop in value.properties:
            yield from _walk(prop.value, path + (PathSegment.member(prop.name),), options, max_depth)
        return

    if isinstance(value, DictionaryValue):
        for key, item in value.elements:
            # Keys collapse to a single token even when they are composite values.
            token = render_value(key, options, max_depth=max_depth)
            yield from _walk(item, path + (PathSegment.key(token),), options, max_depth)
        return

    if isinstance(value, SequenceValue):
        for position, item in enumerate(value.elements):
            yield from _walk(item, path + (PathSegment.index(position),), options, max_depth)
        return

    raise UnsupportedPropertyValueError(value)
