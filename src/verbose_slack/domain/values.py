from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from .errors import PropertyDepthError


@dataclass(frozen=True, slots=True)
class ScalarValue:
    # Leaf value; rendered to text through the scalar rendering rules.
    value: Any


@dataclass(frozen=True, slots=True)
class LogEventProperty:
    name: str
    value: PropertyValue

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("LogEventProperty requires a non-empty name")


@dataclass(frozen=True, slots=True)
class StructureValue:
    # Named members in declared order; type_tag is only used when rendered as a single token.
    properties: tuple[LogEventProperty, ...] = ()
    type_tag: str | None = None


@dataclass(frozen=True, slots=True)
class DictionaryValue:
    # Key/value pairs in iteration order; keys are property values themselves.
    elements: tuple[tuple[PropertyValue, PropertyValue], ...] = ()


@dataclass(frozen=True, slots=True)
class SequenceValue:
    elements: tuple[PropertyValue, ...] = ()


PropertyValue = Union[ScalarValue, StructureValue, DictionaryValue, SequenceValue]

PROPERTY_VALUE_TYPES = (ScalarValue, StructureValue, DictionaryValue, SequenceValue)

DEFAULT_MAX_DEPTH = 32


def capture(obj: object, *, max_depth: int = DEFAULT_MAX_DEPTH) -> PropertyValue:
    """Convert a plain Python value into the property value model.

    Mappings become dictionaries, lists/tuples/sets become sequences and dataclass
    instances become structures tagged with their class name. Property values are
    passed through untouched; everything else is a scalar.
    """
    return _capture(obj, "$", 0, max_depth)


def capture_properties(
    values: Mapping[str, object], *, max_depth: int = DEFAULT_MAX_DEPTH
) -> dict[str, PropertyValue]:
    return {name: capture(value, max_depth=max_depth) for name, value in values.items()}


def _capture(obj: object, path: str, depth: int, max_depth: int) -> PropertyValue:
    if isinstance(obj, PROPERTY_VALUE_TYPES):
        return obj
    if depth >= max_depth:
        raise PropertyDepthError(path, max_depth)

    if isinstance(obj, Mapping):
        return DictionaryValue(
            elements=tuple(
                (ScalarValue(key), _capture(value, f"{path}[{key!r}]", depth + 1, max_depth))
                for key, value in obj.items()
            )
        )
    if isinstance(obj, (list, tuple, set, frozenset)):
        items = sorted(obj, key=repr) if isinstance(obj, (set, frozenset)) else obj
        return SequenceValue(
            elements=tuple(
                _capture(item, f"{path}[{idx}]", depth + 1, max_depth)
                for idx, item in enumerate(items)
            )
        )
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return StructureValue(
            properties=tuple(
                LogEventProperty(
                    name=f.name,
                    value=_capture(
                        getattr(obj, f.name), f"{path}.{f.name}", depth + 1, max_depth
                    ),
                )
                for f in dataclasses.fields(obj)
            ),
            type_tag=type(obj).__name__,
        )
    return ScalarValue(obj)
