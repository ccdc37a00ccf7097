from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass

import pytest

from verbose_slack.domain.errors import PropertyDepthError
from verbose_slack.domain.values import (
    DictionaryValue,
    LogEventProperty,
    ScalarValue,
    SequenceValue,
    StructureValue,
    capture,
)


@dataclass
class _Order:
    id: int
    items: list[str]


def test_property_values_are_immutable() -> None:
    value = ScalarValue(1)
    with pytest.raises(FrozenInstanceError):
        value.value = 2  # type: ignore[misc]


def test_property_requires_name() -> None:
    with pytest.raises(ValueError):
        LogEventProperty(name="", value=ScalarValue(1))


def test_capture_maps_python_shapes() -> None:
    assert capture(5) == ScalarValue(5)
    assert capture([1, 2]) == SequenceValue((ScalarValue(1), ScalarValue(2)))
    assert capture({"a": 1}) == DictionaryValue(((ScalarValue("a"), ScalarValue(1)),))


def test_capture_dataclass_becomes_tagged_structure() -> None:
    value = capture(_Order(id=7, items=["x"]))
    assert isinstance(value, StructureValue)
    assert value.type_tag == "_Order"
    assert [p.name for p in value.properties] == ["id", "items"]
    assert value.properties[1].value == SequenceValue((ScalarValue("x"),))


def test_capture_passes_property_values_through() -> None:
    original = StructureValue((LogEventProperty("A", ScalarValue(1)),))
    assert capture(original) is original


def test_capture_bounds_depth() -> None:
    nested: list[object] = []
    current = nested
    for _ in range(10):
        child: list[object] = []
        current.append(child)
        current = child
    with pytest.raises(PropertyDepthError):
        capture(nested, max_depth=5)
