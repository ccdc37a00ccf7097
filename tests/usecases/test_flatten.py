from __future__ import annotations

import pytest

from verbose_slack.domain.errors import PropertyDepthError, UnsupportedPropertyValueError
from verbose_slack.domain.formatting import FormatOptions
from verbose_slack.domain.values import (
    DictionaryValue,
    LogEventProperty,
    PropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)
from verbose_slack.usecases.flatten import FlattenedField, PathSegment, SegmentKind, flatten_properties


def _struct(**members: PropertyValue) -> StructureValue:
    return StructureValue(tuple(LogEventProperty(k, v) for k, v in members.items()))


def _tree() -> dict[str, PropertyValue]:
    return {
        "A": _struct(B=_struct(C=ScalarValue(5)), D=ScalarValue("x")),
        "items": SequenceValue((ScalarValue(10), ScalarValue(20))),
        "count": ScalarValue(3),
        "map": DictionaryValue(
            (
                (ScalarValue("k"), ScalarValue(1)),
                (_struct(X=ScalarValue(1)), SequenceValue((ScalarValue(True),))),
            )
        ),
    }


def test_nested_structure_path() -> None:
    fields = flatten_properties({"A": _struct(B=_struct(C=ScalarValue(5)))})
    assert len(fields) == 1
    field = fields[0]
    assert field.section == "A"
    assert field.subpath == (PathSegment.member("B"), PathSegment.member("C"))
    assert field.subpath_text == ".B.C"
    assert field.value == "5"


def test_sequence_indexing() -> None:
    fields = flatten_properties({"items": SequenceValue((ScalarValue(10), ScalarValue(20)))})
    assert [(f.subpath_text, f.value) for f in fields] == [("[0]", "10"), ("[1]", "20")]
    assert all(f.subpath[0].kind == SegmentKind.INDEX for f in fields)


def test_bare_scalar_has_empty_subpath() -> None:
    assert flatten_properties({"count": ScalarValue(3)}) == [
        FlattenedField(section="count", subpath=(), value="3")
    ]


def test_dictionary_keys_render_as_single_token() -> None:
    fields = flatten_properties({"map": _tree()["map"]})
    assert [(f.subpath_text, f.value) for f in fields] == [
        ('"k"', "1"),
        ("{ X: 1 }[0]", "True"),
    ]
    assert fields[1].subpath[0].kind == SegmentKind.KEY


def test_traversal_order_is_depth_first_left_to_right() -> None:
    fields = flatten_properties(_tree())
    assert [(f.section, f.subpath_text) for f in fields] == [
        ("A", ".B.C"),
        ("A", ".D"),
        ("items", "[0]"),
        ("items", "[1]"),
        ("count", ""),
        ("map", '"k"'),
        ("map", "{ X: 1 }[0]"),
    ]


def test_flatten_is_deterministic() -> None:
    assert flatten_properties(_tree()) == flatten_properties(_tree())


def test_leaf_count_matches_scalar_leaves() -> None:
    tree = {
        "empty_struct": StructureValue(),
        "empty_seq": SequenceValue(),
        "empty_map": DictionaryValue(),
        "mixed": SequenceValue((SequenceValue(), _struct(a=ScalarValue(1), b=SequenceValue()))),
    }
    fields = flatten_properties(tree)
    assert [f.section for f in fields] == ["mixed"]
    assert fields[0].subpath_text == "[1].a"


def test_format_options_reach_leaves() -> None:
    fields = flatten_properties(
        {"name": ScalarValue("ada"), "ratio": ScalarValue(0.5)},
        FormatOptions(quote_strings=False, number_format=".1%"),
    )
    assert [f.value for f in fields] == ["ada", "50.0%"]


def test_depth_bound_fails_fast() -> None:
    value: PropertyValue = ScalarValue(1)
    for _ in range(10):
        value = SequenceValue((value,))
    with pytest.raises(PropertyDepthError) as excinfo:
        flatten_properties({"deep": value}, max_depth=4)
    assert excinfo.value.path.startswith("deep[0]")


def test_unknown_variant_surfaces_as_defect() -> None:
    with pytest.raises(UnsupportedPropertyValueError):
        flatten_properties({"bad": object()})  # type: ignore[dict-item]
