from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from verbose_slack.domain.errors import UnsupportedPropertyValueError
from verbose_slack.domain.formatting import FormatOptions, render_scalar, render_value
from verbose_slack.domain.values import (
    DictionaryValue,
    LogEventProperty,
    ScalarValue,
    SequenceValue,
    StructureValue,
)


def test_scalar_rendering_rules() -> None:
    assert render_scalar(None) == "null"
    assert render_scalar("hi") == '"hi"'
    assert render_scalar('say "x"') == '"say \\"x\\""'
    assert render_scalar(True) == "True"
    assert render_scalar(5) == "5"
    assert render_scalar(Decimal("1.50")) == "1.50"
    assert render_scalar(datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)) == "2024-01-02T03:04:05+00:00"


def test_format_options_apply_to_scalars() -> None:
    options = FormatOptions(quote_strings=False, number_format=",.2f", datetime_format="%Y-%m-%d")
    assert render_scalar("hi", options) == "hi"
    assert render_scalar(1234.5, options) == "1,234.50"
    assert render_scalar(True, options) == "True"
    assert render_scalar(datetime(2024, 1, 2, tzinfo=UTC), options) == "2024-01-02"


def test_literal_format_unquotes_strings() -> None:
    assert render_scalar("hi", fmt="l") == "hi"


def test_composite_values_render_as_one_token() -> None:
    structure = StructureValue(
        (LogEventProperty("A", ScalarValue(1)), LogEventProperty("B", ScalarValue("x"))),
        type_tag="Point",
    )
    assert render_value(structure) == 'Point { A: 1, B: "x" }'
    assert render_value(StructureValue()) == "{ }"
    assert render_value(SequenceValue((ScalarValue(1), ScalarValue(2)))) == "[1, 2]"
    assert (
        render_value(DictionaryValue(((ScalarValue("k"), ScalarValue(1)),))) == '[("k": 1)]'
    )


def test_unknown_variant_is_a_defect() -> None:
    with pytest.raises(UnsupportedPropertyValueError):
        render_value(object())  # type: ignore[arg-type]


def test_inapplicable_formats_fall_back_to_plain_text() -> None:
    assert render_scalar(5, fmt="N2") == "5"
    assert render_scalar(2.5, FormatOptions(number_format="d")) == "2.5"
    assert render_scalar(Decimal("3"), fmt="x") == "3"
    assert render_scalar(_Opaque(), fmt="bogus") == "opaque"


class _Opaque:
    def __str__(self) -> str:
        return "opaque"
