from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal

from .errors import PropertyDepthError, UnsupportedPropertyValueError
from .values import (
    DEFAULT_MAX_DEPTH,
    DictionaryValue,
    PropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)

# Format applied to a message hole to print a string without quotes.
LITERAL_FORMAT = "l"


@dataclass(frozen=True, slots=True)
class FormatOptions:
    # Formatting hints threaded through every scalar render (the "format provider").
    quote_strings: bool = True
    number_format: str | None = None
    datetime_format: str | None = None


DEFAULT_FORMAT = FormatOptions()


def render_value(
    value: PropertyValue,
    options: FormatOptions | None = None,
    *,
    fmt: str | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    # Renders any property value as one text token; composites render inline.
    return _render(value, options or DEFAULT_FORMAT, fmt, 0, max_depth)


def _render(
    value: PropertyValue, options: FormatOptions, fmt: str | None, depth: int, max_depth: int
) -> str:
    if depth >= max_depth:
        raise PropertyDepthError(type(value).__name__, max_depth)

    if isinstance(value, ScalarValue):
        return render_scalar(value.value, options, fmt)

    if isinstance(value, SequenceValue):
        items = ", ".join(_render(v, options, None, depth + 1, max_depth) for v in value.elements)
        return f"[{items}]"

    if isinstance(value, StructureValue):
        members = ", ".join(
            f"{p.name}: {_render(p.value, options, None, depth + 1, max_depth)}"
            for p in value.properties
        )
        body = f"{{ {members} }}" if members else "{ }"
        return f"{value.type_tag} {body}" if value.type_tag else body

    if isinstance(value, DictionaryValue):
        pairs = ", ".join(
            f"({_render(k, options, None, depth + 1, max_depth)}: "
            f"{_render(v, options, None, depth + 1, max_depth)})"
            for k, v in value.elements
        )
        return f"[{pairs}]"

    raise UnsupportedPropertyValueError(value)


def render_scalar(raw: object, options: FormatOptions | None = None, fmt: str | None = None) -> str:
    options = options or DEFAULT_FORMAT
    if raw is None:
        return "null"

    if isinstance(raw, str):
        if fmt == LITERAL_FORMAT or not options.quote_strings:
            return raw
        escaped = raw.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'

    # bool is an int subclass; keep it out of numeric formatting.
    if isinstance(raw, bool):
        return str(raw)

    # Formats Python cannot apply (e.g. "N2", or "d" on a float) fall back to the
    # unformatted text instead of failing the whole render.
    if isinstance(raw, (int, float, Decimal)):
        spec = fmt or options.number_format
        if spec:
            try:
                return format(raw, spec)
            except (ValueError, TypeError):
                pass
        return str(raw)

    if isinstance(raw, (datetime, date, time)):
        spec = fmt or options.datetime_format
        if spec:
            try:
                return raw.strftime(spec)
            except (ValueError, TypeError):
                pass
        return raw.isoformat()

    if fmt:
        try:
            return format(raw, fmt)
        except (ValueError, TypeError):
            pass
    return str(raw)
