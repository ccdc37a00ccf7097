from __future__ import annotations

import re
from collections.abc import Mapping

from .formatting import FormatOptions, render_value
from .values import DEFAULT_MAX_DEPTH, PropertyValue

# Holes look like {Name}, {@Name}, {$Name}, {Name,10} or {Name:format}; doubled braces escape.
_TOKEN = re.compile(
    r"\{\{|\}\}|\{(?P<op>[@$]?)(?P<name>[A-Za-z0-9_]+)(?:,(?P<align>-?\d+))?(?::(?P<fmt>[^{}]+))?\}"
)


def render_template(
    template: str,
    properties: Mapping[str, PropertyValue],
    options: FormatOptions | None = None,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """Substitute message template holes with rendered property values.

    Holes naming a missing property are left in the output verbatim.
    """

    def _replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token == "{{":
            return "{"
        if token == "}}":
            return "}"

        value = properties.get(match.group("name"))
        if value is None:
            return token

        text = render_value(value, options, fmt=match.group("fmt"), max_depth=max_depth)
        align = match.group("align")
        if align:
            width = int(align)
            text = text.ljust(-width) if width < 0 else text.rjust(width)
        return text

    return _TOKEN.sub(_replace, template)
