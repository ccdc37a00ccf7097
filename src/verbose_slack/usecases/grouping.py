from __future__ import annotations

from collections.abc import Iterable

from verbose_slack.domain.payload import DisplayField
from verbose_slack.usecases.flatten import FlattenedField

DEFAULT_SEPARATOR = "\n"


def format_entry(field: FlattenedField) -> str:
    # Nested leaves are labelled "<subpath>::<value>"; top-level scalars print bare.
    if field.subpath:
        return f"{field.subpath_text}::{field.value}"
    return field.value


def group_sections(
    fields: Iterable[FlattenedField], separator: str = DEFAULT_SEPARATOR
) -> dict[str, str]:
    # Sections keep first-seen order; entries keep flatten order within a section.
    entries: dict[str, list[str]] = {}
    for field in fields:
        entries.setdefault(field.section, []).append(format_entry(field))
    return {section: separator.join(lines) for section, lines in entries.items()}


def section_fields(
    fields: Iterable[FlattenedField], separator: str = DEFAULT_SEPARATOR
) -> list[DisplayField]:
    return [
        DisplayField(title=section, value=value, short=True)
        for section, value in group_sections(fields, separator).items()
    ]
