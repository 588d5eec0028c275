"""Property catalog: which frontmatter properties and values exist in a vault.

Used to suggest filter and date properties when configuring lookback.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from .notes import Note

MAX_SUGGESTIONS = 200


@dataclass
class PropertyCatalog:
    """Known property names and example values per property.

    Attributes:
        properties: Sorted property names; always includes ``tags``.
        values: Property name -> sorted value suggestions (capped).
    """

    properties: list[str] = field(default_factory=lambda: ["tags"])
    values: dict[str, list[str]] = field(default_factory=dict)

    def suggestions(self, property_name: str) -> list[str]:
        return self.values.get(property_name, [])

    def options_with_current(self, current: str) -> list[str]:
        """Property names plus *current*, so a configured but unused property stays selectable."""
        options = set(self.properties)
        if current.strip():
            options.add(current)
        return sorted(options, key=str.casefold) or ["tags"]


def _primitive_values(value: Any) -> list[str]:
    items = value if isinstance(value, list) else [value]
    result = []
    for item in items:
        if isinstance(item, bool):
            text = "true" if item else "false"
        elif isinstance(item, (str, int, float)):
            text = str(item).strip()
        elif isinstance(item, date):
            text = item.isoformat()
        else:
            continue
        if text:
            result.append(text)
    return result


def build_property_catalog(notes: Iterable[Note], max_values: int = MAX_SUGGESTIONS) -> PropertyCatalog:
    """Collect property names and value suggestions from every note's frontmatter."""
    properties = {"tags"}
    value_sets: dict[str, set[str]] = {}

    for note in notes:
        if note.tags:
            value_sets.setdefault("tags", set()).update(
                tag if tag.startswith("#") else f"#{tag}" for tag in note.tags
            )

        for key, value in note.frontmatter.items():
            key = str(key)
            properties.add(key)
            if key == "tags":
                continue
            values = _primitive_values(value)
            if values:
                value_sets.setdefault(key, set()).update(values)

    return PropertyCatalog(
        properties=sorted(properties, key=str.casefold),
        values={key: sorted(values, key=str.casefold)[:max_values] for key, values in sorted(value_sets.items())},
    )
