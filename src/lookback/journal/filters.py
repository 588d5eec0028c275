"""Frontmatter filter matching.

Decides whether a note's field value matches a configured filter. The same
function gates index membership and live lookups, so it must stay pure.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

TAGS_FIELD = "tags"


class FilterMatchMode(str, Enum):
    """How multiple filter values combine."""

    ANY = "any"  # at least one filter value present
    ALL = "all"  # every filter value present

    @classmethod
    def coerce(cls, value: Any) -> FilterMatchMode:
        """Total classification: exactly ``"all"`` is ALL, everything else ANY."""
        if value is cls.ALL or value == cls.ALL.value:
            return cls.ALL
        return cls.ANY


def parse_filter_values(csv: str) -> list[str]:
    """Split a comma-separated filter string into trimmed, non-empty tokens."""
    return [token.strip() for token in csv.split(",") if token.strip()]


def is_tags_field(field_name: str) -> bool:
    return field_name.strip().lower() == TAGS_FIELD


def normalize_filter_token(field_name: str, token: str) -> str:
    """Lowercase and trim; tag values always carry a leading ``#``."""
    normalized = token.strip().lower()
    if is_tags_field(field_name) and not normalized.startswith("#"):
        return f"#{normalized}"
    return normalized


def _to_string_value(value: Any) -> str | None:
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, float) and value.is_integer():
        text = str(int(value))
    elif isinstance(value, (str, int, float)):
        text = str(value)
    else:
        return None
    text = text.strip()
    return text or None


def extract_comparable_values(field_name: str, value: Any) -> list[str]:
    """Normalize a scalar or list field value into comparable candidates."""
    items = value if isinstance(value, (list, tuple)) else [value]
    candidates = []
    for item in items:
        converted = _to_string_value(item)
        if converted is None:
            continue
        candidates.append(normalize_filter_token(field_name, converted))
    return candidates


def filter_matches(
    field_name: str,
    raw_value: Any,
    filter_values_csv: str,
    mode: FilterMatchMode | str = FilterMatchMode.ANY,
) -> bool:
    """Check a field value against a comma-separated filter.

    Args:
        field_name: Frontmatter field being tested; ``tags`` gets ``#`` handling.
        raw_value: The note's value for that field (scalar or list).
        filter_values_csv: Configured values, e.g. ``"journal, daily"``.
        mode: ANY or ALL (enum or its string value).

    Returns:
        False when either the filter or the candidates are empty.
    """
    wanted = [normalize_filter_token(field_name, token) for token in parse_filter_values(filter_values_csv)]
    if not wanted:
        return False

    candidates = extract_comparable_values(field_name, raw_value)
    if not candidates:
        return False

    if FilterMatchMode.coerce(mode) is FilterMatchMode.ALL:
        return all(token in candidates for token in wanted)
    return any(token in candidates for token in wanted)
