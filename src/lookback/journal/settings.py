"""Journal settings and their normalization.

Settings arrive as an opaque blob persisted by the host (camelCase keys) or
from a YAML config section (snake_case keys). ``normalize_settings`` never
fails: every malformed value falls back to its default or is clamped.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .filters import FilterMatchMode, parse_filter_values

_STRING_DEFAULTS = {
    "filter_field": "tags",
    "filter_values": "journal",
    "date_field": "created",
}

# field -> (default, min, max)
_INT_LIMITS = {
    "years_back": (4, 1, 20),
    "preview_max_lines": (4, 1, 12),
    "preview_max_chars": (420, 80, 2000),
    "preview_max_bytes": (262144, 4096, 10485760),
}

INDEX_FIELDS = ("filter_field", "filter_values", "filter_match_mode", "date_field")


class JournalSettings(BaseModel):
    """Normalized settings for filtering, dating and previewing journal notes.

    Attributes:
        filter_field: Frontmatter property that marks a note as a journal entry.
        filter_values: Comma-separated values that property must match.
        filter_match_mode: Whether any or all of the values are required.
        date_field: Frontmatter property holding the note's created date.
        years_back: How many "N years ago" sections to show.
        show_this_year_section: Show the current year when the note is older.
        preview_max_lines: Preview line cap.
        preview_max_chars: Preview character budget.
        preview_max_bytes: Notes larger than this are never read for previews.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    filter_field: str = Field("tags", alias="filterField")
    filter_values: str = Field("journal", alias="filterValues")
    filter_match_mode: FilterMatchMode = Field(FilterMatchMode.ANY, alias="filterMatchMode")
    date_field: str = Field("created", alias="dateField")
    years_back: int = Field(4, alias="yearsBack")
    show_this_year_section: bool = Field(True, alias="showThisYearSection")
    preview_max_lines: int = Field(4, alias="previewMaxLines")
    preview_max_chars: int = Field(420, alias="previewMaxChars")
    preview_max_bytes: int = Field(262144, alias="previewMaxBytes")

    @field_validator("filter_field", "date_field", mode="before")
    @classmethod
    def _non_empty_string(cls, v: Any, info: ValidationInfo) -> str:
        fallback = _STRING_DEFAULTS[info.field_name]
        if not isinstance(v, str):
            return fallback
        return v.strip() or fallback

    @field_validator("filter_values", mode="before")
    @classmethod
    def _csv_text(cls, v: Any) -> str:
        if not isinstance(v, str):
            return _STRING_DEFAULTS["filter_values"]
        return ", ".join(parse_filter_values(v)) or _STRING_DEFAULTS["filter_values"]

    @field_validator("filter_match_mode", mode="before")
    @classmethod
    def _match_mode(cls, v: Any) -> FilterMatchMode:
        return FilterMatchMode.coerce(v)

    @field_validator("years_back", "preview_max_lines", "preview_max_chars", "preview_max_bytes", mode="before")
    @classmethod
    def _clamped_int(cls, v: Any, info: ValidationInfo) -> int:
        fallback, low, high = _INT_LIMITS[info.field_name]
        return clamp_int(v, low, high, fallback)

    @field_validator("show_this_year_section", mode="before")
    @classmethod
    def _strict_bool(cls, v: Any) -> bool:
        return v if isinstance(v, bool) else True

    def to_host_dict(self) -> dict[str, Any]:
        """Dump with the host's camelCase keys, ready to persist."""
        return self.model_dump(by_alias=True, mode="json")


def clamp_int(value: Any, low: int, high: int, fallback: int) -> int:
    """Coerce to a number, round half up and clamp to ``[low, high]``.

    None, unparseable and non-finite values return *fallback*, and so do
    integers too large for a float. Missing and empty values fall back to the
    default rather than coercing to 0 and clamping to *low*.
    """
    if value is None:
        return fallback
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return fallback
    if not math.isfinite(number):
        return fallback
    return max(low, min(high, math.floor(number + 0.5)))


def normalize_settings(value: Any) -> JournalSettings:
    """Build settings from any raw value, falling back to defaults field by field."""
    if isinstance(value, JournalSettings):
        value = value.model_dump()
    if not isinstance(value, Mapping):
        value = {}
    return JournalSettings.model_validate(dict(value))


def should_rebuild_index(previous: JournalSettings, next_settings: JournalSettings) -> bool:
    """True when a change affects which notes are indexed or how they are dated."""
    return any(getattr(previous, name) != getattr(next_settings, name) for name in INDEX_FIELDS)


DEFAULT_SETTINGS = JournalSettings()
