"""Core data models for journal lookups.

Framework-agnostic: ``Doc`` is whatever handle the document repository uses
(a vault ``Note``, a host file object, a test double).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, NamedTuple, TypeVar

from .dates import DateParts

Doc = TypeVar("Doc")


class IndexState(Enum):
    """Freshness of the (year, week) grouping."""

    FRESH = "fresh"
    DIRTY = "dirty"  # must rebuild before the next read


@dataclass(frozen=True)
class JournalEntry(Generic[Doc]):
    """A journal document together with its created date.

    Attributes:
        file: The repository's handle for the document.
        date_parts: The document's created date.
    """

    file: Doc
    date_parts: DateParts


class PreviewKey(NamedTuple):
    """Preview cache key: one cached preview per document and bound combination."""

    path: str
    max_lines: int
    max_chars: int
    max_bytes: int


@dataclass(frozen=True)
class JournalSection:
    """A historical year to look up, e.g. "2 years ago"."""

    title: str
    target_year: int


@dataclass
class PreviewedEntry(Generic[Doc]):
    entry: JournalEntry[Doc]
    preview: str | None = None


@dataclass
class SectionView(Generic[Doc]):
    section: JournalSection
    entries: list[PreviewedEntry[Doc]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.entries


@dataclass
class JournalView(Generic[Doc]):
    """Everything presentation needs to draw the lookback panel.

    Either ``sections`` is populated or ``message`` explains why not
    (e.g. the active note has no usable date).
    """

    active_date: DateParts | None
    sections: list[SectionView[Doc]] = field(default_factory=list)
    message: str | None = None

    def __repr__(self) -> str:
        counts = ", ".join(f"{s.section.target_year}:{len(s.entries)}" for s in self.sections)
        return f"JournalView(active_date={self.active_date}, sections=[{counts}], message={self.message!r})"
