"""Journal query service — settings-aware lookups over a note vault.

Wires a note source into a :class:`JournalIndex` through a repository adapter
that consults the live settings, and assembles the "on this week" view:
which year sections to show, their entries and previews.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Any, Protocol

from loguru import logger

from lookback.core.utils.async_helpers import map_with_concurrency
from lookback.vault.notes import Note

from .dates import DateParts, coerce_date
from .filters import filter_matches, is_tags_field
from .index import JournalIndex
from .models import JournalEntry, JournalSection, JournalView, PreviewedEntry, SectionView
from .settings import JournalSettings, normalize_settings, should_rebuild_index

PREVIEW_CONCURRENCY = 6


class NoteSource(Protocol):
    """Where notes come from; :class:`~lookback.vault.MarkdownVault` is the stock one.

    Sources that cache their listing may also provide ``refresh()``, which
    :meth:`JournalQueryService.invalidate` calls before the index is rebuilt.
    """

    def notes(self) -> list[Note]: ...

    async def read(self, note: Note) -> str: ...


class VaultDocuments:
    """DocumentRepository over a note source, filtered and dated by the current settings."""

    def __init__(self, source: NoteSource, settings: Callable[[], JournalSettings]):
        self._source = source
        self._settings = settings

    def list_documents(self) -> list[Note]:
        return self._source.notes()

    def is_in_scope(self, note: Note) -> bool:
        settings = self._settings()
        if is_tags_field(settings.filter_field):
            value: Any = list(note.tags)
        else:
            value = note.frontmatter.get(settings.filter_field)
        return filter_matches(settings.filter_field, value, settings.filter_values, settings.filter_match_mode)

    def created_date(self, note: Note) -> DateParts | None:
        return coerce_date(note.frontmatter.get(self._settings().date_field))

    async def read_content(self, note: Note) -> str:
        return await self._source.read(note)

    def size_bytes(self, note: Note) -> int | None:
        return note.size

    def path(self, note: Note) -> str:
        return note.path

    def display_name(self, note: Note) -> str:
        return note.basename


def build_sections(active_year: int, settings: JournalSettings, current_year: int) -> list[JournalSection]:
    """Year sections to show for a note written in *active_year*.

    "This year" comes first when enabled and the note is from another year,
    followed by one section per year back from *current_year*.
    """
    sections: list[JournalSection] = []
    used_years: set[int] = set()

    if settings.show_this_year_section and current_year != active_year:
        sections.append(JournalSection("This year", current_year))
        used_years.add(current_year)

    for offset in range(1, settings.years_back + 1):
        target_year = current_year - offset
        if target_year in used_years:
            continue
        sections.append(JournalSection(f"{offset} year{'' if offset == 1 else 's'} ago", target_year))
        used_years.add(target_year)

    return sections


class JournalQueryService:
    """Answers "what did I write this week in earlier years?" for a note source.

    Example::

        service = JournalQueryService(MarkdownVault("~/Notes"))
        view = await service.render(vault.resolve("2026-01-09"))
    """

    def __init__(self, source: NoteSource, settings: Any = None):
        self._settings = normalize_settings(settings)
        self.source = source
        self.documents = VaultDocuments(source, lambda: self._settings)
        self.index: JournalIndex[Note] = JournalIndex(self.documents)
        self._generation = 0

    @property
    def settings(self) -> JournalSettings:
        return self._settings

    @property
    def generation(self) -> int:
        """Number of renders started so far."""
        return self._generation

    def apply_settings(self, raw: Any) -> JournalSettings:
        """Normalize and adopt new settings; rebuild the index only when membership can change."""
        previous = self._settings
        self._settings = normalize_settings(raw)
        if should_rebuild_index(previous, self._settings):
            logger.info("Journal filter settings changed; invalidating index")
            self.index.invalidate()
        return self._settings

    def invalidate(self) -> None:
        """Call after notes were created, changed, renamed or deleted.

        Rescans the source when it caches its listing, then drops the index.
        """
        refresh = getattr(self.source, "refresh", None)
        if callable(refresh):
            refresh()
        self.index.invalidate()

    def is_journal_note(self, note: Note) -> bool:
        return self.documents.is_in_scope(note)

    def created_date(self, note: Note) -> DateParts | None:
        return self.documents.created_date(note)

    def section_entries(self, active_date: DateParts, target_year: int) -> list[JournalEntry[Note]]:
        return self.index.section_entries(active_date, target_year)

    async def preview_snippet(self, note: Note) -> str | None:
        s = self._settings
        return await self.index.preview_snippet(note, s.preview_max_lines, s.preview_max_chars, s.preview_max_bytes)

    async def render(self, active_note: Note | None, current_year: int | None = None) -> JournalView[Note] | None:
        """Build the lookback view for *active_note*.

        Returns None when there is nothing to show (no note, or not a journal
        note) and also when a newer render started while this one was
        awaiting previews; callers drop None results.
        """
        self._generation += 1
        generation = self._generation

        if active_note is None or not self.is_journal_note(active_note):
            return None

        settings = self._settings
        active_date = self.created_date(active_note)
        if active_date is None:
            return JournalView(
                active_date=None,
                message=f"This note has no valid '{settings.date_field}' date in frontmatter.",
            )

        year = current_year if current_year is not None else date.today().year
        view: JournalView[Note] = JournalView(active_date=active_date)
        for section in build_sections(active_date.year, settings, year):
            entries = self.section_entries(active_date, section.target_year)
            previews = await map_with_concurrency(entries, PREVIEW_CONCURRENCY, self._safe_preview)
            if generation != self._generation:
                logger.debug(f"Dropping stale render {generation} (latest is {self._generation})")
                return None
            view.sections.append(
                SectionView(section, [PreviewedEntry(entry, preview) for entry, preview in zip(entries, previews)])
            )
        return view

    async def _safe_preview(self, entry: JournalEntry[Note], _index: int) -> str | None:
        try:
            return await self.preview_snippet(entry.file)
        except Exception as e:
            logger.warning(f"Failed to build preview snippet for {entry.file.path}: {e}")
            return None
