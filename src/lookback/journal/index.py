"""Journal index: (year, ISO week) grouping plus a preview cache.

The grouping is rebuilt lazily. ``invalidate()`` marks it dirty and the next
read rebuilds it from the repository in one synchronous pass, so no other
task can ever observe a half-built index.
"""

from __future__ import annotations

from typing import Generic

from loguru import logger

from lookback.core.utils.text import build_preview, strip_frontmatter

from .dates import DateParts, iso_week
from .models import Doc, IndexState, JournalEntry, PreviewKey
from .repository import DocumentRepository

DEFAULT_PREVIEW_MAX_LINES = 4
DEFAULT_PREVIEW_MAX_CHARS = 420
DEFAULT_PREVIEW_MAX_BYTES = 262144

YearWeekMap = dict[int, dict[int, list[JournalEntry]]]


class JournalIndex(Generic[Doc]):
    """Groups in-scope documents by (year, ISO week) and caches previews.

    Example::

        index = JournalIndex(repository)
        entries = index.section_entries(DateParts(2026, 1, 9), 2025)
        preview = await index.preview_snippet(entries[0].file)
    """

    def __init__(self, repository: DocumentRepository[Doc]):
        self._repository = repository
        self._state = IndexState.DIRTY
        self._entries_by_year_week: YearWeekMap = {}
        self._preview_cache: dict[PreviewKey, str | None] = {}

    @property
    def state(self) -> IndexState:
        return self._state

    @property
    def is_fresh(self) -> bool:
        return self._state is IndexState.FRESH

    @property
    def preview_cache_size(self) -> int:
        """Number of cached previews, including cached "no preview" results."""
        return len(self._preview_cache)

    def invalidate(self) -> None:
        """Drop the grouping and every cached preview; the next read rebuilds."""
        self._state = IndexState.DIRTY
        self._entries_by_year_week.clear()
        self._preview_cache.clear()

    def section_entries(self, active_date: DateParts, target_year: int) -> list[JournalEntry[Doc]]:
        """Entries from *target_year* in the same ISO week as *active_date*.

        Returns a new list, newest first. Rebuild errors propagate and leave
        the index dirty so the next call retries.
        """
        self._ensure_index()
        week = iso_week(active_date)
        return list(self._entries_by_year_week.get(target_year, {}).get(week, []))

    async def preview_snippet(
        self,
        doc: Doc,
        max_lines: int = DEFAULT_PREVIEW_MAX_LINES,
        max_chars: int = DEFAULT_PREVIEW_MAX_CHARS,
        max_bytes: int = DEFAULT_PREVIEW_MAX_BYTES,
    ) -> str | None:
        """Return a short preview of the document body, or None.

        Args:
            doc: Document handle from the repository.
            max_lines: Maximum non-empty lines in the preview.
            max_chars: Character budget across all lines.
            max_bytes: Documents with a known size above this are not read.

        Returns:
            Preview text, or None when the document is too large, has no body
            text, or could not be read. Read failures are logged, not cached.
        """
        key = PreviewKey(self._repository.path(doc), max_lines, max_chars, max_bytes)
        if key in self._preview_cache:
            return self._preview_cache[key]

        size = self._repository.size_bytes(doc)
        if size is not None and size > max_bytes:
            logger.debug(f"Skipping preview for {key.path}: {size} bytes exceeds {max_bytes}")
            self._preview_cache[key] = None
            return None

        try:
            content = await self._repository.read_content(doc)
        except Exception as e:
            logger.warning(f"Failed to read {key.path} for preview: {e}")
            return None

        preview = build_preview(strip_frontmatter(content), max_lines, max_chars)
        self._preview_cache[key] = preview
        return preview

    def _ensure_index(self) -> None:
        if self._state is IndexState.FRESH:
            return

        # Built aside and swapped in only once complete.
        grouped: YearWeekMap = {}
        for doc in self._repository.list_documents():
            if not self._repository.is_in_scope(doc):
                continue
            created = self._repository.created_date(doc)
            if created is None:
                continue
            week = iso_week(created)
            grouped.setdefault(created.year, {}).setdefault(week, []).append(JournalEntry(doc, created))

        entry_count = 0
        for weeks in grouped.values():
            for entries in weeks.values():
                entries.sort(key=self._sort_key)
                entry_count += len(entries)

        self._entries_by_year_week = grouped
        self._state = IndexState.FRESH
        logger.debug(f"Journal index rebuilt: {entry_count} entries across {len(grouped)} years")

    def _sort_key(self, entry: JournalEntry[Doc]) -> tuple[int, str, str]:
        # newest first, then display name; sort() is stable for full ties
        name = self._repository.display_name(entry.file)
        return (-entry.date_parts.sort_key, name.casefold(), name)
