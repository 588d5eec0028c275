"""Tests for lookback.journal.models."""

from lookback.journal.dates import DateParts
from lookback.journal.models import (
    IndexState,
    JournalEntry,
    JournalSection,
    JournalView,
    PreviewedEntry,
    SectionView,
)


class TestJournalEntry:
    def test_equality(self):
        a = JournalEntry("doc.md", DateParts(2025, 1, 7))
        b = JournalEntry("doc.md", DateParts(2025, 1, 7))
        assert a == b


class TestSectionView:
    def test_is_empty(self):
        section = JournalSection("1 year ago", 2025)
        assert SectionView(section).is_empty
        entry = JournalEntry("doc.md", DateParts(2025, 1, 7))
        assert not SectionView(section, [PreviewedEntry(entry, "text")]).is_empty


class TestJournalView:
    def test_repr_summarizes_sections(self):
        section = JournalSection("1 year ago", 2025)
        entry = JournalEntry("doc.md", DateParts(2025, 1, 7))
        view = JournalView(DateParts(2026, 1, 9), [SectionView(section, [PreviewedEntry(entry)])])
        assert "2025:1" in repr(view)
        assert "2026-01-09" in repr(view)

    def test_message_only(self):
        view = JournalView(active_date=None, message="no date")
        assert view.sections == []


def test_index_states():
    assert {s.value for s in IndexState} == {"fresh", "dirty"}
