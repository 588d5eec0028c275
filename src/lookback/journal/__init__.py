"""Journal lookback engine.

Groups dated notes by (year, ISO week), caches text previews, and answers
"what did I write in this week in earlier years?" through a pluggable
DocumentRepository protocol.
"""

from .dates import DateParts, coerce_date, iso_week, parse_date
from .filters import FilterMatchMode, filter_matches
from .index import JournalIndex
from .models import IndexState, JournalEntry, JournalSection, JournalView
from .repository import DocumentRepository
from .settings import DEFAULT_SETTINGS, JournalSettings, normalize_settings, should_rebuild_index

__all__ = [
    "DEFAULT_SETTINGS",
    "DateParts",
    "DocumentRepository",
    "FilterMatchMode",
    "IndexState",
    "JournalEntry",
    "JournalIndex",
    "JournalSection",
    "JournalSettings",
    "JournalView",
    "coerce_date",
    "filter_matches",
    "iso_week",
    "normalize_settings",
    "parse_date",
    "should_rebuild_index",
]
