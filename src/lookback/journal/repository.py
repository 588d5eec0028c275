"""DocumentRepository protocol — what the journal index needs from its host.

Any system holding dated text documents (an Obsidian vault, a directory of
markdown files, a notes database) can implement this protocol. The index
never inspects ``Doc`` itself; every question about a document goes through
these seven methods.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from .dates import DateParts
from .models import Doc


@runtime_checkable
class DocumentRepository(Protocol[Doc]):
    """Read-only access to the documents a journal index is built from."""

    def list_documents(self) -> Iterable[Doc]:
        """Return every document the repository knows about."""
        ...

    def is_in_scope(self, doc: Doc) -> bool:
        """Whether the document is a journal entry and belongs in the index."""
        ...

    def created_date(self, doc: Doc) -> DateParts | None:
        """The document's created date, or None if absent or invalid."""
        ...

    async def read_content(self, doc: Doc) -> str:
        """Read the full text. May raise if the document disappeared."""
        ...

    def size_bytes(self, doc: Doc) -> int | None:
        """Size of the stored document, or None if unknown."""
        ...

    def path(self, doc: Doc) -> str:
        """Stable unique key for the document."""
        ...

    def display_name(self, doc: Doc) -> str:
        """Human-readable name, used to order same-day entries."""
        ...
