"""Read-only access to a directory of markdown notes.

Scanning the vault plays the role a host's metadata cache would: every
``.md`` file is read once, its frontmatter parsed and its tags collected.
Note bodies are re-read on demand through :meth:`MarkdownVault.read`.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

import aiofiles
import yaml
from loguru import logger

from lookback.core.exceptions import VaultNotFoundError
from lookback.core.types import Frontmatter, PathLike
from lookback.core.utils.text import split_frontmatter

NOTE_SUFFIX = ".md"

# "#tag" preceded by start-of-line or whitespace; nested tags use "/"
_INLINE_TAG = re.compile(r"(?:^|(?<=\s))#([\w/-]+)")


@dataclass(frozen=True)
class Note:
    """A markdown note in the vault.

    Attributes:
        path: Vault-relative POSIX path, unique per note (``daily/2026-01-09.md``).
        basename: File name without the ``.md`` suffix.
        size: Size on disk in bytes at scan time.
        frontmatter: Parsed YAML frontmatter (empty when absent or malformed).
        tags: Frontmatter tags as written plus inline ``#tags`` from the body.
    """

    path: str
    basename: str
    size: int | None = None
    frontmatter: Frontmatter = field(default_factory=dict, compare=False, hash=False)
    tags: tuple[str, ...] = ()

    def __repr__(self) -> str:
        return f"Note(path='{self.path}', tags={list(self.tags)})"


def parse_frontmatter(text: str | None, source: str = "") -> Frontmatter:
    """Parse a frontmatter block with ``yaml.safe_load``; bad YAML yields ``{}``."""
    if not text or not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.warning(f"Ignoring malformed frontmatter in {source or 'note'}: {e}")
        return {}
    return loaded if isinstance(loaded, dict) else {}


def collect_tags(frontmatter: Frontmatter, body: str) -> tuple[str, ...]:
    """Gather tags from the ``tags`` property and inline ``#tag`` tokens, de-duplicated."""
    tags: dict[str, None] = {}

    raw = frontmatter.get("tags")
    values = raw if isinstance(raw, list) else [raw]
    for value in values:
        if isinstance(value, str) and value.strip():
            tags[value.strip()] = None

    for match in _INLINE_TAG.finditer(body):
        tag = match.group(1)
        if not tag.isdigit():
            tags[f"#{tag}"] = None

    return tuple(tags)


class MarkdownVault:
    """A vault rooted at a directory; hidden directories (``.obsidian``, ``.git``) are skipped.

    Example::

        vault = MarkdownVault("~/Notes")
        for note in vault.notes():
            print(note.path, note.frontmatter.get("created"))
    """

    def __init__(self, root: PathLike):
        self.root = Path(root).expanduser()
        self._notes: dict[str, Note] | None = None

    def notes(self) -> list[Note]:
        """All notes, sorted by path. Scans on first use."""
        if self._notes is None:
            self.refresh()
        return list(self._notes.values())

    def refresh(self) -> None:
        """Rescan the vault from disk."""
        if not self.root.is_dir():
            raise VaultNotFoundError(f"Vault not found: {self.root}")

        notes: dict[str, Note] = {}
        for dirpath, dirs, files in os.walk(self.root):
            dirs[:] = sorted(d for d in dirs if not d.startswith("."))
            for name in sorted(files):
                if not name.endswith(NOTE_SUFFIX):
                    continue
                note = self._load_note(Path(dirpath) / name)
                if note is not None:
                    notes[note.path] = note

        self._notes = dict(sorted(notes.items()))
        logger.debug(f"Scanned {len(self._notes)} notes in {self.root}")

    def get(self, path: str) -> Note | None:
        """Look up a note by its vault-relative path."""
        if self._notes is None:
            self.refresh()
        return self._notes.get(path)

    def resolve(self, reference: PathLike) -> Note | None:
        """Find a note by vault-relative path, filesystem path or basename."""
        ref = str(reference)
        candidate = Path(ref).expanduser()
        if candidate.is_absolute() or candidate.exists():
            try:
                ref = candidate.resolve().relative_to(self.root.resolve()).as_posix()
            except ValueError:
                return None
        if not ref.endswith(NOTE_SUFFIX):
            ref += NOTE_SUFFIX

        note = self.get(ref)
        if note is not None:
            return note
        stem = ref[: -len(NOTE_SUFFIX)]
        matches = [n for n in self.notes() if n.basename == stem]
        return matches[0] if len(matches) == 1 else None

    async def read(self, note: Note) -> str:
        """Read a note's full text. Raises OSError if it vanished since the scan."""
        async with aiofiles.open(self.root / note.path, encoding="utf-8", errors="ignore") as f:
            return await f.read()

    def _load_note(self, file_path: Path) -> Note | None:
        try:
            content = file_path.read_text(encoding="utf-8", errors="ignore")
            size = file_path.stat().st_size
        except OSError as e:
            logger.warning(f"Skipping unreadable note {file_path}: {e}")
            return None

        rel_path = file_path.relative_to(self.root).as_posix()
        raw_frontmatter, body = split_frontmatter(content)
        frontmatter = parse_frontmatter(raw_frontmatter, rel_path)
        return Note(
            path=rel_path,
            basename=file_path.stem,
            size=size,
            frontmatter=frontmatter,
            tags=collect_tags(frontmatter, body),
        )
