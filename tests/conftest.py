"""Shared test fixtures for lookback."""

import os
import tempfile

import pytest


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


def _write_note(root, rel_path: str, content: str) -> str:
    path = os.path.join(root, rel_path)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path


@pytest.fixture
def write_note():
    """Helper that writes a note file under a vault root, creating folders."""
    return _write_note


@pytest.fixture
def vault_dir(tmp_dir):
    """A small vault: journal notes across years plus unrelated notes."""
    root = os.path.join(tmp_dir, "vault")
    _write_note(
        root,
        "daily/2026-01-09.md",
        "---\ncreated: 2026-01-09\ntags: [journal]\n---\nToday I started the new notebook.\n",
    )
    _write_note(
        root,
        "daily/2025-01-07.md",
        "---\ncreated: 2025-01-07\ntags: journal\n---\nCold morning.\n\nLong walk by the river.\n",
    )
    _write_note(
        root,
        "daily/2025-01-09.md",
        "---\ncreated: '2025-01-09T08:30:00'\ntype: daily\n---\nWrote about #journal habits.\n",
    )
    _write_note(
        root,
        "daily/2024-01-10.md",
        "---\ncreated: 2024-01-10\ntags:\n  - journal\n  - travel\n---\nTrain to Lisbon.\n",
    )
    _write_note(
        root,
        "daily/2025-03-15.md",
        "---\ncreated: 2025-03-15\ntags: [journal]\n---\nOut of the week.\n",
    )
    _write_note(root, "projects/plan.md", "---\ncreated: 2025-01-08\ntags: [work]\n---\nRoadmap.\n")
    _write_note(root, "inbox/undated.md", "---\ntags: [journal]\n---\nNo date here.\n")
    _write_note(root, ".obsidian/ignored.md", "---\ncreated: 2025-01-08\ntags: [journal]\n---\nHidden.\n")
    return root
