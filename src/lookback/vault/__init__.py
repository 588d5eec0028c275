"""Markdown vault backend: notes on disk with YAML frontmatter."""

from .catalog import PropertyCatalog, build_property_catalog
from .notes import MarkdownVault, Note

__all__ = [
    "MarkdownVault",
    "Note",
    "PropertyCatalog",
    "build_property_catalog",
]
