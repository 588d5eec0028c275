"""Shared type aliases used across lookback."""

from pathlib import Path
from typing import Any

# Parsed YAML frontmatter of a note
Frontmatter = dict[str, Any]

# Path types
PathLike = str | Path
