"""Text helpers for note bodies: frontmatter stripping and preview building."""

import re

ELLIPSIS = "…"
FRONTMATTER_DELIMITER = "---"

_WHITESPACE_RUN = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    if not text:
        return ""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def split_frontmatter(content: str) -> tuple[str | None, str]:
    """Split a leading ``---`` block from the body.

    Returns ``(frontmatter_text, body)``. When the content does not start with
    ``---`` or the block is never closed, the frontmatter is None and the body
    is the content unchanged.
    """
    if not content.startswith(FRONTMATTER_DELIMITER):
        return None, content

    lines = content.split("\n")
    for i in range(1, len(lines)):
        if lines[i].strip() == FRONTMATTER_DELIMITER:
            return "\n".join(lines[1:i]), "\n".join(lines[i + 1 :])
    return None, content


def strip_frontmatter(content: str) -> str:
    """Return the note body without its leading frontmatter block (best effort)."""
    return split_frontmatter(content)[1]


def build_preview(body: str, max_lines: int, max_chars: int) -> str | None:
    """
    Build a compact preview from the first non-empty lines of *body*.

    Each line is whitespace-collapsed. Lines are taken until *max_lines* are
    collected or *max_chars* is spent; a line that does not fit in the
    remaining budget is cut and ends with an ellipsis, which also ends the
    preview.

    Returns:
        The accepted lines joined with newlines, or None if nothing was taken.
    """
    lines: list[str] = []
    used = 0

    for raw_line in body.split("\n"):
        line = collapse_whitespace(raw_line)
        if not line:
            continue

        remaining = max_chars - used
        if remaining <= 0:
            break

        truncated = len(line) > remaining
        if truncated:
            line = line[: max(0, remaining - 1)] + ELLIPSIS
        lines.append(line)
        used += len(line)

        if truncated or len(lines) >= max_lines:
            break

    if not lines:
        return None
    return "\n".join(lines)
