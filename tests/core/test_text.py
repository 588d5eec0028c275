"""Tests for lookback.core.utils.text."""

from lookback.core.utils.text import (
    ELLIPSIS,
    build_preview,
    collapse_whitespace,
    split_frontmatter,
    strip_frontmatter,
)


def test_collapse_whitespace():
    assert collapse_whitespace("  a \t b  c  ") == "a b c"
    assert collapse_whitespace("") == ""


class TestFrontmatter:
    def test_strip_leading_block(self):
        content = "---\ntitle: Test\ncreated: 2026-01-09\n---\nLine 1\nLine 2"
        assert strip_frontmatter(content) == "Line 1\nLine 2"

    def test_split_returns_block_text(self):
        frontmatter, body = split_frontmatter("---\na: 1\n---\nbody")
        assert frontmatter == "a: 1"
        assert body == "body"

    def test_closing_delimiter_may_have_trailing_spaces(self):
        assert strip_frontmatter("---\na: 1\n---  \nbody") == "body"

    def test_unclosed_block_keeps_content(self):
        content = "---\ntitle: Test\nNo closing line"
        assert strip_frontmatter(content) == content
        assert split_frontmatter(content) == (None, content)

    def test_no_frontmatter(self):
        assert strip_frontmatter("Just text\n---\nmore") == "Just text\n---\nmore"


class TestBuildPreview:
    def test_takes_non_empty_lines(self):
        assert build_preview("\n\nFirst   line\n   \nSecond line\n", 4, 420) == "First line\nSecond line"

    def test_line_cap(self):
        body = "\n".join(f"line {i}" for i in range(10))
        assert build_preview(body, 3, 420) == "line 0\nline 1\nline 2"

    def test_truncates_and_stops(self):
        body = "12345\n" + "a" * 50 + "\nnever shown"
        preview = build_preview(body, 4, 20)
        first, second = preview.split("\n")
        assert first == "12345"
        assert second == "a" * 14 + ELLIPSIS
        assert len(first) + len(second) == 20

    def test_budget_exhausted_exactly(self):
        assert build_preview("abcde\nfghij\nklm", 4, 10) == "abcde\nfghij"

    def test_empty_body(self):
        assert build_preview("   \n\n\t\n", 4, 420) is None
