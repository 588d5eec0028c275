"""Tests for lookback.journal.filters."""

import pytest

from lookback.journal.filters import (
    FilterMatchMode,
    extract_comparable_values,
    filter_matches,
    normalize_filter_token,
    parse_filter_values,
)


class TestTokens:
    def test_parse_filter_values(self):
        assert parse_filter_values(" journal, daily , ,") == ["journal", "daily"]
        assert parse_filter_values("") == []

    def test_tags_get_hash(self):
        assert normalize_filter_token("tags", " Journal ") == "#journal"
        assert normalize_filter_token(" TAGS ", "#Daily") == "#daily"

    def test_other_fields_plain(self):
        assert normalize_filter_token("type", " Daily ") == "daily"

    def test_extract_primitives(self):
        assert extract_comparable_values("priority", 2) == ["2"]
        assert extract_comparable_values("done", True) == ["true"]
        assert extract_comparable_values("score", 3.0) == ["3"]
        assert extract_comparable_values("type", ["Daily", "Reflection"]) == ["daily", "reflection"]

    def test_extract_skips_unusable(self):
        assert extract_comparable_values("type", None) == []
        assert extract_comparable_values("type", {"a": 1}) == []
        assert extract_comparable_values("type", ["", "  ", None, ["nested"], "ok"]) == ["ok"]


class TestFilterMatches:
    def test_tags_with_and_without_hash(self):
        assert filter_matches("tags", ["journal", "#daily"], "journal", "any") is True
        assert filter_matches("tags", ["#daily"], "journal", "any") is False

    def test_any_and_all(self):
        value = ["daily", "reflection"]
        assert filter_matches("type", value, "daily, reflection", "all") is True
        assert filter_matches("type", value, "daily, missing", "all") is False
        assert filter_matches("type", value, "missing, reflection", "any") is True

    def test_accepts_enum(self):
        assert filter_matches("type", "daily", "daily", FilterMatchMode.ALL) is True

    def test_unknown_mode_is_any(self):
        assert filter_matches("type", ["daily"], "daily, missing", "ALL") is True

    def test_case_insensitive(self):
        assert filter_matches("type", "Daily", "DAILY", "any") is True

    def test_scalar_value(self):
        assert filter_matches("tags", "journal", "journal", "any") is True

    @pytest.mark.parametrize("csv", ["", " , ,"])
    def test_empty_filter_never_matches(self, csv):
        assert filter_matches("type", ["daily"], csv, "all") is False

    @pytest.mark.parametrize("value", [None, [], "", ["  "]])
    def test_empty_candidates_never_match(self, value):
        assert filter_matches("type", value, "daily", "any") is False

    def test_deterministic(self):
        args = ("tags", ["#Journal", "travel"], "journal, travel", "all")
        assert filter_matches(*args) == filter_matches(*args) is True


class TestFilterMatchMode:
    def test_coerce(self):
        assert FilterMatchMode.coerce("all") is FilterMatchMode.ALL
        assert FilterMatchMode.coerce(FilterMatchMode.ALL) is FilterMatchMode.ALL
        assert FilterMatchMode.coerce("any") is FilterMatchMode.ANY
        assert FilterMatchMode.coerce("everything") is FilterMatchMode.ANY
        assert FilterMatchMode.coerce(None) is FilterMatchMode.ANY
