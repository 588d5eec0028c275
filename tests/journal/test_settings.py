"""Tests for lookback.journal.settings."""

import pytest
from pydantic import ValidationError

from lookback.journal.filters import FilterMatchMode
from lookback.journal.settings import (
    DEFAULT_SETTINGS,
    JournalSettings,
    clamp_int,
    normalize_settings,
    should_rebuild_index,
)


class TestNormalizeSettings:
    def test_defaults(self):
        settings = normalize_settings(None)
        assert settings == DEFAULT_SETTINGS
        assert settings.filter_field == "tags"
        assert settings.filter_values == "journal"
        assert settings.filter_match_mode is FilterMatchMode.ANY
        assert settings.date_field == "created"
        assert settings.years_back == 4
        assert settings.show_this_year_section is True
        assert settings.preview_max_lines == 4
        assert settings.preview_max_chars == 420
        assert settings.preview_max_bytes == 262144

    def test_host_blob_clamped_and_trimmed(self):
        settings = normalize_settings(
            {
                "filterField": " type ",
                "filterValues": " journal, daily , ",
                "filterMatchMode": "all",
                "dateField": " createdAt ",
                "yearsBack": 99,
                "showThisYearSection": False,
                "previewMaxLines": 0,
                "previewMaxChars": 10,
                "previewMaxBytes": 10,
            }
        )
        assert settings.filter_field == "type"
        assert settings.filter_values == "journal, daily"
        assert settings.filter_match_mode is FilterMatchMode.ALL
        assert settings.date_field == "createdAt"
        assert settings.years_back == 20
        assert settings.show_this_year_section is False
        assert settings.preview_max_lines == 1
        assert settings.preview_max_chars == 80
        assert settings.preview_max_bytes == 4096

    def test_snake_case_keys(self):
        settings = normalize_settings({"filter_field": "type", "years_back": "7", "preview_max_bytes": 1e9})
        assert settings.filter_field == "type"
        assert settings.years_back == 7
        assert settings.preview_max_bytes == 10485760

    def test_invalid_types_fall_back(self):
        settings = normalize_settings(
            {
                "filterField": 42,
                "filterValues": " , ",
                "filterMatchMode": "ALL",
                "dateField": "   ",
                "yearsBack": "many",
                "showThisYearSection": "false",
                "previewMaxLines": float("nan"),
                "previewMaxChars": None,
                "previewMaxBytes": [1],
            }
        )
        assert settings == DEFAULT_SETTINGS

    def test_huge_numbers_fall_back(self):
        settings = normalize_settings({"yearsBack": 10**400, "previewMaxChars": "1e400", "previewMaxLines": ""})
        assert settings.years_back == 4
        assert settings.preview_max_chars == 420
        assert settings.preview_max_lines == 4

    @pytest.mark.parametrize("raw", ["not a dict", 7, ["yearsBack", 3]])
    def test_non_mapping_input(self, raw):
        assert normalize_settings(raw) == DEFAULT_SETTINGS

    def test_accepts_existing_settings(self):
        custom = normalize_settings({"yearsBack": 2})
        assert normalize_settings(custom) == custom

    def test_unknown_keys_ignored(self):
        assert normalize_settings({"theme": "dark"}) == DEFAULT_SETTINGS

    def test_to_host_dict(self):
        dumped = normalize_settings({"filterMatchMode": "all"}).to_host_dict()
        assert dumped["filterMatchMode"] == "all"
        assert dumped["previewMaxBytes"] == 262144
        assert normalize_settings(dumped).filter_match_mode is FilterMatchMode.ALL

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_SETTINGS.years_back = 9


class TestClampInt:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (5, 5), (2.5, 3), (3.49, 3), ("8", 8), (-3, 1), (100, 10), (True, 1),
            (float("inf"), 4), ("x", 4), (None, 4), ("", 4), (10**400, 4),
        ],
    )
    def test_values(self, value, expected):
        assert clamp_int(value, 1, 10, 4) == expected


class TestShouldRebuildIndex:
    @pytest.fixture
    def base(self):
        return normalize_settings(DEFAULT_SETTINGS)

    @pytest.mark.parametrize(
        "change",
        [
            {"preview_max_lines": 8},
            {"preview_max_chars": 900},
            {"preview_max_bytes": 1024},
            {"years_back": 8},
            {"show_this_year_section": False},
        ],
    )
    def test_display_changes_keep_index(self, base, change):
        assert should_rebuild_index(base, base.model_copy(update=change)) is False

    @pytest.mark.parametrize(
        "change",
        [
            {"filter_field": "type"},
            {"filter_values": "daily"},
            {"filter_match_mode": FilterMatchMode.ALL},
            {"date_field": "createdAt"},
        ],
    )
    def test_membership_changes_rebuild(self, base, change):
        assert should_rebuild_index(base, base.model_copy(update=change)) is True

    def test_identical(self, base):
        assert should_rebuild_index(base, JournalSettings()) is False
