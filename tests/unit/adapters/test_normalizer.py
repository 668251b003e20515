"""Tests for CSV normalizer functions."""

from helpdesk.adapters.csv_loader.normalizer import (
    clean_string,
    normalize_column_name,
    normalize_enum_value,
    parse_int,
)

# ─── normalize_column_name ───────────────────────────────────────────


def test_strip_trailing_spaces():
    assert normalize_column_name("  Priority  ") == "priority"


def test_remove_bom():
    assert normalize_column_name("\ufeffoperator_id") == "operator_id"


def test_replace_spaces_with_underscore():
    assert normalize_column_name("Response Hours") == "response_hours"


def test_non_breaking_space():
    assert normalize_column_name("Resolution\u00a0Hours") == "resolution_hours"


def test_hyphen_becomes_underscore():
    assert normalize_column_name("proficiency-level") == "proficiency_level"


def test_bom_plus_trailing_space():
    """Combined BOM + trailing spaces (common in spreadsheet exports)."""
    assert normalize_column_name("\ufeff  Skill  ") == "skill"


# ─── clean_string ────────────────────────────────────────────────────


def test_clean_string_strips():
    assert clean_string("  op-alice ") == "op-alice"


def test_clean_string_empty_is_none():
    assert clean_string("   ") is None
    assert clean_string(None) is None


# ─── parse_int ───────────────────────────────────────────────────────


def test_parse_int_plain():
    assert parse_int("24") == 24


def test_parse_int_spreadsheet_float():
    assert parse_int("4.0") == 4
    assert parse_int("4,0") == 4


def test_parse_int_rejects_fraction_and_garbage():
    assert parse_int("4.5") is None
    assert parse_int("four") is None
    assert parse_int("") is None


# ─── normalize_enum_value ────────────────────────────────────────────


def test_normalize_enum_value():
    assert normalize_enum_value(" In Progress ") == "in_progress"
    assert normalize_enum_value("CRITICAL") == "critical"
    assert normalize_enum_value("") is None
