"""CSV value normalization: handles BOM, stray spaces, spreadsheet quirks."""

from __future__ import annotations

import re


def normalize_column_name(name: str) -> str:
    """Normalize a CSV column name.

    - Removes BOM characters (\\ufeff)
    - Strips leading/trailing whitespace
    - Replaces runs of spaces / non-breaking spaces / hyphens with one underscore
    - Lowercases
    - Drops anything that is not alphanumeric or underscore
    """
    name = name.replace("\ufeff", "").strip()
    name = re.sub(r"[\s\u00a0\-]+", "_", name)
    name = name.lower()
    return re.sub(r"[^\w]", "", name)


def clean_string(value: str | None) -> str | None:
    """Strip whitespace and return None for empty strings."""
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def parse_int(value: str | None) -> int | None:
    """Parse "4", "4.0" or "4,0" as 4; anything else (incl. 4.5) as None."""
    if not value:
        return None
    try:
        number = float(value.replace(",", ".").strip())
    except ValueError:
        return None
    return int(number) if number.is_integer() else None


def normalize_enum_value(value: str | None) -> str | None:
    """'In Progress ' → 'in_progress'"""
    value = clean_string(value)
    if value is None:
        return None
    return re.sub(r"[\s\-]+", "_", value.lower())
