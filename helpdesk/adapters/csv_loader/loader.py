"""CSV loader: reads seed data for operator skills and SLA targets."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from helpdesk.adapters.csv_loader.normalizer import (
    clean_string,
    normalize_column_name,
    normalize_enum_value,
    parse_int,
)
from helpdesk.domain.entities.operator_skill import OperatorSkillRecord
from helpdesk.domain.entities.sla_target import SlaTarget
from helpdesk.domain.value_objects.enums import TicketCategory, TicketPriority

logger = logging.getLogger(__name__)


def _sniff_dialect(sample: str) -> type[csv.Dialect]:
    """Pick the delimiter (comma/semicolon/tab) from the header line."""
    if not sample:
        return csv.excel

    first_line = sample.splitlines()[0]
    delims = [";", ",", "\t"]
    counts = {d: first_line.count(d) for d in delims}
    best_delim = max(counts, key=counts.get)

    if counts[best_delim] > 0:
        class DynamicDialect(csv.excel):
            delimiter = best_delim
        return DynamicDialect
    return csv.excel


def _read_csv(file_path: Path, encoding: str = "utf-8-sig") -> list[dict[str, str | None]]:
    """Read a CSV file with BOM handling and column normalization.

    Args:
        file_path: path to the CSV file.
        encoding: file encoding (utf-8-sig strips BOM automatically).

    Returns:
        List of dicts with normalized column names.
    """
    with open(file_path, encoding=encoding, newline="") as f:
        sample = f.read(4096)
        f.seek(0)
        reader = csv.DictReader(f, dialect=_sniff_dialect(sample))
        if reader.fieldnames is None:
            raise ValueError(f"CSV file {file_path} has no header row")

        col_map = {col: normalize_column_name(col) for col in reader.fieldnames}
        rows = [
            {col_map[k]: clean_string(v) for k, v in raw_row.items() if k is not None}
            for raw_row in reader
        ]

    logger.info("Loaded %d rows from %s (columns: %s)", len(rows), file_path.name, list(col_map.values()))
    return rows


def load_operator_skills(file_path: Path) -> list[OperatorSkillRecord]:
    """Load the operator skills CSV.

    Expected columns (after normalization):
        operator_id | user_id, skill | category, proficiency_level | proficiency | level
    Rows with an unknown skill or an out-of-range level are skipped.
    """
    records = []
    for line_no, row in enumerate(_read_csv(file_path), start=2):
        operator_id = row.get("operator_id") or row.get("user_id")
        raw_skill = normalize_enum_value(row.get("skill") or row.get("category"))
        level = parse_int(
            row.get("proficiency_level") or row.get("proficiency") or row.get("level")
        )
        try:
            if not operator_id:
                raise ValueError("missing operator id")
            if level is None:
                raise ValueError("missing or non-integer proficiency level")
            records.append(OperatorSkillRecord(operator_id, TicketCategory(raw_skill), level))
        except ValueError as e:
            logger.warning("%s line %d skipped: %s", file_path.name, line_no, e)
    logger.info("Parsed %d operator skill records", len(records))
    return records


def load_sla_targets(file_path: Path) -> list[SlaTarget]:
    """Load the SLA targets CSV.

    Expected columns (after normalization):
        priority, response_hours, resolution_hours
    """
    targets = []
    for line_no, row in enumerate(_read_csv(file_path), start=2):
        raw_priority = normalize_enum_value(row.get("priority"))
        response = parse_int(row.get("response_hours"))
        resolution = parse_int(row.get("resolution_hours"))
        try:
            if response is None or resolution is None:
                raise ValueError("response_hours and resolution_hours must be integers")
            targets.append(SlaTarget(TicketPriority(raw_priority), response, resolution))
        except ValueError as e:
            logger.warning("%s line %d skipped: %s", file_path.name, line_no, e)
    logger.info("Parsed %d SLA targets", len(targets))
    return targets
