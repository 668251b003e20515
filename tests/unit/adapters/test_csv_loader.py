"""Tests for CSV loader functions."""

import csv
from pathlib import Path

from helpdesk.adapters.csv_loader.loader import load_operator_skills, load_sla_targets
from helpdesk.domain.value_objects.enums import TicketCategory, TicketPriority


def _write_csv(rows: list[dict], path: Path, delimiter: str = ",", encoding: str = "utf-8-sig") -> None:
    """Helper to write a test CSV file."""
    if not rows:
        return
    with open(path, "w", encoding=encoding, newline="") as f:
        writer = csv.DictWriter(f, fieldnames=rows[0].keys(), delimiter=delimiter)
        writer.writeheader()
        writer.writerows(rows)


def test_load_sla_targets_basic(tmp_path):
    csv_path = tmp_path / "sla_targets.csv"
    _write_csv([
        {"Priority": "Critical", "Response Hours": "1", "Resolution Hours": "4"},
        {"Priority": "low", "Response Hours": "24.0", "Resolution Hours": "72"},
    ], csv_path)

    targets = load_sla_targets(csv_path)

    assert [(t.priority, t.response_hours, t.resolution_hours) for t in targets] == [
        (TicketPriority.CRITICAL, 1, 4),
        (TicketPriority.LOW, 24, 72),
    ]


def test_load_sla_targets_skips_bad_rows(tmp_path):
    csv_path = tmp_path / "sla_targets.csv"
    _write_csv([
        {"priority": "urgent", "response_hours": "1", "resolution_hours": "2"},
        {"priority": "high", "response_hours": "", "resolution_hours": "24"},
        {"priority": "medium", "response_hours": "-1", "resolution_hours": "48"},
        {"priority": "high", "response_hours": "4", "resolution_hours": "24"},
    ], csv_path)

    targets = load_sla_targets(csv_path)

    assert len(targets) == 1
    assert targets[0].priority == TicketPriority.HIGH


def test_load_operator_skills_semicolon(tmp_path):
    csv_path = tmp_path / "operator_skills.csv"
    _write_csv([
        {"operator_id": "op-alice", "skill": "Network", "proficiency_level": "5"},
        {"operator_id": "op-bob", "skill": "software", "proficiency_level": "4"},
    ], csv_path, delimiter=";")

    records = load_operator_skills(csv_path)

    assert len(records) == 2
    assert records[0].operator_id == "op-alice"
    assert records[0].skill == TicketCategory.NETWORK
    assert records[1].proficiency_level == 4


def test_load_operator_skills_column_aliases(tmp_path):
    csv_path = tmp_path / "operator_skills.csv"
    _write_csv([
        {"user_id": "op-carol", "category": "hardware", "level": "3"},
    ], csv_path)

    records = load_operator_skills(csv_path)

    assert records[0].operator_id == "op-carol"
    assert records[0].skill == TicketCategory.HARDWARE


def test_load_operator_skills_skips_invalid(tmp_path):
    csv_path = tmp_path / "operator_skills.csv"
    _write_csv([
        {"operator_id": "op-a", "skill": "network", "proficiency_level": "6"},
        {"operator_id": "op-a", "skill": "plumbing", "proficiency_level": "3"},
        {"operator_id": "", "skill": "network", "proficiency_level": "3"},
        {"operator_id": "op-a", "skill": "network", "proficiency_level": "2.5"},
        {"operator_id": "op-a", "skill": "database", "proficiency_level": "1"},
    ], csv_path)

    records = load_operator_skills(csv_path)

    assert [(r.skill, r.proficiency_level) for r in records] == [(TicketCategory.DATABASE, 1)]


def test_bundled_seed_files_parse():
    data_dir = Path(__file__).resolve().parents[3] / "data"
    assert len(load_sla_targets(data_dir / "sla_targets.csv")) == 4
    assert len(load_operator_skills(data_dir / "operator_skills.csv")) == 6
