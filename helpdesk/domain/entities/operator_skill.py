"""Operator skill record: one proficiency rating per (operator, category)."""

from dataclasses import dataclass

from helpdesk.domain.value_objects.enums import TicketCategory

MIN_PROFICIENCY = 1
MAX_PROFICIENCY = 5


@dataclass(frozen=True)
class OperatorSkillRecord:
    operator_id: str
    skill: TicketCategory
    proficiency_level: int

    def __post_init__(self):
        if not MIN_PROFICIENCY <= self.proficiency_level <= MAX_PROFICIENCY:
            raise ValueError(
                f"proficiency_level must be within {MIN_PROFICIENCY}..{MAX_PROFICIENCY}, "
                f"got {self.proficiency_level}"
            )
