"""SkillRankingPolicy: deterministic ordering of skill holders."""

from __future__ import annotations

from dataclasses import dataclass

from helpdesk.domain.entities.operator_skill import OperatorSkillRecord


@dataclass(frozen=True)
class SkillCandidate:
    operator_id: str
    proficiency_level: int


def rank_candidates(records: list[OperatorSkillRecord]) -> list[SkillCandidate]:
    """Order skill holders by proficiency DESC, then operator id ASC.

    The result never depends on the order the store returned the rows in.
    An empty input yields an empty list.
    """
    ranked = sorted(records, key=lambda r: (-r.proficiency_level, r.operator_id))
    return [SkillCandidate(r.operator_id, r.proficiency_level) for r in ranked]
