"""OperatorScoringPolicy: skill-weighted, load-penalised operator selection."""

from __future__ import annotations

from dataclasses import dataclass

from helpdesk.domain.policies.skill_ranking import SkillCandidate

PROFICIENCY_WEIGHT = 10
WORKLOAD_PENALTY = 3


@dataclass(frozen=True)
class ScoredCandidate:
    operator_id: str
    proficiency_level: int
    active_count: int
    score: int


def score(proficiency_level: int, active_count: int) -> int:
    """score = proficiency * 10 - active tickets * 3"""
    return proficiency_level * PROFICIENCY_WEIGHT - active_count * WORKLOAD_PENALTY


def score_candidates(
    candidates: list[SkillCandidate],
    workload: dict[str, int],
) -> list[ScoredCandidate]:
    """Score every candidate, best first (score DESC, operator id ASC)."""
    scored = [
        ScoredCandidate(
            operator_id=c.operator_id,
            proficiency_level=c.proficiency_level,
            active_count=workload.get(c.operator_id, 0),
            score=score(c.proficiency_level, workload.get(c.operator_id, 0)),
        )
        for c in candidates
    ]
    return sorted(scored, key=lambda s: (-s.score, s.operator_id))


def pick_best(
    candidates: list[SkillCandidate],
    workload: dict[str, int],
) -> ScoredCandidate:
    """Pick the highest-scoring candidate.

    Ties are broken by operator id ascending so identical inputs always
    produce the same winner.

    Raises:
        ValueError: if candidates list is empty.
    """
    if not candidates:
        raise ValueError("Cannot pick from an empty candidate list")
    return score_candidates(candidates, workload)[0]
