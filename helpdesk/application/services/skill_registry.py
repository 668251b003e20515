"""Skill Registry: read-only view of who can handle which category."""

from __future__ import annotations

from helpdesk.application.ports.skill_repo import SkillRepository
from helpdesk.domain.policies.skill_ranking import SkillCandidate, rank_candidates
from helpdesk.domain.value_objects.enums import TicketCategory


class SkillRegistry:
    def __init__(self, skill_repo: SkillRepository):
        self._skills = skill_repo

    async def skills_for(self, category: TicketCategory) -> list[SkillCandidate]:
        """Holders of *category*, best proficiency first, ties by operator id."""
        records = await self._skills.list_by_category(category)
        return rank_candidates(records)
