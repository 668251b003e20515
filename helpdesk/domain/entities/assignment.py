"""Assignment result: the outcome of routing a ticket to an operator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AssignmentResult:
    ticket_id: int
    operator_id: str | None
    score: int | None = None
    reason: str | None = None

    @property
    def unassigned(self) -> bool:
        return self.operator_id is None

    def to_payload(self) -> dict:
        if self.unassigned:
            return {"unassigned": True}
        return {"operator_id": self.operator_id}
