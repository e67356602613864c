"""DraftOrderSubmission model for a participant's saved prediction."""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DraftOrderSubmission(BaseModel):
    """A participant's prediction for one event.

    ``placements`` is sparse: a player missing from it has not been placed,
    which is different from being placed at any slot.
    """

    user_id: str
    event_id: str
    team_order: List[str] = Field(default_factory=list)  # predicted round 1 order
    placements: Dict[str, int] = Field(default_factory=dict)  # player id -> 1-based slot
    locked: bool = False
    submitted_at: datetime = Field(default_factory=_utcnow)

    def slot_for(self, player_id: str) -> Optional[int]:
        return self.placements.get(player_id)

    def sorted_placements(self) -> List[tuple]:
        """(player_id, slot) pairs ordered by slot."""
        return sorted(self.placements.items(), key=lambda item: item[1])
