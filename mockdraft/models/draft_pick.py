"""DraftPick model for recording actual draft selections."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DraftPick(BaseModel):
    """One actual selection: which team took which player, and when in the draft."""

    model_config = ConfigDict(frozen=True)

    player_id: str
    team_id: str
    round: int
    pick_number: int  # 1-based overall pick number
    timestamp: datetime = Field(default_factory=_utcnow)

    @property
    def slot(self) -> int:
        """0-based overall slot of this pick."""
        return self.pick_number - 1

    def __str__(self) -> str:
        return f"#{self.pick_number} (round {self.round}): {self.team_id} -> {self.player_id}"
