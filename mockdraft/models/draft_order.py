"""DraftOrder model holding the snake sequence and the live pick pointer."""

from typing import List, Optional

from pydantic import BaseModel, computed_field

from mockdraft.services.snake_order import is_reversed_round, round_for_slot


class DraftOrder(BaseModel):
    """The snake pick sequence for an event and how far the draft has progressed.

    Only ``current_pick`` is stored. Round and direction are derived from it,
    so they always agree with the number of picks made.
    """

    team_order: List[str]  # team id per slot, covering more slots than any real pool
    team_count: int
    current_pick: int = 0  # picks made so far, i.e. the 0-based slot on the clock

    @computed_field
    @property
    def current_round(self) -> int:
        return round_for_slot(self.current_pick, self.team_count)

    @computed_field
    @property
    def is_reversed(self) -> bool:
        """True when the current round runs through the base order in reverse."""
        return is_reversed_round(self.current_round)

    @property
    def base_order(self) -> List[str]:
        """Round 1 order, the realized team draft order."""
        return self.team_order[: self.team_count]

    def team_at(self, slot: int) -> Optional[str]:
        """Team id on the clock at a slot, or None past the generated sequence."""
        if 0 <= slot < len(self.team_order):
            return self.team_order[slot]
        return None
