"""DraftEvent model aggregating everything the engine needs about one event."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .draft_order import DraftOrder
from .draft_pick import DraftPick
from .event_status import EventStatus
from .player import Player
from .submission import DraftOrderSubmission
from .team import Team


class DraftEvent(BaseModel):
    """A mock draft event: teams, player pool, live draft and predictions."""

    id: str
    name: str
    code: str
    description: Optional[str] = None
    status: EventStatus = EventStatus.PLANNED
    draft_deadline: Optional[datetime] = None
    teams: List[Team] = Field(default_factory=list)
    players: List[Player] = Field(default_factory=list)
    team_draft_order: List[str] = Field(default_factory=list)  # preset round 1 order
    draft_order: Optional[DraftOrder] = None
    picks: List[DraftPick] = Field(default_factory=list)  # ordered by pick number
    submissions: Dict[str, DraftOrderSubmission] = Field(default_factory=dict)  # keyed by user id

    @property
    def team_ids(self) -> List[str]:
        return [team.id for team in self.teams]

    def get_team(self, team_id: str) -> Optional[Team]:
        for team in self.teams:
            if team.id == team_id:
                return team
        return None

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def get_pick_for_player(self, player_id: str) -> Optional[DraftPick]:
        for pick in self.picks:
            if pick.player_id == player_id:
                return pick
        return None

    def get_drafted_player_ids(self) -> set:
        return {pick.player_id for pick in self.picks}

    def get_available_players(self) -> List[Player]:
        drafted = self.get_drafted_player_ids()
        return [player for player in self.players if player.id not in drafted]

    def get_picks_by_team(self, team_id: str) -> List[DraftPick]:
        return [pick for pick in self.picks if pick.team_id == team_id]
