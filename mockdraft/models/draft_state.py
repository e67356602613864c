"""Snapshot and change-description models returned by the draft engine."""

from typing import List, Literal, Optional

from pydantic import BaseModel

from .draft_order import DraftOrder
from .draft_pick import DraftPick
from .event_status import EventStatus
from .player import Player
from .team import Team

UpdateKind = Literal[
    "draft_initialized",
    "pick_made",
    "pick_undone",
    "draft_paused",
    "draft_resumed",
    "draft_completed",
    "draft_reset",
]


class DraftStateView(BaseModel):
    """Current draft board as observers see it."""

    event_id: str
    status: EventStatus
    draft_order: Optional[DraftOrder] = None
    teams: List[Team]
    picks: List[DraftPick]
    available_players: List[Player]
    current_team: Optional[Team] = None


class DraftUpdate(BaseModel):
    """What an engine operation changed.

    The caller decides whether and how to broadcast it.
    """

    kind: UpdateKind
    event_id: str
    pick: Optional[DraftPick] = None
    state: DraftStateView
