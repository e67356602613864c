"""Administrative setup of events: teams, captains, player pool and lifecycle."""

import logging
import uuid
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from mockdraft.errors import (
    ConflictError,
    DraftValidationError,
    InvalidStateError,
    NotFoundError,
)
from mockdraft.models.draft_event import DraftEvent
from mockdraft.models.event_status import EventStatus
from mockdraft.models.player import Player
from mockdraft.models.team import Team
from mockdraft.services.draft_engine import validate_team_permutation
from mockdraft.services.submissions import is_locked, lock_submissions

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


def _require_not_initialized(event: DraftEvent, what: str) -> None:
    if event.draft_order is not None:
        raise InvalidStateError(f"Draft already initialized; {what} cannot be changed")


def new_event(
    name: str,
    code: str,
    description: Optional[str] = None,
    draft_deadline: Optional[datetime] = None,
    event_id: Optional[str] = None,
) -> DraftEvent:
    """Build a new PLANNED event. The caller stores it."""
    if not name or not name.strip():
        raise DraftValidationError("Event name cannot be empty")
    if not code or not code.strip():
        raise DraftValidationError("Event code cannot be empty")

    return DraftEvent(
        id=event_id or _new_id(),
        name=name.strip(),
        code=code.strip(),
        description=description,
        draft_deadline=draft_deadline,
    )


def add_team(
    event: DraftEvent,
    name: str,
    captains: Optional[Sequence[str]] = None,
    team_id: Optional[str] = None,
) -> Team:
    """Add a team. The team set is frozen once the draft is initialized."""
    _require_not_initialized(event, "teams")
    if not name or not name.strip():
        raise DraftValidationError("Team name cannot be empty")
    name = name.strip()
    if any(team.name.lower() == name.lower() for team in event.teams):
        raise ConflictError(f"Team {name} already exists in this event")

    team = Team(id=team_id or _new_id(), name=name, captains=list(captains or []))
    event.teams.append(team)
    logger.info(f"Added team {team.name} to event {event.id}")
    return team


def add_captain(event: DraftEvent, team_id: str, handle: str) -> Team:
    team = event.get_team(team_id)
    if team is None:
        raise NotFoundError(f"Team {team_id} not found")
    if not handle or not handle.strip():
        raise DraftValidationError("Captain handle cannot be empty")
    if team.has_captain(handle):
        raise ConflictError(f"{handle} is already a captain of {team.name}")

    team.captains.append(handle.strip())
    return team


def add_players(event: DraftEvent, players: List[Dict]) -> List[Player]:
    """
    Bulk import players into the pool.

    Args:
        event: Event to import into
        players: Dicts with "name" and optional "position", "team", "notes", "id"

    Returns:
        The created Player objects
    """
    _require_not_initialized(event, "the player pool")

    created = []
    for data in players:
        name = (data.get("name") or "").strip()
        if not name:
            raise DraftValidationError(f"Player name cannot be empty: {data}")
        created.append(
            Player(
                id=data.get("id") or _new_id(),
                name=name,
                position=data.get("position"),
                team=data.get("team"),
                notes=data.get("notes"),
            )
        )

    existing_ids = {player.id for player in event.players}
    duplicate_ids = [p.id for p in created if p.id in existing_ids]
    if duplicate_ids or len({p.id for p in created}) != len(created):
        raise ConflictError(f"Duplicate player ids in import: {duplicate_ids}")

    event.players.extend(created)
    logger.info(f"Imported {len(created)} players into event {event.id}")
    return created


def set_team_draft_order(event: DraftEvent, team_order: Sequence[str]) -> List[str]:
    """Preset the round 1 order used when the draft is initialized."""
    if event.draft_order is not None:
        raise ConflictError("Draft already initialized; team order cannot be changed")
    validate_team_permutation(team_order, event.team_ids)

    event.team_draft_order = list(team_order)
    return event.team_draft_order


def open_event(event: DraftEvent) -> DraftEvent:
    if event.status != EventStatus.PLANNED:
        raise InvalidStateError(f"Only planned events can be opened (status: {event.status.value})")
    event.status = EventStatus.OPEN
    logger.info(f"Event {event.id} opened for predictions")
    return event


def close_event(event: DraftEvent) -> DraftEvent:
    if event.status == EventStatus.CLOSED:
        raise InvalidStateError("Event is already closed")
    event.status = EventStatus.CLOSED
    lock_submissions(event)
    logger.info(f"Event {event.id} closed")
    return event


def update_event(
    event: DraftEvent,
    name: Optional[str] = None,
    description: Optional[str] = None,
    draft_deadline: Optional[datetime] = None,
) -> DraftEvent:
    """Edit an event's details. Fields left as None keep their current value."""
    if name is not None:
        if not name.strip():
            raise DraftValidationError("Event name cannot be empty")
        event.name = name.strip()
    if description is not None:
        event.description = description
    if draft_deadline is not None:
        event.draft_deadline = draft_deadline

    logger.info(f"Updated event {event.id}")
    return event


def remove_captain(event: DraftEvent, team_id: str, handle: str) -> Team:
    team = event.get_team(team_id)
    if team is None:
        raise NotFoundError(f"Team {team_id} not found")
    if not team.has_captain(handle):
        raise NotFoundError("Captain not found")

    handle = handle.strip().lower()
    team.captains = [captain for captain in team.captains if captain.lower() != handle]
    return team


def event_summary(event: DraftEvent) -> Dict:
    """Event details with team, player and submission counts, for listings."""
    summary = event.model_dump(
        mode="json", include={"id", "name", "code", "description", "status", "draft_deadline"}
    )
    summary["counts"] = {
        "teams": len(event.teams),
        "players": len(event.players),
        "submissions": len(event.submissions),
    }
    return summary


def export_event(event: DraftEvent) -> Dict:
    """
    Full dump of an event for administrators.

    Returns:
        Dict with the event details, players, each team with its picks in
        pick order, the pick log, and every submission with placements
        ordered by predicted slot
    """
    players = {player.id: player for player in event.players}
    teams = {team.id: team for team in event.teams}

    def pick_row(pick):
        row = pick.model_dump(mode="json")
        player = players.get(pick.player_id)
        team = teams.get(pick.team_id)
        row["player_name"] = player.name if player else None
        row["team_name"] = team.name if team else None
        return row

    return {
        "event": event.model_dump(mode="json", exclude={"submissions", "picks", "teams", "players"}),
        "players": [player.model_dump(mode="json") for player in event.players],
        "teams": [
            {
                **team.model_dump(mode="json"),
                "picks": [
                    pick_row(pick)
                    for pick in sorted(event.get_picks_by_team(team.id), key=lambda p: p.pick_number)
                ],
            }
            for team in event.teams
        ],
        "picks": [pick_row(pick) for pick in sorted(event.picks, key=lambda p: p.pick_number)],
        "submissions": [
            {
                "user_id": submission.user_id,
                "team_order": submission.team_order,
                "locked": is_locked(event, submission),
                "submitted_at": submission.submitted_at.isoformat(),
                "placements": [
                    {
                        "player_id": player_id,
                        "player_name": players[player_id].name if player_id in players else None,
                        "slot": slot,
                    }
                    for player_id, slot in submission.sorted_placements()
                ],
            }
            for submission in event.submissions.values()
        ],
    }
