"""Saving and locking participants' draft predictions."""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from mockdraft.errors import DraftValidationError, InvalidStateError
from mockdraft.models.draft_event import DraftEvent
from mockdraft.models.submission import DraftOrderSubmission
from mockdraft.services.snake_order import is_valid_slot, slot_to_round_and_team_index

logger = logging.getLogger(__name__)


def has_complete_team_order(team_order: Sequence[str], team_ids: Sequence[str]) -> bool:
    """True if team_order names every team exactly once."""
    if not team_ids or len(team_order) != len(team_ids):
        return False
    return set(team_order) == set(team_ids) and len(set(team_order)) == len(team_order)


def deadline_passed(event: DraftEvent, now: Optional[datetime] = None) -> bool:
    if event.draft_deadline is None:
        return False
    now = now or datetime.now(timezone.utc)
    deadline = event.draft_deadline
    if deadline.tzinfo is None:
        deadline = deadline.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now > deadline


def is_locked(
    event: DraftEvent, submission: DraftOrderSubmission, now: Optional[datetime] = None
) -> bool:
    """A submission is read-only once it has been locked or the event's deadline has passed."""
    return submission.locked or deadline_passed(event, now)


def slot_in_pool(event: DraftEvent, slot: int) -> bool:
    """
    Check whether a 1-based pick number exists for the event's player pool.

    The snake sequence is longer than the pool, so a pick number is playable
    only if its (round, team) cell falls within the number of players.
    """
    total_slots = len(event.players)
    if slot < 1:
        return False
    num_teams = len(event.teams)
    if not num_teams:
        return slot <= total_slots
    round_num, team_index = slot_to_round_and_team_index(slot - 1, num_teams)
    return is_valid_slot(round_num, team_index, num_teams, total_slots)


def _validate_placements(event: DraftEvent, placements: Dict[str, int]) -> None:
    player_ids = {player.id for player in event.players}
    total_slots = len(event.players)

    unknown = [player_id for player_id in placements if player_id not in player_ids]
    if unknown:
        raise DraftValidationError(f"Invalid players in draft order: {unknown}")

    out_of_range = [slot for slot in placements.values() if not slot_in_pool(event, slot)]
    if out_of_range:
        raise DraftValidationError(
            f"Placement position must be between 1 and {total_slots}, got {out_of_range}"
        )

    if len(set(placements.values())) != len(placements):
        raise DraftValidationError("Duplicate slot positions in draft order")


def _validate_team_order(event: DraftEvent, team_order: Optional[Sequence[str]]) -> List[str]:
    team_ids = event.team_ids
    if not team_ids:
        return []

    team_order = list(team_order or [])
    if len(team_order) != len(team_ids):
        raise DraftValidationError(
            "Team order prediction is required and must include each team exactly once"
        )
    if not has_complete_team_order(team_order, team_ids):
        raise DraftValidationError("Team order must contain each team exactly once")
    return team_order


def submit_prediction(
    event: DraftEvent,
    user_id: str,
    placements: Dict[str, int],
    team_order: Optional[Sequence[str]] = None,
    now: Optional[datetime] = None,
) -> DraftOrderSubmission:
    """
    Save (or replace) a participant's prediction for an event.

    Args:
        event: Event the prediction is for
        user_id: Participant making the prediction
        placements: Sparse mapping of player id to predicted 1-based pick number
        team_order: Predicted round 1 team order, required once the event has teams
        now: Current time, for deadline checks

    Returns:
        The stored DraftOrderSubmission
    """
    if deadline_passed(event, now):
        raise InvalidStateError("Draft deadline has passed")
    if event.status.draft_started:
        raise InvalidStateError("Draft has already started. Predictions are locked.")

    existing = event.submissions.get(user_id)
    if existing is not None and is_locked(event, existing, now):
        raise InvalidStateError("Submission is locked")

    _validate_placements(event, placements)
    validated_team_order = _validate_team_order(event, team_order)

    submission = DraftOrderSubmission(
        user_id=user_id,
        event_id=event.id,
        team_order=validated_team_order,
        placements=dict(sorted(placements.items(), key=lambda item: item[1])),
        submitted_at=now or datetime.now(timezone.utc),
    )
    event.submissions[user_id] = submission

    logger.info(
        f"Saved prediction for {user_id} in event {event.id}: "
        f"{len(placements)} of {len(event.players)} players placed"
    )
    return submission


def lock_submissions(event: DraftEvent) -> None:
    for submission in event.submissions.values():
        submission.locked = True


def unlock_submissions(event: DraftEvent) -> None:
    for submission in event.submissions.values():
        submission.locked = False
