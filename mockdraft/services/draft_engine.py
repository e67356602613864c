"""
Draft progression engine.

Operations take a DraftEvent, validate the request against its lifecycle
status, mutate it in place and return a DraftUpdate describing the change.
Persistence and locking are the caller's job (see event_store); this module
performs no I/O.
"""

import logging
from typing import List, Optional, Sequence

from mockdraft.config import MAX_DRAFT_PICKS
from mockdraft.errors import (
    ConflictError,
    DraftInvariantError,
    DraftValidationError,
    InvalidStateError,
    NotFoundError,
)
from mockdraft.models.draft_event import DraftEvent
from mockdraft.models.draft_order import DraftOrder
from mockdraft.models.draft_pick import DraftPick
from mockdraft.models.draft_state import DraftStateView, DraftUpdate
from mockdraft.models.event_status import EventStatus
from mockdraft.models.team import Team
from mockdraft.services.snake_order import build_snake_order, round_for_slot
from mockdraft.services.submissions import lock_submissions, unlock_submissions

logger = logging.getLogger(__name__)

PICKABLE_STATUSES = (EventStatus.DRAFTING, EventStatus.PAUSED)


def validate_team_permutation(team_order: Sequence[str], team_ids: Sequence[str]) -> None:
    """Raise DraftValidationError unless team_order lists every team exactly once."""
    if len(team_order) != len(team_ids):
        raise DraftValidationError(
            f"Team order must include each of the {len(team_ids)} teams exactly once"
        )
    if len(set(team_order)) != len(team_order):
        raise DraftValidationError("Team order must not contain duplicates")
    unknown = [team_id for team_id in team_order if team_id not in team_ids]
    if unknown:
        raise DraftValidationError(f"Team order contains unknown teams: {unknown}")


def _resolve_base_order(event: DraftEvent, base_team_order: Optional[Sequence[str]]) -> List[str]:
    team_ids = event.team_ids
    if base_team_order is not None:
        validate_team_permutation(base_team_order, team_ids)
        return list(base_team_order)

    preset = event.team_draft_order
    if preset:
        try:
            validate_team_permutation(preset, team_ids)
            return list(preset)
        except DraftValidationError:
            logger.warning(
                f"Preset team draft order for event {event.id} no longer matches its teams, "
                "falling back to alphabetical order"
            )

    return [team.id for team in sorted(event.teams, key=lambda team: team.name)]


def current_team_id(event: DraftEvent) -> Optional[str]:
    """Team id on the clock, or None before initialization or once completed."""
    draft_order = event.draft_order
    if draft_order is None or event.status == EventStatus.COMPLETED:
        return None
    return draft_order.team_at(draft_order.current_pick)


def current_team(event: DraftEvent) -> Optional[Team]:
    team_id = current_team_id(event)
    return event.get_team(team_id) if team_id else None


def draft_state(event: DraftEvent) -> DraftStateView:
    """Snapshot of the draft board for display."""
    return DraftStateView(
        event_id=event.id,
        status=event.status,
        draft_order=event.draft_order,
        teams=event.teams,
        picks=sorted(event.picks, key=lambda pick: pick.pick_number),
        available_players=event.get_available_players(),
        current_team=current_team(event),
    )


def _update(kind: str, event: DraftEvent, pick: Optional[DraftPick] = None) -> DraftUpdate:
    return DraftUpdate(kind=kind, event_id=event.id, pick=pick, state=draft_state(event))


def verify_progression(event: DraftEvent) -> None:
    """
    Check that the pick log and the progression counter agree.

    Raises:
        DraftInvariantError: If picks are not numbered 1..k, if the counter is
            not k, or if a pick's round disagrees with the snake arithmetic
    """
    draft_order = event.draft_order
    if draft_order is None:
        if event.picks:
            raise DraftInvariantError(
                f"Event {event.id} has {len(event.picks)} picks but no draft order"
            )
        return

    if draft_order.current_pick != len(event.picks):
        raise DraftInvariantError(
            f"Event {event.id}: current pick {draft_order.current_pick} "
            f"but {len(event.picks)} picks recorded"
        )

    for expected, pick in enumerate(event.picks, start=1):
        if pick.pick_number != expected:
            raise DraftInvariantError(
                f"Event {event.id}: pick #{pick.pick_number} found where #{expected} was expected"
            )
        derived_round = round_for_slot(pick.slot, draft_order.team_count)
        if pick.round != derived_round:
            raise DraftInvariantError(
                f"Event {event.id}: pick #{pick.pick_number} recorded in round {pick.round}, "
                f"snake order puts it in round {derived_round}"
            )


def initialize_draft(
    event: DraftEvent, base_team_order: Optional[Sequence[str]] = None
) -> DraftUpdate:
    """
    Generate the snake order and start drafting.

    Args:
        event: Event to initialize
        base_team_order: Round 1 team ids. Defaults to the event's preset
            order, or teams sorted by name when no valid preset exists.

    Returns:
        DraftUpdate of kind "draft_initialized"
    """
    if not event.teams:
        raise DraftValidationError("No teams configured for this event")
    if event.draft_order is not None:
        raise ConflictError("Draft order already initialized; reset the draft first")
    if event.status in (EventStatus.COMPLETED, EventStatus.CLOSED):
        raise InvalidStateError(f"Cannot initialize a draft for a {event.status.value} event")

    base_order = _resolve_base_order(event, base_team_order)
    min_picks = max(MAX_DRAFT_PICKS, len(event.players))

    event.draft_order = DraftOrder(
        team_order=build_snake_order(base_order, min_picks),
        team_count=len(base_order),
        current_pick=0,
    )
    event.status = EventStatus.DRAFTING
    lock_submissions(event)

    logger.info(
        f"Initialized draft for event {event.id}: {len(base_order)} teams, "
        f"{len(event.draft_order.team_order)} slots generated"
    )
    return _update("draft_initialized", event)


def make_pick(event: DraftEvent, player_id: str, team_id: Optional[str] = None) -> DraftUpdate:
    """
    Record a pick for the team on the clock, or for an override team.

    Args:
        event: Event being drafted
        player_id: Player to draft
        team_id: Optional team to credit instead of the team on the clock

    Returns:
        DraftUpdate of kind "pick_made", or "draft_completed" when the pool is exhausted
    """
    if event.status not in PICKABLE_STATUSES:
        raise InvalidStateError(f"Event is not drafting (status: {event.status.value})")
    draft_order = event.draft_order
    if draft_order is None:
        raise InvalidStateError("Draft not initialized")

    verify_progression(event)

    if event.get_player(player_id) is None:
        raise NotFoundError(f"Player {player_id} not found in event {event.id}")
    if event.get_pick_for_player(player_id) is not None:
        raise ConflictError(f"Player {player_id} already drafted")

    if team_id is None:
        team_id = draft_order.team_at(draft_order.current_pick)
        if team_id is None:
            raise InvalidStateError("No team is on the clock")
    elif event.get_team(team_id) is None:
        raise NotFoundError(f"Team {team_id} not found in event {event.id}")

    pick = DraftPick(
        player_id=player_id,
        team_id=team_id,
        round=draft_order.current_round,
        pick_number=draft_order.current_pick + 1,
    )
    event.picks.append(pick)
    draft_order.current_pick += 1

    logger.info(f"Event {event.id}: {pick}")

    if len(event.picks) >= len(event.players):
        event.status = EventStatus.COMPLETED
        logger.info(f"Event {event.id}: draft completed after {len(event.picks)} picks")
        return _update("draft_completed", event, pick)

    return _update("pick_made", event, pick)


def undo_last_pick(event: DraftEvent, expected_pick_number: Optional[int] = None) -> DraftUpdate:
    """
    Remove the most recent pick and step the draft back one slot.

    Args:
        event: Event being drafted
        expected_pick_number: If given, must name the latest pick; removing
            any earlier pick is rejected

    Returns:
        DraftUpdate of kind "pick_undone" carrying the removed pick
    """
    if event.status == EventStatus.CLOSED:
        raise InvalidStateError("Event is closed")
    if not event.picks:
        raise InvalidStateError("No picks to undo")

    verify_progression(event)

    last_pick = max(event.picks, key=lambda pick: pick.pick_number)
    if expected_pick_number is not None and expected_pick_number != last_pick.pick_number:
        raise InvalidStateError(
            f"Only the latest pick (#{last_pick.pick_number}) can be undone, "
            f"not #{expected_pick_number}"
        )

    event.picks.remove(last_pick)
    event.draft_order.current_pick = max(0, event.draft_order.current_pick - 1)

    if event.status == EventStatus.COMPLETED:
        event.status = EventStatus.DRAFTING

    logger.info(f"Event {event.id}: undid {last_pick}")
    return _update("pick_undone", event, last_pick)


def pause_draft(event: DraftEvent) -> DraftUpdate:
    if event.status != EventStatus.DRAFTING:
        raise InvalidStateError(f"Event is not drafting (status: {event.status.value})")
    event.status = EventStatus.PAUSED
    logger.info(f"Event {event.id}: draft paused")
    return _update("draft_paused", event)


def resume_draft(event: DraftEvent) -> DraftUpdate:
    if event.status != EventStatus.PAUSED:
        raise InvalidStateError(f"Event is not paused (status: {event.status.value})")
    event.status = EventStatus.DRAFTING
    logger.info(f"Event {event.id}: draft resumed")
    return _update("draft_resumed", event)


def reset_draft(event: DraftEvent) -> DraftUpdate:
    """Tear down the draft order and all picks so the draft can be initialized again."""
    if event.status == EventStatus.CLOSED:
        raise InvalidStateError("Event is closed")

    removed = len(event.picks)
    event.draft_order = None
    event.picks = []
    event.status = EventStatus.OPEN
    unlock_submissions(event)

    logger.info(f"Event {event.id}: draft reset, {removed} picks removed")
    return _update("draft_reset", event)
