"""Live draft control tools: initialize, pick, undo, pause, resume, reset."""

import logging
import time
from typing import Any, Dict, List, Optional

from mockdraft.errors import DraftError, DraftValidationError, ForbiddenError
from mockdraft.models.draft_event import DraftEvent
from mockdraft.services import draft_engine
from mockdraft.services.event_store import get_event_store
from mockdraft.services.stats_cache import invalidate_event_stats

logger = logging.getLogger(__name__)


def _require_admin(is_admin: bool, action: str) -> None:
    if not is_admin:
        raise ForbiddenError(f"Only admins can {action}")


def _authorize_pick(event: DraftEvent, requester: str, is_admin: bool, team_id: Optional[str]) -> None:
    if is_admin:
        return
    if team_id is not None:
        raise ForbiddenError("Only admins can pick for a team other than the one on the clock")

    on_the_clock = draft_engine.current_team(event)
    if on_the_clock is None or not on_the_clock.has_captain(requester):
        raise ForbiddenError("Only the current team's captains and admins can make picks")


def _authorize_undo(event: DraftEvent, requester: str, is_admin: bool) -> None:
    if is_admin or not event.picks:
        return
    last_pick = max(event.picks, key=lambda pick: pick.pick_number)
    team = event.get_team(last_pick.team_id)
    if team is None or not team.has_captain(requester):
        raise ForbiddenError("Only admins or captains of the team that made the last pick can undo it")


async def initialize_draft(
    event_id: str, base_team_order: Optional[List[str]] = None, is_admin: bool = False
) -> Dict[str, Any]:
    """
    Generate the snake draft order for an event and start drafting.

    Args:
        event_id: Event to initialize
        base_team_order: Optional round 1 team ids; defaults to the event's preset order
        is_admin: Whether the requester is an administrator

    Returns:
        Dict with the resulting draft update or an error
    """
    logger.info(f"Initializing draft for event {event_id}")

    try:
        _require_admin(is_admin, "initialize the draft")
        async with get_event_store().transaction(event_id) as event:
            update = draft_engine.initialize_draft(event, base_team_order)
        invalidate_event_stats(event_id)
        return {"success": True, "update": update.model_dump(mode="json")}
    except DraftError as e:
        logger.warning(f"initialize_draft rejected for event {event_id}: {e}")
        return e.to_dict()


async def make_pick(
    event_id: str,
    player_id: str,
    requester: str = "",
    is_admin: bool = False,
    team_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Draft a player for the team on the clock.

    Args:
        event_id: Event being drafted
        player_id: Player to draft
        requester: Handle of the user making the pick
        is_admin: Whether the requester is an administrator
        team_id: Team to credit instead of the team on the clock (admins only)

    Returns:
        Dict with the created pick and new draft state, or an error
    """
    start_time = time.time()
    logger.info(f"Pick requested in event {event_id}: player={player_id}, requester={requester}")

    try:
        if not player_id:
            raise DraftValidationError("Player ID is required")

        async with get_event_store().transaction(event_id) as event:
            _authorize_pick(event, requester, is_admin, team_id)
            update = draft_engine.make_pick(event, player_id, team_id)

        invalidate_event_stats(event_id)
        logger.info(f"make_pick completed in {time.time() - start_time:.2f} seconds")
        return {
            "success": True,
            "pick": update.pick.model_dump(mode="json"),
            "update": update.model_dump(mode="json"),
        }
    except DraftError as e:
        logger.warning(f"make_pick rejected for event {event_id}: {e}")
        return e.to_dict()


async def undo_last_pick(
    event_id: str,
    requester: str = "",
    is_admin: bool = False,
    pick_number: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Undo the most recent pick of an event.

    Args:
        event_id: Event being drafted
        requester: Handle of the user asking for the undo
        is_admin: Whether the requester is an administrator
        pick_number: Optional pick number the caller expects to remove; must be the latest

    Returns:
        Dict with the removed pick and new draft state, or an error
    """
    logger.info(f"Undo requested in event {event_id} by {requester}")

    try:
        async with get_event_store().transaction(event_id) as event:
            _authorize_undo(event, requester, is_admin)
            update = draft_engine.undo_last_pick(event, pick_number)

        invalidate_event_stats(event_id)
        return {
            "success": True,
            "removed_pick": update.pick.model_dump(mode="json"),
            "update": update.model_dump(mode="json"),
        }
    except DraftError as e:
        logger.warning(f"undo_last_pick rejected for event {event_id}: {e}")
        return e.to_dict()


async def pause_draft(event_id: str, is_admin: bool = False) -> Dict[str, Any]:
    logger.info(f"Pausing draft for event {event_id}")
    try:
        _require_admin(is_admin, "pause the draft")
        async with get_event_store().transaction(event_id) as event:
            update = draft_engine.pause_draft(event)
        return {"success": True, "update": update.model_dump(mode="json")}
    except DraftError as e:
        return e.to_dict()


async def resume_draft(event_id: str, is_admin: bool = False) -> Dict[str, Any]:
    logger.info(f"Resuming draft for event {event_id}")
    try:
        _require_admin(is_admin, "resume the draft")
        async with get_event_store().transaction(event_id) as event:
            update = draft_engine.resume_draft(event)
        return {"success": True, "update": update.model_dump(mode="json")}
    except DraftError as e:
        return e.to_dict()


async def reset_draft(event_id: str, is_admin: bool = False) -> Dict[str, Any]:
    """Tear down an event's draft order and picks so it can be initialized again."""
    logger.info(f"Resetting draft for event {event_id}")
    try:
        _require_admin(is_admin, "reset the draft")
        async with get_event_store().transaction(event_id) as event:
            update = draft_engine.reset_draft(event)
        invalidate_event_stats(event_id)
        return {"success": True, "update": update.model_dump(mode="json")}
    except DraftError as e:
        return e.to_dict()


async def get_draft_state(event_id: str) -> Dict[str, Any]:
    """Current draft board: order, picks, available players and the team on the clock."""
    try:
        event = await get_event_store().get(event_id)
        return {
            "success": True,
            "state": draft_engine.draft_state(event).model_dump(mode="json"),
        }
    except DraftError as e:
        return e.to_dict()
