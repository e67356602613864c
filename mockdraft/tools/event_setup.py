"""Event setup tools for administrators."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from mockdraft.errors import DraftError, DraftValidationError, ForbiddenError
from mockdraft.services import event_admin
from mockdraft.services.event_store import get_event_store
from mockdraft.services.stats_cache import invalidate_event_stats

logger = logging.getLogger(__name__)


def _require_admin(is_admin: bool) -> None:
    if not is_admin:
        raise ForbiddenError("Admin privileges required")


def _parse_deadline(draft_deadline: Optional[str]) -> Optional[datetime]:
    if not draft_deadline:
        return None
    try:
        return datetime.fromisoformat(draft_deadline)
    except ValueError as e:
        raise DraftValidationError(f"Invalid draft deadline: {draft_deadline}") from e


async def create_event(
    name: str,
    code: str,
    description: Optional[str] = None,
    draft_deadline: Optional[str] = None,
    is_admin: bool = False,
) -> Dict[str, Any]:
    """
    Create a new mock draft event.

    Args:
        name: Display name
        code: Unique join code
        description: Optional description
        draft_deadline: Optional ISO 8601 deadline for predictions
        is_admin: Whether the requester is an administrator

    Returns:
        Dict with the created event or an error
    """
    logger.info(f"Creating event {name} ({code})")

    try:
        _require_admin(is_admin)
        deadline = _parse_deadline(draft_deadline)
        event = event_admin.new_event(name, code, description, deadline)
        created = await get_event_store().create(event)
        return {"success": True, "event": created.model_dump(mode="json")}
    except DraftError as e:
        return e.to_dict()


async def update_event(
    event_id: str,
    name: Optional[str] = None,
    description: Optional[str] = None,
    draft_deadline: Optional[str] = None,
    is_admin: bool = False,
) -> Dict[str, Any]:
    """
    Edit an event's name, description or prediction deadline.

    Args:
        event_id: Event to edit
        name: New display name, or None to keep it
        description: New description, or None to keep it
        draft_deadline: New ISO 8601 deadline, or None to keep it
        is_admin: Whether the requester is an administrator

    Returns:
        Dict with the updated event or an error
    """
    logger.info(f"Updating event {event_id}")

    try:
        _require_admin(is_admin)
        deadline = _parse_deadline(draft_deadline)
        async with get_event_store().transaction(event_id) as event:
            event_admin.update_event(event, name, description, deadline)
        return {"success": True, "event": event.model_dump(mode="json", exclude={"submissions"})}
    except DraftError as e:
        return e.to_dict()


async def add_team(
    event_id: str, name: str, captains: Optional[List[str]] = None, is_admin: bool = False
) -> Dict[str, Any]:
    try:
        _require_admin(is_admin)
        async with get_event_store().transaction(event_id) as event:
            team = event_admin.add_team(event, name, captains)
        return {"success": True, "team": team.model_dump(mode="json")}
    except DraftError as e:
        return e.to_dict()


async def add_captain(
    event_id: str, team_id: str, handle: str, is_admin: bool = False
) -> Dict[str, Any]:
    try:
        _require_admin(is_admin)
        async with get_event_store().transaction(event_id) as event:
            team = event_admin.add_captain(event, team_id, handle)
        return {"success": True, "team": team.model_dump(mode="json")}
    except DraftError as e:
        return e.to_dict()


async def remove_captain(
    event_id: str, team_id: str, handle: str, is_admin: bool = False
) -> Dict[str, Any]:
    try:
        _require_admin(is_admin)
        async with get_event_store().transaction(event_id) as event:
            team = event_admin.remove_captain(event, team_id, handle)
        return {"success": True, "team": team.model_dump(mode="json")}
    except DraftError as e:
        return e.to_dict()


async def import_players(
    event_id: str, players: List[Dict[str, Any]], is_admin: bool = False
) -> Dict[str, Any]:
    """Bulk import players ({"name", "position", "team", "notes"}) into an event's pool."""
    logger.info(f"Importing {len(players)} players into event {event_id}")

    try:
        _require_admin(is_admin)
        async with get_event_store().transaction(event_id) as event:
            created = event_admin.add_players(event, players)
        return {
            "success": True,
            "count": len(created),
            "players": [player.model_dump(mode="json") for player in created],
        }
    except DraftError as e:
        return e.to_dict()


async def set_team_draft_order(
    event_id: str, team_order: List[str], is_admin: bool = False
) -> Dict[str, Any]:
    try:
        _require_admin(is_admin)
        async with get_event_store().transaction(event_id) as event:
            order = event_admin.set_team_draft_order(event, team_order)
        return {"success": True, "team_draft_order": order}
    except DraftError as e:
        return e.to_dict()


async def open_event(event_id: str, is_admin: bool = False) -> Dict[str, Any]:
    try:
        _require_admin(is_admin)
        async with get_event_store().transaction(event_id) as event:
            event_admin.open_event(event)
        return {"success": True, "status": event.status.value}
    except DraftError as e:
        return e.to_dict()


async def close_event(event_id: str, is_admin: bool = False) -> Dict[str, Any]:
    try:
        _require_admin(is_admin)
        async with get_event_store().transaction(event_id) as event:
            event_admin.close_event(event)
        invalidate_event_stats(event_id)
        return {"success": True, "status": event.status.value}
    except DraftError as e:
        return e.to_dict()


async def get_event(event_id: str) -> Dict[str, Any]:
    try:
        event = await get_event_store().get(event_id)
        return {"success": True, "event": event.model_dump(mode="json", exclude={"submissions"})}
    except DraftError as e:
        return e.to_dict()


async def get_event_by_code(code: str) -> Dict[str, Any]:
    try:
        event = await get_event_store().find_by_code(code)
        return {"success": True, "event": event.model_dump(mode="json", exclude={"submissions"})}
    except DraftError as e:
        return e.to_dict()


async def list_events() -> Dict[str, Any]:
    """All events with their team, player and submission counts."""
    events = await get_event_store().list_events()
    return {
        "success": True,
        "count": len(events),
        "events": [event_admin.event_summary(event) for event in events],
    }


async def export_event(event_id: str, is_admin: bool = False) -> Dict[str, Any]:
    """Admin export of an event's players, teams, picks and submissions."""
    logger.info(f"Exporting event {event_id}")

    try:
        _require_admin(is_admin)
        event = await get_event_store().get(event_id)
        return {"success": True, **event_admin.export_event(event)}
    except DraftError as e:
        return e.to_dict()
