#!/usr/bin/env python3
"""
Mock Draft Predictor MCP Server

This server runs mock fantasy draft events: administrators set up teams and a
player pool and conduct the live draft pick by pick, participants save their
predicted pick order beforehand, and predictions are scored once the draft
completes.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from mockdraft.config import LOG_LEVEL, MAX_DRAFT_PICKS
from mockdraft.tools import (
    add_captain,
    add_team,
    close_event,
    create_event,
    export_event,
    get_aggregate_stats,
    get_draft_state,
    get_event,
    get_event_by_code,
    get_my_stats,
    get_rankings,
    get_submission,
    import_players,
    initialize_draft,
    list_events,
    make_pick,
    open_event,
    pause_draft,
    remove_captain,
    reset_draft,
    resume_draft,
    set_team_draft_order,
    submit_prediction,
    undo_last_pick,
    update_event,
)

logs_dir = Path(__file__).parent.parent / "logs"
logs_dir.mkdir(exist_ok=True)

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr),
        logging.FileHandler(logs_dir / "mock_draft_mcp.log", mode="a", encoding="utf-8"),
    ],
)
logger = logging.getLogger("mock-draft-mcp")

mcp = FastMCP("Mock Draft Predictor")


async def _run(name: str, coro) -> str:
    """Await a tool coroutine and serialize its result, reporting unexpected failures."""
    try:
        result = await coro
        return json.dumps(result, indent=2)
    except Exception as e:
        logger.error(f"Error in {name}: {e}")
        return json.dumps({"success": False, "error": str(e)}, indent=2)


@mcp.tool()
async def create_event_tool(
    name: str,
    code: str,
    description: str = None,
    draft_deadline: str = None,
    is_admin: bool = False,
) -> str:
    """
    Create a mock draft event.

    Args:
        name: Event display name
        code: Unique join code
        description: Optional description
        draft_deadline: Optional ISO 8601 deadline after which predictions lock
        is_admin: Whether the requester is an administrator

    Returns:
        JSON string with the created event
    """
    logger.info(f"create_event called with name={name}, code={code}")
    return await _run(
        "create_event", create_event(name, code, description, draft_deadline, is_admin)
    )


@mcp.tool()
async def update_event_tool(
    event_id: str,
    name: str = None,
    description: str = None,
    draft_deadline: str = None,
    is_admin: bool = False,
) -> str:
    """
    Edit an event's name, description or prediction deadline.

    Args:
        event_id: Event to edit
        name: New display name
        description: New description
        draft_deadline: New ISO 8601 deadline after which predictions lock
        is_admin: Whether the requester is an administrator

    Returns:
        JSON string with the updated event
    """
    logger.info(f"update_event called with event_id={event_id}")
    return await _run(
        "update_event", update_event(event_id, name, description, draft_deadline, is_admin)
    )


@mcp.tool()
async def list_events_tool() -> str:
    """List all events with team, player and submission counts."""
    return await _run("list_events", list_events())


@mcp.tool()
async def export_event_tool(event_id: str, is_admin: bool = False) -> str:
    """Export an event's players, teams, picks and submissions (admin only)."""
    logger.info(f"export_event called with event_id={event_id}")
    return await _run("export_event", export_event(event_id, is_admin))


@mcp.tool()
async def get_event_tool(event_id: str = None, code: str = None) -> str:
    """
    Look up an event by id or by join code.

    Returns:
        JSON string with the event's teams, players, draft order and picks
    """
    if event_id:
        return await _run("get_event", get_event(event_id))
    return await _run("get_event_by_code", get_event_by_code(code or ""))


@mcp.tool()
async def add_team_tool(
    event_id: str, name: str, captains: List[str] = None, is_admin: bool = False
) -> str:
    """
    Add a team to an event, optionally with captain handles.

    Returns:
        JSON string with the created team
    """
    logger.info(f"add_team called with event_id={event_id}, name={name}")
    return await _run("add_team", add_team(event_id, name, captains, is_admin))


@mcp.tool()
async def add_captain_tool(event_id: str, team_id: str, handle: str, is_admin: bool = False) -> str:
    """Authorize a handle to pick for a team."""
    return await _run("add_captain", add_captain(event_id, team_id, handle, is_admin))


@mcp.tool()
async def remove_captain_tool(
    event_id: str, team_id: str, handle: str, is_admin: bool = False
) -> str:
    """Revoke a handle's permission to pick for a team."""
    return await _run("remove_captain", remove_captain(event_id, team_id, handle, is_admin))


@mcp.tool()
async def import_players_tool(
    event_id: str, players: List[Dict[str, str]], is_admin: bool = False
) -> str:
    """
    Bulk import players into an event's draft pool.

    Args:
        event_id: Event to import into
        players: List of {"name", "position", "team", "notes"} dicts
        is_admin: Whether the requester is an administrator

    Returns:
        JSON string with the imported players
    """
    logger.info(f"import_players called with event_id={event_id}, count={len(players)}")
    return await _run("import_players", import_players(event_id, players, is_admin))


@mcp.tool()
async def set_team_draft_order_tool(
    event_id: str, team_order: List[str], is_admin: bool = False
) -> str:
    """Preset the round 1 team order used when the draft is initialized."""
    return await _run(
        "set_team_draft_order", set_team_draft_order(event_id, team_order, is_admin)
    )


@mcp.tool()
async def open_event_tool(event_id: str, is_admin: bool = False) -> str:
    """Open a planned event for predictions."""
    return await _run("open_event", open_event(event_id, is_admin))


@mcp.tool()
async def close_event_tool(event_id: str, is_admin: bool = False) -> str:
    """Archive an event."""
    return await _run("close_event", close_event(event_id, is_admin))


@mcp.tool()
async def initialize_draft_tool(
    event_id: str, base_team_order: List[str] = None, is_admin: bool = False
) -> str:
    """
    Generate the snake draft order and start drafting.

    Args:
        event_id: Event to initialize
        base_team_order: Optional round 1 team ids; defaults to the preset order
        is_admin: Whether the requester is an administrator

    Returns:
        JSON string with the new draft state
    """
    logger.info(f"initialize_draft called with event_id={event_id}")
    return await _run("initialize_draft", initialize_draft(event_id, base_team_order, is_admin))


@mcp.tool()
async def make_pick_tool(
    event_id: str,
    player_id: str,
    requester: str = "",
    is_admin: bool = False,
    team_id: str = None,
) -> str:
    """
    Draft a player for the team on the clock.

    Args:
        event_id: Event being drafted
        player_id: Player to draft
        requester: Handle of the captain making the pick
        is_admin: Whether the requester is an administrator
        team_id: Admin-only override of the team credited with the pick

    Returns:
        JSON string with the pick and the updated draft state
    """
    logger.info(
        f"make_pick called with event_id={event_id}, player_id={player_id}, "
        f"requester={requester}, team_id={team_id}"
    )
    return await _run("make_pick", make_pick(event_id, player_id, requester, is_admin, team_id))


@mcp.tool()
async def undo_last_pick_tool(
    event_id: str, requester: str = "", is_admin: bool = False, pick_number: Optional[int] = None
) -> str:
    """Undo the most recent pick."""
    logger.info(f"undo_last_pick called with event_id={event_id}, requester={requester}")
    return await _run(
        "undo_last_pick", undo_last_pick(event_id, requester, is_admin, pick_number)
    )


@mcp.tool()
async def pause_draft_tool(event_id: str, is_admin: bool = False) -> str:
    """Pause a running draft."""
    return await _run("pause_draft", pause_draft(event_id, is_admin))


@mcp.tool()
async def resume_draft_tool(event_id: str, is_admin: bool = False) -> str:
    """Resume a paused draft."""
    return await _run("resume_draft", resume_draft(event_id, is_admin))


@mcp.tool()
async def reset_draft_tool(event_id: str, is_admin: bool = False) -> str:
    """Remove the draft order and all picks so the draft can be initialized again."""
    return await _run("reset_draft", reset_draft(event_id, is_admin))


@mcp.tool()
async def get_draft_state_tool(event_id: str) -> str:
    """
    Read the live draft board.

    Returns:
        JSON string with draft order, picks, available players and the team on the clock
    """
    return await _run("get_draft_state", get_draft_state(event_id))


@mcp.tool()
async def submit_prediction_tool(
    event_id: str,
    user_id: str,
    placements: Dict[str, int],
    team_order: List[str] = None,
) -> str:
    """
    Save a predicted draft order. Partial predictions are allowed.

    Args:
        event_id: Event to predict
        user_id: Participant id
        placements: Player id -> predicted pick number (1-based)
        team_order: Predicted round 1 team order, every team exactly once

    Returns:
        JSON string with the saved submission
    """
    logger.info(f"submit_prediction called with event_id={event_id}, user_id={user_id}")
    return await _run(
        "submit_prediction", submit_prediction(event_id, user_id, placements, team_order)
    )


@mcp.tool()
async def get_submission_tool(event_id: str, user_id: str) -> str:
    """Read a participant's saved prediction."""
    return await _run("get_submission", get_submission(event_id, user_id))


@mcp.tool()
async def get_rankings_tool(event_id: str) -> str:
    """Leaderboard of prediction scores once the draft has completed."""
    return await _run("get_rankings", get_rankings(event_id))


@mcp.tool()
async def get_my_stats_tool(event_id: str, user_id: str) -> str:
    """Per-category score breakdown of one participant's prediction."""
    return await _run("get_my_stats", get_my_stats(event_id, user_id))


@mcp.tool()
async def get_aggregate_stats_tool(event_id: str) -> str:
    """Prediction accuracy across all participants once the draft has completed."""
    return await _run("get_aggregate_stats", get_aggregate_stats(event_id))


def main():
    """Run the MCP server."""
    logger.info("Starting Mock Draft Predictor MCP Server...")
    logger.info(f"Snake order covers at least {MAX_DRAFT_PICKS} picks")

    try:
        mcp.run()
    except Exception as e:
        logger.error(f"Server startup failed: {e}")
        import traceback

        traceback.print_exc()
        raise


if __name__ == "__main__":
    main()
