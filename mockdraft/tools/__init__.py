"""
Tools package for the Mock Draft Predictor.

This package contains all the tool implementations:
- event_setup: Creating events, teams, captains and the player pool
- draft_control: Running the live draft (initialize, pick, undo, pause, resume)
- predictions: Saving participants' predicted draft orders
- stats: Rankings, per-participant scores and aggregate accuracy
"""

from mockdraft.tools.draft_control import (
    get_draft_state,
    initialize_draft,
    make_pick,
    pause_draft,
    reset_draft,
    resume_draft,
    undo_last_pick,
)
from mockdraft.tools.event_setup import (
    add_captain,
    add_team,
    close_event,
    create_event,
    export_event,
    get_event,
    get_event_by_code,
    import_players,
    list_events,
    open_event,
    remove_captain,
    set_team_draft_order,
    update_event,
)
from mockdraft.tools.predictions import get_submission, submit_prediction
from mockdraft.tools.stats import get_aggregate_stats, get_my_stats, get_rankings

__all__ = [
    "create_event",
    "update_event",
    "list_events",
    "get_event",
    "get_event_by_code",
    "export_event",
    "add_team",
    "add_captain",
    "remove_captain",
    "import_players",
    "set_team_draft_order",
    "open_event",
    "close_event",
    "initialize_draft",
    "make_pick",
    "undo_last_pick",
    "pause_draft",
    "resume_draft",
    "reset_draft",
    "get_draft_state",
    "submit_prediction",
    "get_submission",
    "get_rankings",
    "get_my_stats",
    "get_aggregate_stats",
]
