"""Prediction submission tools."""

import logging
from typing import Any, Dict, List, Optional

from mockdraft.errors import DraftError, NotFoundError
from mockdraft.services import submissions
from mockdraft.services.event_store import get_event_store
from mockdraft.services.stats_cache import invalidate_event_stats

logger = logging.getLogger(__name__)


async def submit_prediction(
    event_id: str,
    user_id: str,
    placements: Dict[str, int],
    team_order: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """
    Save a participant's predicted draft order.

    Args:
        event_id: Event the prediction is for
        user_id: Participant making the prediction
        placements: Player id -> predicted 1-based pick number; may be partial
        team_order: Predicted round 1 team order

    Returns:
        Dict with the stored submission or an error
    """
    logger.info(f"Saving prediction for {user_id} in event {event_id}")

    try:
        async with get_event_store().transaction(event_id) as event:
            submission = submissions.submit_prediction(event, user_id, placements, team_order)
        invalidate_event_stats(event_id)
        return {"success": True, "submission": submission.model_dump(mode="json")}
    except DraftError as e:
        logger.warning(f"Prediction for {user_id} in event {event_id} rejected: {e}")
        return e.to_dict()


async def get_submission(event_id: str, user_id: str) -> Dict[str, Any]:
    """Return a participant's saved prediction."""
    try:
        event = await get_event_store().get(event_id)
        submission = event.submissions.get(user_id)
        if submission is None:
            raise NotFoundError("No submission found")
        data = submission.model_dump(mode="json")
        data["locked"] = submissions.is_locked(event, submission)
        return {"success": True, "submission": data}
    except DraftError as e:
        return e.to_dict()
