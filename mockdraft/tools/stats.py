"""Rankings and accuracy stats tools."""

import logging
import time
from typing import Any, Dict

from mockdraft.errors import DraftError, NotFoundError
from mockdraft.models.event_status import EventStatus
from mockdraft.models.scoring import AggregateReport
from mockdraft.services import scoring
from mockdraft.services.event_store import get_event_store
from mockdraft.services.stats_cache import get_cached_stats
from mockdraft.services.submissions import is_locked

logger = logging.getLogger(__name__)


async def get_rankings(event_id: str) -> Dict[str, Any]:
    """
    Leaderboard of every participant's prediction score.

    Args:
        event_id: Event to rank

    Returns:
        Dict with ranked submissions, or an empty list with a message before completion
    """
    start_time = time.time()
    logger.info(f"Getting rankings for event {event_id}")

    try:
        event = await get_event_store().get(event_id)
        if event.status != EventStatus.COMPLETED:
            return {
                "success": True,
                "rankings": [],
                "message": "Rankings will be available after the draft completes",
            }

        rankings = get_cached_stats(
            event_id,
            "rankings",
            lambda: [r.model_dump(mode="json") for r in scoring.rank_submissions(event)],
        )
        logger.info(f"get_rankings completed in {time.time() - start_time:.2f} seconds")
        return {"success": True, "rankings": rankings}
    except DraftError as e:
        return e.to_dict()


async def get_my_stats(event_id: str, user_id: str) -> Dict[str, Any]:
    """
    Score breakdown of one participant's prediction.

    Args:
        event_id: Event the prediction belongs to
        user_id: Participant to score

    Returns:
        Dict with submission metadata and the per-category score
    """
    logger.info(f"Getting stats for {user_id} in event {event_id}")

    try:
        event = await get_event_store().get(event_id)
        submission = event.submissions.get(user_id)
        if submission is None:
            raise NotFoundError("No submission found")

        score = scoring.score_submission(event, submission)
        return {
            "success": True,
            "submission": {
                "submitted_at": submission.submitted_at.isoformat(),
                "locked": is_locked(event, submission),
            },
            "stats": score.model_dump(mode="json"),
        }
    except DraftError as e:
        return e.to_dict()


async def get_aggregate_stats(event_id: str) -> Dict[str, Any]:
    """
    Prediction accuracy across all participants: players, team order and who drafts whom.

    Args:
        event_id: Event to summarize

    Returns:
        Dict with the aggregate report, or an empty report with a message before completion
    """
    start_time = time.time()
    logger.info(f"Getting aggregate stats for event {event_id}")

    try:
        event = await get_event_store().get(event_id)
        if event.status != EventStatus.COMPLETED:
            empty = AggregateReport(event_id=event_id)
            return {
                "success": True,
                "report": empty.model_dump(mode="json"),
                "message": "Aggregate stats will be available after the draft completes",
            }

        report = get_cached_stats(
            event_id,
            "aggregate",
            lambda: scoring.aggregate_stats(event).model_dump(mode="json"),
        )
        logger.info(f"get_aggregate_stats completed in {time.time() - start_time:.2f} seconds")
        return {"success": True, "report": report}
    except DraftError as e:
        return e.to_dict()
