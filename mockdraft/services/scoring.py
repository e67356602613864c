"""
Prediction scoring.

Each submission is scored independently against the recorded picks:

- player slot: 10/5/3/1 points for a placement 0/1/2/3 picks away from the actual pick
- correct team: 3 points when the predicted slot belongs to the drafting team
- correct round: 2 points when the predicted slot falls in the drafted round
- team order: 5 points per team predicted at its actual round 1 position

Correct team and correct round need a complete predicted team order, since
a slot only maps to a team through the snake arithmetic applied to that order.
"""

import logging
import math
from typing import Dict, List, Optional

from mockdraft.config import (
    AGGREGATE_TOP_N,
    POINTS_CORRECT_ROUND,
    POINTS_CORRECT_TEAM,
    POINTS_EXACT,
    POINTS_OFF_BY_ONE,
    POINTS_OFF_BY_THREE,
    POINTS_OFF_BY_TWO,
    POINTS_TEAM_ORDER,
    SURPRISE_MIN_PREDICTIONS,
)
from mockdraft.errors import InvalidStateError
from mockdraft.models.draft_event import DraftEvent
from mockdraft.models.draft_pick import DraftPick
from mockdraft.models.event_status import EventStatus
from mockdraft.models.scoring import (
    AggregateReport,
    CategoryScores,
    CorrectTeamAccuracy,
    CorrectTeamAccuracyLists,
    PlacementResult,
    PlayerAccuracy,
    PlayerAccuracyLists,
    RankedSubmission,
    SubmissionScore,
    TeamOrderAccuracy,
    TeamOrderAccuracyLists,
)
from mockdraft.models.submission import DraftOrderSubmission
from mockdraft.services.snake_order import slot_to_round_and_team_index
from mockdraft.services.submissions import has_complete_team_order

logger = logging.getLogger(__name__)


def player_slot_points(difference: int) -> int:
    """Points for a placement ``difference`` picks away from the actual pick."""
    if difference == 0:
        return POINTS_EXACT
    if difference == 1:
        return POINTS_OFF_BY_ONE
    if difference == 2:
        return POINTS_OFF_BY_TWO
    if difference == 3:
        return POINTS_OFF_BY_THREE
    return 0


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _percent(count: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(_round_half_up(count / total * 100))


def actual_team_order(event: DraftEvent) -> List[str]:
    """Realized round 1 order, or an empty list before the draft is initialized."""
    if event.draft_order is None:
        return []
    return event.draft_order.team_order[: len(event.teams)]


def predicted_round_and_team(
    predicted_slot: int, team_order: List[str]
) -> tuple:
    """Map a 1-based predicted pick number through a predicted round 1 order."""
    round_num, team_index = slot_to_round_and_team_index(predicted_slot - 1, len(team_order))
    return round_num, team_order[team_index]


def score_submission(event: DraftEvent, submission: DraftOrderSubmission) -> SubmissionScore:
    """
    Score one submission against the recorded picks.

    Args:
        event: Event holding teams, players, draft order and picks
        submission: Participant's saved prediction

    Returns:
        SubmissionScore with category scores and per-player details
    """
    picks_by_player: Dict[str, DraftPick] = {pick.player_id: pick for pick in event.picks}
    team_ids = event.team_ids
    team_names = {team.id: team.name for team in event.teams}
    predicted_team_order = list(submission.team_order)
    can_derive_team = has_complete_team_order(predicted_team_order, team_ids)

    result = SubmissionScore(user_id=submission.user_id, total_players=len(submission.placements))
    scores = CategoryScores()

    for player_id, predicted_slot in submission.placements.items():
        player = event.get_player(player_id)
        detail = PlacementResult(
            player_id=player_id,
            player_name=player.name if player else player_id,
            predicted=predicted_slot,
        )
        result.match_details.append(detail)

        actual_pick = picks_by_player.get(player_id)
        if actual_pick is None:
            continue

        difference = abs(predicted_slot - actual_pick.pick_number)
        if difference == 0:
            result.exact_matches += 1
        elif difference <= 3:
            result.close_matches += 1

        detail.actual = actual_pick.pick_number
        detail.difference = difference
        detail.points = player_slot_points(difference)
        detail.actual_team_id = actual_pick.team_id
        detail.actual_team = team_names.get(actual_pick.team_id)
        detail.actual_round = actual_pick.round
        scores.player_slot += detail.points

        if can_derive_team:
            predicted_round, predicted_team_id = predicted_round_and_team(
                predicted_slot, predicted_team_order
            )
            detail.predicted_round = predicted_round
            detail.predicted_team_id = predicted_team_id
            detail.predicted_team = team_names.get(predicted_team_id)
            detail.correct_team = predicted_team_id == actual_pick.team_id
            detail.correct_round = predicted_round == actual_pick.round
            if detail.correct_team:
                result.correct_team_matches += 1
            if detail.correct_round:
                result.correct_round_matches += 1

    actual_order = actual_team_order(event)
    if can_derive_team and len(actual_order) == len(team_ids):
        result.team_order_exact_matches = sum(
            1 for predicted, actual in zip(predicted_team_order, actual_order) if predicted == actual
        )

    scores.team_order = result.team_order_exact_matches * POINTS_TEAM_ORDER
    scores.correct_team = result.correct_team_matches * POINTS_CORRECT_TEAM
    scores.correct_round = result.correct_round_matches * POINTS_CORRECT_ROUND
    result.category_scores = scores
    result.score = scores.total

    # Undrafted players last, then closest predictions first
    result.match_details.sort(
        key=lambda d: (d.actual is None, d.difference if d.difference is not None else 0)
    )
    return result


def rank_submissions(event: DraftEvent) -> List[RankedSubmission]:
    """Score every submission and order them by score, highest first."""
    scored = [
        score_submission(event, submission) for submission in event.submissions.values()
    ]
    scored.sort(key=lambda s: s.score, reverse=True)

    rankings = [
        RankedSubmission(rank=index + 1, **score.model_dump())
        for index, score in enumerate(scored)
    ]
    logger.info(f"Ranked {len(rankings)} submissions for event {event.id}")
    return rankings


def _player_accuracy(event: DraftEvent) -> List[PlayerAccuracy]:
    team_names = {team.id: team.name for team in event.teams}
    submissions = list(event.submissions.values())

    accuracy = []
    for pick in sorted(event.picks, key=lambda p: p.pick_number):
        predicted_slots = [
            s.placements[pick.player_id] for s in submissions if pick.player_id in s.placements
        ]
        total_predicted = len(predicted_slots)
        exact_count = sum(1 for slot in predicted_slots if slot == pick.pick_number)

        avg_predicted = None
        avg_error = None
        if total_predicted:
            mean = sum(predicted_slots) / total_predicted
            avg_predicted = _round_half_up(mean, 1)
            avg_error = _round_half_up(abs(mean - pick.pick_number), 1)

        player = event.get_player(pick.player_id)
        accuracy.append(
            PlayerAccuracy(
                player_id=pick.player_id,
                player_name=player.name if player else "?",
                team_name=team_names.get(pick.team_id),
                actual_pick=pick.pick_number,
                exact_count=exact_count,
                total_predicted=total_predicted,
                pct_exact=_percent(exact_count, total_predicted),
                avg_predicted=avg_predicted,
                avg_error=avg_error,
            )
        )
    return accuracy


def _team_order_accuracy(
    event: DraftEvent, with_team_order: List[DraftOrderSubmission]
) -> List[TeamOrderAccuracy]:
    actual_order = actual_team_order(event)
    total = len(with_team_order)

    accuracy = []
    for team in event.teams:
        if team.id not in actual_order:
            continue
        index = actual_order.index(team.id)
        correct_count = sum(1 for s in with_team_order if s.team_order[index] == team.id)
        accuracy.append(
            TeamOrderAccuracy(
                team_id=team.id,
                team_name=team.name,
                actual_position=index + 1,
                correct_count=correct_count,
                total_submissions=total,
                pct=_percent(correct_count, total),
            )
        )
    return accuracy


def _correct_team_accuracy(
    event: DraftEvent, with_team_order: List[DraftOrderSubmission]
) -> List[CorrectTeamAccuracy]:
    counts = {team.id: [0, 0] for team in event.teams}  # team id -> [correct, possible]

    for pick in event.picks:
        if pick.team_id not in counts:
            continue
        for submission in with_team_order:
            predicted_slot = submission.placements.get(pick.player_id)
            if predicted_slot is None:
                continue
            counts[pick.team_id][1] += 1
            _, predicted_team_id = predicted_round_and_team(predicted_slot, submission.team_order)
            if predicted_team_id == pick.team_id:
                counts[pick.team_id][0] += 1

    return [
        CorrectTeamAccuracy(
            team_id=team.id,
            team_name=team.name,
            correct_count=counts[team.id][0],
            total_possible=counts[team.id][1],
            pct=_percent(counts[team.id][0], counts[team.id][1]),
        )
        for team in event.teams
    ]


def aggregate_stats(event: DraftEvent, top_n: Optional[int] = None) -> AggregateReport:
    """
    Prediction accuracy across every participant of a completed event.

    Args:
        event: Completed event
        top_n: Length of each list, defaults to AGGREGATE_TOP_N

    Raises:
        InvalidStateError: If the draft has not completed
    """
    if event.status != EventStatus.COMPLETED:
        raise InvalidStateError("Aggregate stats will be available after the draft completes")

    top_n = AGGREGATE_TOP_N if top_n is None else top_n
    team_ids = event.team_ids
    submissions = list(event.submissions.values())
    with_team_order = [s for s in submissions if has_complete_team_order(s.team_order, team_ids)]

    players = [p for p in _player_accuracy(event) if p.total_predicted >= 1]
    surprises = [
        p for p in players
        if p.total_predicted >= SURPRISE_MIN_PREDICTIONS and p.avg_error is not None
    ]
    team_order = _team_order_accuracy(event, with_team_order)
    correct_team = [c for c in _correct_team_accuracy(event, with_team_order) if c.total_possible >= 1]

    report = AggregateReport(
        event_id=event.id,
        total_submissions=len(submissions),
        total_with_team_order=len(with_team_order),
        players=PlayerAccuracyLists(
            most_accurately_predicted=sorted(players, key=lambda p: -p.exact_count)[:top_n],
            least_accurately_predicted=sorted(players, key=lambda p: p.exact_count)[:top_n],
            biggest_surprises=sorted(surprises, key=lambda p: -p.avg_error)[:top_n],
        ),
        team_order=TeamOrderAccuracyLists(
            most_accurately_predicted=sorted(team_order, key=lambda t: -t.correct_count)[:top_n],
            least_accurately_predicted=sorted(team_order, key=lambda t: t.correct_count)[:top_n],
        ),
        correct_team=CorrectTeamAccuracyLists(
            most_accurately_predicted=sorted(correct_team, key=lambda c: -c.correct_count)[:top_n],
            least_accurately_predicted=sorted(correct_team, key=lambda c: c.correct_count)[:top_n],
        ),
    )

    logger.info(
        f"Aggregate stats for event {event.id}: {report.total_submissions} submissions, "
        f"{report.total_with_team_order} with team order"
    )
    return report
