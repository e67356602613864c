"""
Snake draft order arithmetic.

Round 1 runs through the base team order forward, round 2 runs it in reverse,
round 3 forward again, and so on. A *slot* is the 0-based overall pick index
across all rounds; externally picks are numbered from 1 (``slot + 1``).

Both the live draft and prediction scoring map slots to teams through these
functions, so a prediction is always scored with the same arithmetic that
ran the draft.
"""

import math
from typing import List, Sequence, Tuple


def _check_team_count(num_teams: int) -> None:
    if num_teams < 1:
        raise ValueError(f"num_teams must be at least 1, got {num_teams}")


def slot_to_round_and_team_index(slot: int, num_teams: int) -> Tuple[int, int]:
    """
    Map a 0-based slot to its 1-based round and the index into the base order.

    Args:
        slot: 0-based overall pick index
        num_teams: Number of teams in the draft

    Returns:
        Tuple of (round, team_index)
    """
    _check_team_count(num_teams)
    if slot < 0:
        raise ValueError(f"slot must be non-negative, got {slot}")

    round_num = slot // num_teams + 1
    pos_in_round = slot % num_teams
    if round_num % 2 == 1:
        team_index = pos_in_round
    else:
        team_index = num_teams - 1 - pos_in_round
    return round_num, team_index


def round_and_team_index_to_slot(round_num: int, team_index: int, num_teams: int) -> int:
    """Inverse of slot_to_round_and_team_index."""
    _check_team_count(num_teams)
    if round_num < 1:
        raise ValueError(f"round must be at least 1, got {round_num}")
    if not 0 <= team_index < num_teams:
        raise ValueError(f"team_index {team_index} out of range for {num_teams} teams")

    if round_num % 2 == 1:
        pos_in_round = team_index
    else:
        pos_in_round = num_teams - 1 - team_index
    return (round_num - 1) * num_teams + pos_in_round


def is_valid_slot(round_num: int, team_index: int, num_teams: int, total_slots: int) -> bool:
    """
    Check whether a (round, team) cell exists for a pool of ``total_slots`` players.

    The generated order is longer than any real draft, so validity is bounded
    by the player pool rather than by the sequence length.
    """
    return round_and_team_index_to_slot(round_num, team_index, num_teams) < total_slots


def round_for_slot(slot: int, num_teams: int) -> int:
    """Round (1-based) that a slot falls in."""
    return slot_to_round_and_team_index(slot, num_teams)[0]


def is_reversed_round(round_num: int) -> bool:
    """Even rounds run through the base order in reverse."""
    return round_num % 2 == 0


def team_for_slot(base_order: Sequence[str], slot: int) -> str:
    """Team id on the clock at a slot, given the round 1 order."""
    _, team_index = slot_to_round_and_team_index(slot, len(base_order))
    return base_order[team_index]


def build_snake_order(base_order: Sequence[str], min_picks: int) -> List[str]:
    """
    Generate the full snake sequence of team ids.

    Args:
        base_order: Round 1 team order
        min_picks: The sequence covers at least this many slots

    Returns:
        List of team ids, one per slot, whole rounds only
    """
    num_teams = len(base_order)
    _check_team_count(num_teams)

    total_rounds = max(1, math.ceil(min_picks / num_teams))
    forward = list(base_order)
    backward = forward[::-1]

    snake: List[str] = []
    for round_num in range(1, total_rounds + 1):
        snake.extend(backward if is_reversed_round(round_num) else forward)
    return snake
