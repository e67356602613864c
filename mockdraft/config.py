"""
Configuration settings for the Mock Draft Predictor.
"""

import json
from pathlib import Path
from typing import Optional


def load_config(config_path: Optional[Path] = None):
    """Load configuration from config.json file."""
    if config_path is None:
        config_path = Path(__file__).parent.parent / "config.json"

    if not config_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found at {config_path}. "
            "Please copy config.json.example to config.json and update with your settings."
        )

    with open(config_path, "r") as f:
        return json.load(f)


# Load configuration
_config = load_config()

_draft = _config.get("draft", {})
_scoring = _config.get("scoring", {})
_stats = _config.get("stats", {})

# Draft Configuration
MAX_DRAFT_PICKS = _draft.get("max_draft_picks", 200)
"""
Minimum number of slots the generated snake sequence covers.

The sequence is longer than any realistic draft; whether a slot
is actually playable is decided by the size of the player pool.
"""

# Scoring Configuration
POINTS_EXACT = _scoring.get("points_exact", 10)
"""Points for a player placed at exactly the pick where they went."""

POINTS_OFF_BY_ONE = _scoring.get("points_off_by_one", 5)
POINTS_OFF_BY_TWO = _scoring.get("points_off_by_two", 3)
POINTS_OFF_BY_THREE = _scoring.get("points_off_by_three", 1)

POINTS_TEAM_ORDER = _scoring.get("points_team_order", 5)
"""Points per team predicted at its actual first-round position."""

POINTS_CORRECT_TEAM = _scoring.get("points_correct_team", 3)
"""Points when the slot a player was placed at belongs to the team that drafted them."""

POINTS_CORRECT_ROUND = _scoring.get("points_correct_round", 2)
"""Points when the slot a player was placed at falls in the round they were drafted."""

# Stats Configuration
AGGREGATE_TOP_N = _stats.get("aggregate_top_n", 10)
"""Length of each most/least accurately predicted list."""

SURPRISE_MIN_PREDICTIONS = _stats.get("surprise_min_predictions", 2)
"""Players need at least this many predictions to appear in biggest surprises."""

STATS_CACHE_TTL_SECONDS = _stats.get("cache_ttl_seconds", 300)
"""TTL in seconds for cached rankings and aggregate reports."""

# Logging Configuration
LOG_LEVEL = _config.get("logging", {}).get("level", "INFO")
"""Logging level for the application (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""
