"""Tests for configuration loading and validation."""

import json

import pytest

from mockdraft import config
from mockdraft.config import load_config


class TestConfigLoading:
    """Test configuration loading functionality."""

    def test_load_config_success(self, tmp_path):
        """Test successful config loading with a valid config file."""
        config_data = {
            "draft": {"max_draft_picks": 120},
            "scoring": {"points_exact": 12},
            "stats": {"aggregate_top_n": 5},
            "logging": {"level": "DEBUG"},
        }
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps(config_data))

        result = load_config(config_path)

        assert result == config_data
        assert result["draft"]["max_draft_picks"] == 120
        assert result["logging"]["level"] == "DEBUG"

    def test_load_config_file_not_found(self, tmp_path):
        """Test config loading when config.json doesn't exist."""
        with pytest.raises(FileNotFoundError) as exc_info:
            load_config(tmp_path / "config.json")

        assert "config.json.example" in str(exc_info.value)

    def test_load_config_invalid_json(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text("{ not json")

        with pytest.raises(json.JSONDecodeError):
            load_config(config_path)


class TestConfigValues:
    """Test the module-level settings loaded from the bundled config.json."""

    def test_scoring_points(self):
        assert config.POINTS_EXACT == 10
        assert config.POINTS_OFF_BY_ONE == 5
        assert config.POINTS_OFF_BY_TWO == 3
        assert config.POINTS_OFF_BY_THREE == 1
        assert config.POINTS_TEAM_ORDER == 5
        assert config.POINTS_CORRECT_TEAM == 3
        assert config.POINTS_CORRECT_ROUND == 2

    def test_draft_and_stats_settings(self):
        assert config.MAX_DRAFT_PICKS == 200
        assert config.AGGREGATE_TOP_N == 10
        assert config.SURPRISE_MIN_PREDICTIONS == 2
        assert config.STATS_CACHE_TTL_SECONDS > 0
        assert config.LOG_LEVEL in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
