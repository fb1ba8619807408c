"""Tests for command-line configuration."""

from pathlib import Path

import pytest

from station_quiz.config import AppConfig, build_arg_parser
from station_quiz.quiz import MAX_HISTORY


class TestAppConfig:

    def test_defaults(self):
        config = AppConfig.from_args([])
        assert config.stations_path is None
        assert config.seed is None
        assert config.max_history == MAX_HISTORY
        assert config.station_suffix == "駅"
        assert config.dark_mode is False
        assert config.demo is False
        assert config.verbose is False

    def test_all_flags(self):
        config = AppConfig.from_args(
            ["--stations", "data/custom.json", "--seed", "42", "--max-history", "10", "--dark", "-v"]
        )
        assert config.stations_path == Path("data/custom.json")
        assert config.seed == 42
        assert config.max_history == 10
        assert config.dark_mode is True
        assert config.verbose is True

    def test_demo_flag(self):
        assert AppConfig.from_args(["--demo"]).demo is True

    def test_max_history_must_be_positive(self):
        with pytest.raises(ValueError, match="max_history"):
            AppConfig(max_history=0)

    def test_non_integer_seed_rejected(self):
        with pytest.raises(SystemExit):
            AppConfig.from_args(["--seed", "abc"])

    def test_frozen(self):
        config = AppConfig()
        with pytest.raises(Exception):
            config.seed = 1  # type: ignore[misc]

    def test_parser_prog_name(self):
        assert build_arg_parser().prog == "station-quiz"
