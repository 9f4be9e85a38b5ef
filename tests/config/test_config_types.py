"""Tests for maze_beam.config.types validation."""

from __future__ import annotations

import pytest

from maze_beam.config.types import (
    BeamSearchConfig,
    EvaluationConfig,
    MazeConfig,
    PolicyKind,
    SearchMode,
)
from maze_beam.errors import ConfigurationError


class TestMazeConfig:
    def test_defaults_match_reference(self) -> None:
        config = MazeConfig()
        assert (config.height, config.width, config.turn_limit, config.reward_max) == (
            30,
            30,
            100,
            10,
        )

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"height": 0},
            {"width": 0},
            {"turn_limit": -1},
            {"reward_max": 0},
            {"height": 1, "width": 1, "turn_limit": 1},
        ],
    )
    def test_rejects_invalid_values(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ConfigurationError):
            MazeConfig(**kwargs)

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            MazeConfig(height=-3)

    def test_is_frozen(self) -> None:
        config = MazeConfig()
        with pytest.raises(AttributeError):
            config.height = 5  # type: ignore[misc]

    def test_single_cell_allowed_without_turns(self) -> None:
        assert MazeConfig(height=1, width=1, turn_limit=0).turn_limit == 0

    def test_one_by_two_grid_allowed(self) -> None:
        assert MazeConfig(height=1, width=2, turn_limit=5).width == 2


class TestBeamSearchConfig:
    def test_default_is_time_bounded(self) -> None:
        config = BeamSearchConfig()
        assert config.mode == SearchMode.TIME
        assert config.beam_width == 10
        assert config.time_threshold_ms == 10

    def test_depth_bounded_factory(self) -> None:
        config = BeamSearchConfig.depth_bounded(beam_width=3, max_depth=7)
        assert config.mode == SearchMode.DEPTH
        assert config.max_depth == 7
        assert config.time_threshold_ms is None

    def test_time_bounded_factory(self) -> None:
        config = BeamSearchConfig.time_bounded(beam_width=2, time_threshold_ms=0)
        assert config.mode == SearchMode.TIME
        assert config.max_depth is None

    def test_rejects_non_positive_beam_width(self) -> None:
        with pytest.raises(ConfigurationError, match="beam_width"):
            BeamSearchConfig(beam_width=0)

    def test_rejects_both_modes(self) -> None:
        with pytest.raises(ConfigurationError, match="exactly one"):
            BeamSearchConfig(max_depth=3, time_threshold_ms=5)

    def test_rejects_neither_mode(self) -> None:
        with pytest.raises(ConfigurationError, match="exactly one"):
            BeamSearchConfig(max_depth=None, time_threshold_ms=None)

    def test_rejects_zero_depth(self) -> None:
        with pytest.raises(ConfigurationError, match="max_depth"):
            BeamSearchConfig.depth_bounded(beam_width=1, max_depth=0)

    def test_rejects_negative_threshold(self) -> None:
        with pytest.raises(ConfigurationError, match="time_threshold_ms"):
            BeamSearchConfig.time_bounded(beam_width=1, time_threshold_ms=-1)


class TestEvaluationConfig:
    def test_defaults(self) -> None:
        config = EvaluationConfig()
        assert config.policy == PolicyKind.BEAM
        assert config.n_games == 100
        assert config.out_dir is None

    def test_rejects_zero_games(self) -> None:
        with pytest.raises(ConfigurationError):
            EvaluationConfig(n_games=0)
