"""Tests for maze_beam.experiments.episode."""

from __future__ import annotations

from random import Random

import pytest

from maze_beam.config.types import BeamSearchConfig, MazeConfig, PolicyKind
from maze_beam.domain.coord import Move
from maze_beam.domain.state import MazeState
from maze_beam.errors import NoFirstMoveError
from maze_beam.experiments.episode import build_policy, play_episode

SAMPLE_GRID = [[0, 1, 2], [3, 0, 1], [2, 1, 0]]


class TestPlayEpisode:
    def test_greedy_scenario(self) -> None:
        state = MazeState.from_rewards(SAMPLE_GRID, (0, 0), turn_limit=2)
        result = play_episode(state, build_policy(PolicyKind.GREEDY))
        # DOWN onto the 3, then DOWN onto the 2
        assert result.moves == (Move.DOWN, Move.DOWN)
        assert result.final_score == 5
        assert result.turns == 2
        assert result.final_state.is_done()

    def test_input_state_untouched(self) -> None:
        state = MazeState.from_rewards(SAMPLE_GRID, (0, 0), turn_limit=2)
        play_episode(state, build_policy(PolicyKind.GREEDY))
        assert state.turn == 0
        assert state.rewards[1, 0] == 3

    def test_on_step_sees_every_move(self) -> None:
        state = MazeState.create(MazeConfig(height=5, width=5, turn_limit=6), 1)
        turns: list[int] = []
        policy = build_policy(PolicyKind.RANDOM, rng=Random(0))
        play_episode(state, policy, on_step=lambda s: turns.append(s.turn))
        assert turns == [1, 2, 3, 4, 5, 6]

    def test_policy_without_move_raises(self) -> None:
        state = MazeState.from_rewards(SAMPLE_GRID, (0, 0), turn_limit=2)
        with pytest.raises(NoFirstMoveError):
            play_episode(state, lambda s: None)

    def test_terminal_start_plays_nothing(self) -> None:
        state = MazeState.from_rewards(SAMPLE_GRID, (0, 0), turn_limit=0)
        result = play_episode(state, build_policy(PolicyKind.GREEDY))
        assert result.moves == ()
        assert result.final_score == 0


class TestBuildPolicy:
    def test_beam_policy_uses_config(self) -> None:
        state = MazeState.from_rewards([[5, 0, 1, 9]], (0, 1), turn_limit=2)
        policy = build_policy(PolicyKind.BEAM, BeamSearchConfig.depth_bounded(2, 2))
        assert policy(state) == Move.RIGHT

    def test_random_policy_reproducible_with_rng(self) -> None:
        state = MazeState.create(MazeConfig(height=6, width=6, turn_limit=12), 2)
        a = play_episode(state, build_policy(PolicyKind.RANDOM, rng=Random(5)))
        b = play_episode(state, build_policy(PolicyKind.RANDOM, rng=Random(5)))
        assert a.moves == b.moves

    def test_beam_not_worse_than_greedy_on_trap(self) -> None:
        state = MazeState.from_rewards([[5, 0, 1, 9]], (0, 1), turn_limit=2)
        greedy = play_episode(state, build_policy(PolicyKind.GREEDY))
        beam_policy = build_policy(PolicyKind.BEAM, BeamSearchConfig.depth_bounded(2, 2))
        beam = play_episode(state, beam_policy)
        assert greedy.final_score == 5
        assert beam.final_score == 10
