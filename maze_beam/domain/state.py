"""Reward-maze state: grid, agent position, score, and turn counter.

A ``MazeState`` is treated as a value. Search code never mutates a state it
did not create; every expansion works on ``copy()`` so no two states share
reward storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import TYPE_CHECKING

import numpy as np

from maze_beam.config.types import MazeConfig
from maze_beam.domain.coord import MOVE_ORDER, Coord, Move
from maze_beam.domain.scoring import Evaluator, game_score_evaluator
from maze_beam.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(eq=False)
class MazeState:
    """One snapshot of an episode.

    ``evaluated_score`` is the frontier ordering key and is only refreshed
    by ``evaluate_score``. ``first_move`` is stamped by a search at depth 0
    and then travels unchanged with every copy.
    """

    config: MazeConfig
    rewards: np.ndarray  # (height, width) int64, zeroed once collected
    position: Coord
    turn: int = 0
    game_score: int = 0
    evaluated_score: float = 0
    first_move: Move | None = None

    @classmethod
    def create(cls, config: MazeConfig, seed: int) -> MazeState:
        """Build a reproducible random maze from *seed*.

        The agent column is drawn first, then the row, then every reward in
        row-major order, all from one ``Random(seed)`` stream.
        """
        rng = Random(seed)
        col = rng.randrange(config.width)
        row = rng.randrange(config.height)
        rewards = np.zeros((config.height, config.width), dtype=np.int64)
        for h in range(config.height):
            for w in range(config.width):
                rewards[h, w] = rng.randrange(config.reward_max)
        return cls(config=config, rewards=rewards, position=Coord(row, col))

    @classmethod
    def from_rewards(
        cls,
        rewards: Sequence[Sequence[int]] | np.ndarray,
        position: Coord | tuple[int, int],
        turn_limit: int,
    ) -> MazeState:
        """Build a state from an explicit reward grid and start cell."""
        grid = np.array(rewards, dtype=np.int64)
        if grid.ndim != 2 or grid.size == 0:
            raise ConfigurationError("rewards must be a non-empty 2-D grid")
        if (grid < 0).any():
            raise ConfigurationError("rewards must be non-negative")
        height, width = grid.shape
        config = MazeConfig(
            height=height,
            width=width,
            turn_limit=turn_limit,
            reward_max=int(grid.max()) + 1,
        )
        start = position if isinstance(position, Coord) else Coord(*position)
        if not start.in_bounds(height, width):
            raise ConfigurationError(f"position {start} is outside a {height}x{width} grid")
        return cls(config=config, rewards=grid, position=start)

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def width(self) -> int:
        return self.config.width

    def is_done(self) -> bool:
        return self.turn == self.config.turn_limit

    def legal_actions(self) -> list[Move]:
        """Moves that keep the agent on the grid, in ``MOVE_ORDER``."""
        return [
            move
            for move in MOVE_ORDER
            if self.position.shifted(move).in_bounds(self.config.height, self.config.width)
        ]

    def advance(self, move: Move) -> None:
        """Apply *move* in place and collect the reward at the new cell.

        *move* must come from ``legal_actions()``; other moves are not checked.
        """
        self.position = self.position.shifted(move)
        cell = (self.position.row, self.position.col)
        self.game_score += int(self.rewards[cell])
        self.rewards[cell] = 0
        self.turn += 1

    def evaluate_score(self, evaluator: Evaluator | None = None) -> None:
        """Refresh ``evaluated_score``; defaults to ``game_score_evaluator``."""
        scorer = evaluator if evaluator is not None else game_score_evaluator
        self.evaluated_score = scorer(self)

    def copy(self) -> MazeState:
        return MazeState(
            config=self.config,
            rewards=self.rewards.copy(),
            position=self.position,
            turn=self.turn,
            game_score=self.game_score,
            evaluated_score=self.evaluated_score,
            first_move=self.first_move,
        )

    def remaining_reward(self) -> int:
        """Total reward still on the grid."""
        return int(self.rewards.sum())
