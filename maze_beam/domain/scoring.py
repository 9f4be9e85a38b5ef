"""Ordering-key evaluators for frontier ranking.

An evaluator maps a state to a comparable number. The search only orders
states by it; ``game_score`` stays the reported result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from maze_beam.errors import ConfigurationError

if TYPE_CHECKING:
    from maze_beam.domain.state import MazeState

Evaluator = Callable[["MazeState"], float]


def game_score_evaluator(state: MazeState) -> float:
    """Reference ordering key: the accumulated score."""
    return state.game_score


def make_neighborhood_evaluator(weight: float) -> Evaluator:
    """Score plus *weight* times the reward still reachable in one move."""
    if weight < 0:
        raise ConfigurationError("weight must be >= 0")

    def evaluate(state: MazeState) -> float:
        nearby = 0
        for move in state.legal_actions():
            target = state.position.shifted(move)
            nearby += int(state.rewards[target.row, target.col])
        return state.game_score + weight * nearby

    return evaluate
