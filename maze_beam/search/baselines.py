"""Baseline move selectors: uniform random and one-ply greedy."""

from __future__ import annotations

import random
from random import Random

from maze_beam.domain.coord import Move
from maze_beam.domain.state import Evaluator, MazeState


def random_action(state: MazeState, rng: Random | None = None) -> Move:
    """Pick a legal move uniformly; *state* must have at least one."""
    actions = state.legal_actions()
    chooser = rng if rng is not None else random
    return actions[chooser.randrange(len(actions))]


def greedy_action(state: MazeState, evaluator: Evaluator | None = None) -> Move | None:
    """Return the legal move with the strictly highest one-ply key.

    Ties keep the earliest move in ``MOVE_ORDER``. ``None`` means the state
    has no legal moves.
    """
    best_score = float("-inf")
    best_action: Move | None = None
    for action in state.legal_actions():
        next_state = state.copy()
        next_state.advance(action)
        next_state.evaluate_score(evaluator)
        if next_state.evaluated_score > best_score:
            best_score = next_state.evaluated_score
            best_action = action
    return best_action
