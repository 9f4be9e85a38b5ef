"""Episode driver: run one maze from its start to the turn limit."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Callable

from maze_beam.config.types import BeamSearchConfig, PolicyKind
from maze_beam.domain.coord import Coord, Move
from maze_beam.domain.state import Evaluator, MazeState
from maze_beam.errors import NoFirstMoveError
from maze_beam.search.baselines import greedy_action, random_action
from maze_beam.search.beam import choose_beam_move

Policy = Callable[[MazeState], Move | None]


@dataclass(frozen=True)
class EpisodeResult:
    """Outcome of one full episode."""

    start: Coord
    final_score: int
    turns: int
    moves: tuple[Move, ...]
    final_state: MazeState


def build_policy(
    kind: PolicyKind,
    search_config: BeamSearchConfig | None = None,
    rng: Random | None = None,
    evaluator: Evaluator | None = None,
) -> Policy:
    """Return a move selector for *kind*."""
    if kind == PolicyKind.RANDOM:
        policy_rng = rng if rng is not None else Random()
        return lambda state: random_action(state, policy_rng)
    if kind == PolicyKind.GREEDY:
        return lambda state: greedy_action(state, evaluator)
    config = search_config if search_config is not None else BeamSearchConfig()
    return lambda state: choose_beam_move(state, config, evaluator=evaluator)


def play_episode(
    state: MazeState,
    policy: Policy,
    on_step: Callable[[MazeState], None] | None = None,
) -> EpisodeResult:
    """Drive a copy of *state* with *policy* until the turn limit.

    *on_step* sees the live state after every move.
    """
    current = state.copy()
    moves: list[Move] = []
    while not current.is_done():
        move = policy(current)
        if move is None:
            raise NoFirstMoveError(f"policy returned no move at turn {current.turn}")
        current.advance(move)
        moves.append(move)
        if on_step is not None:
            on_step(current)
    return EpisodeResult(
        start=state.position,
        final_score=current.game_score,
        turns=current.turn,
        moves=tuple(moves),
        final_state=current,
    )
