"""Depth- and time-bounded beam search over maze states.

Both variants share ``run_beam_search``:

1. the frontier starts with a copy of the root;
2. each depth pops up to ``beam_width`` best states and expands every legal
   move of each into the next frontier, stamping ``first_move`` only at
   depth 0;
3. after each depth the best state of the new frontier becomes the best so
   far, and the loop stops once that state is terminal or the frontier is
   empty.

The time-bounded variant polls its ``TimeKeeper`` before every pop and
returns the best first move found so far once the deadline passes.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import Callable

from maze_beam.config.types import BeamSearchConfig, SearchMode
from maze_beam.domain.coord import Move
from maze_beam.domain.state import Evaluator, MazeState
from maze_beam.errors import ConfigurationError, NoFirstMoveError
from maze_beam.search.time_keeper import TimeKeeper

logger = logging.getLogger(__name__)

CancelCheck = Callable[[], bool]


@dataclass(frozen=True)
class BeamSearchResult:
    """Outcome of one search call."""

    move: Move
    best_state: MazeState
    depth: int  # completed depths
    expanded: int  # states popped and expanded
    stopped_early: bool  # deadline or cancellation fired


class Frontier:
    """Max-heap of states keyed by ``evaluated_score``.

    Ties pop in insertion order, so with moves expanded in ``MOVE_ORDER``
    the search is fully reproducible.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, MazeState]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, state: MazeState) -> None:
        heapq.heappush(self._heap, (-state.evaluated_score, next(self._counter), state))

    def pop(self) -> MazeState | None:
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def peek(self) -> MazeState | None:
        if not self._heap:
            return None
        return self._heap[0][2]


def _validate_beam_width(beam_width: int) -> None:
    if beam_width < 1:
        raise ConfigurationError("beam_width must be >= 1")


def _should_stop(time_keeper: TimeKeeper | None, cancelled: CancelCheck | None) -> bool:
    if time_keeper is not None and time_keeper.is_time_over():
        return True
    return cancelled is not None and cancelled()


def _finish(
    best_state: MazeState, depth: int, expanded: int, stopped_early: bool
) -> BeamSearchResult:
    if best_state.first_move is None:
        if stopped_early:
            raise NoFirstMoveError("search stopped before the first expansion completed")
        raise NoFirstMoveError("root state has no legal moves")
    return BeamSearchResult(
        move=best_state.first_move,
        best_state=best_state,
        depth=depth,
        expanded=expanded,
        stopped_early=stopped_early,
    )


def run_beam_search(
    state: MazeState,
    beam_width: int,
    *,
    max_depth: int | None = None,
    time_keeper: TimeKeeper | None = None,
    evaluator: Evaluator | None = None,
    cancelled: CancelCheck | None = None,
) -> BeamSearchResult:
    """Run beam search from *state* and report the best first move.

    ``max_depth=None`` searches until the turn limit, the frontier runs dry,
    or *time_keeper* / *cancelled* stop it. *state* is never mutated.

    Raises:
        ConfigurationError: ``beam_width`` or ``max_depth`` below 1.
        ValueError: *state* is already terminal.
        NoFirstMoveError: the search stopped before any depth-0 expansion
            completed, or the root has no legal moves.
    """
    _validate_beam_width(beam_width)
    if max_depth is not None and max_depth < 1:
        raise ConfigurationError("max_depth must be >= 1")
    if state.is_done():
        raise ValueError("cannot search from a terminal state")

    root = state.copy()
    root.first_move = None
    root.evaluate_score(evaluator)
    frontier = Frontier()
    frontier.push(root)
    best_state = root
    depth = 0
    expanded = 0

    while max_depth is None or depth < max_depth:
        next_frontier = Frontier()
        for _ in range(beam_width):
            if _should_stop(time_keeper, cancelled):
                logger.debug(
                    "beam search stopped early at depth %d after %d expansions", depth, expanded
                )
                return _finish(best_state, depth, expanded, stopped_early=True)
            current = frontier.pop()
            if current is None:
                break
            expanded += 1
            for move in current.legal_actions():
                child = current.copy()
                child.advance(move)
                child.evaluate_score(evaluator)
                if depth == 0:
                    child.first_move = move
                next_frontier.push(child)

        frontier = next_frontier
        best = frontier.peek()
        if best is None:
            break
        depth += 1
        best_state = best
        if best_state.is_done():
            break

    logger.debug(
        "beam search finished: depth=%d expanded=%d best_score=%d",
        depth,
        expanded,
        best_state.game_score,
    )
    return _finish(best_state, depth, expanded, stopped_early=False)


def beam_search_action(
    state: MazeState,
    beam_width: int,
    beam_depth: int,
    *,
    evaluator: Evaluator | None = None,
) -> Move:
    """Depth-bounded beam search; returns the recommended move."""
    return run_beam_search(state, beam_width, max_depth=beam_depth, evaluator=evaluator).move


def beam_search_with_time_threshold(
    state: MazeState,
    beam_width: int,
    time_threshold_ms: float,
    *,
    evaluator: Evaluator | None = None,
    clock: Callable[[], float] | None = None,
    cancelled: CancelCheck | None = None,
) -> Move:
    """Time-bounded beam search with unbounded depth.

    The deadline starts when this function is called. Raises
    ``NoFirstMoveError`` if it passes before the first expansion completes.
    """
    _validate_beam_width(beam_width)
    keeper = (
        TimeKeeper(time_threshold_ms) if clock is None else TimeKeeper(time_threshold_ms, clock)
    )
    return run_beam_search(
        state,
        beam_width,
        time_keeper=keeper,
        evaluator=evaluator,
        cancelled=cancelled,
    ).move


def choose_beam_move(
    state: MazeState,
    config: BeamSearchConfig,
    *,
    evaluator: Evaluator | None = None,
) -> Move:
    """Dispatch to the variant selected by *config*."""
    if config.mode == SearchMode.DEPTH:
        return run_beam_search(
            state, config.beam_width, max_depth=config.max_depth, evaluator=evaluator
        ).move
    return beam_search_with_time_threshold(
        state,
        config.beam_width,
        config.time_threshold_ms,  # type: ignore[arg-type]
        evaluator=evaluator,
    )
