"""Beam-search move selection for a single agent on a reward grid."""

from maze_beam.config.types import BeamSearchConfig, EvaluationConfig, MazeConfig, PolicyKind
from maze_beam.domain.coord import Coord, Move
from maze_beam.domain.state import MazeState
from maze_beam.errors import ConfigurationError, MazeBeamError, NoFirstMoveError, SearchError
from maze_beam.search.baselines import greedy_action, random_action
from maze_beam.search.beam import (
    beam_search_action,
    beam_search_with_time_threshold,
    choose_beam_move,
    run_beam_search,
)
from maze_beam.search.time_keeper import TimeKeeper

__all__ = [
    "BeamSearchConfig",
    "ConfigurationError",
    "Coord",
    "EvaluationConfig",
    "MazeBeamError",
    "MazeConfig",
    "MazeState",
    "Move",
    "NoFirstMoveError",
    "PolicyKind",
    "SearchError",
    "TimeKeeper",
    "beam_search_action",
    "beam_search_with_time_threshold",
    "choose_beam_move",
    "greedy_action",
    "random_action",
    "run_beam_search",
]
