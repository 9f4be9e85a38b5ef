"""Domain layer: coordinates, moves, maze state, and evaluators."""

from maze_beam.domain.coord import MOVE_ORDER, Coord, Move
from maze_beam.domain.scoring import Evaluator, game_score_evaluator, make_neighborhood_evaluator
from maze_beam.domain.state import MazeState

__all__ = [
    "Coord",
    "Evaluator",
    "MOVE_ORDER",
    "MazeState",
    "Move",
    "game_score_evaluator",
    "make_neighborhood_evaluator",
]
