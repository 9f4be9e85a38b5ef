"""Configuration layer: constants and typed config dataclasses."""

from maze_beam.config.constants import (
    BEAM_WIDTH,
    EPISODE_SEED_BITS,
    EVALUATION_GAMES,
    EVALUATION_SEED,
    GRID_HEIGHT,
    GRID_WIDTH,
    REWARD_MAX,
    TIME_THRESHOLD_MS,
    TURN_LIMIT,
)
from maze_beam.config.types import (
    BeamSearchConfig,
    EvaluationConfig,
    MazeConfig,
    PolicyKind,
    SearchMode,
)

__all__ = [
    "BEAM_WIDTH",
    "BeamSearchConfig",
    "EPISODE_SEED_BITS",
    "EVALUATION_GAMES",
    "EVALUATION_SEED",
    "EvaluationConfig",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "MazeConfig",
    "PolicyKind",
    "REWARD_MAX",
    "SearchMode",
    "TIME_THRESHOLD_MS",
    "TURN_LIMIT",
]
