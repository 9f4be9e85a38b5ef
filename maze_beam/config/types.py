"""Configuration dataclasses for mazes, searches, and batch evaluations.

Every dataclass is frozen and validates itself in ``__post_init__`` so that
an invalid configuration is rejected at construction, before any search
starts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from maze_beam.config.constants import (
    BEAM_WIDTH,
    EVALUATION_GAMES,
    EVALUATION_SEED,
    GRID_HEIGHT,
    GRID_WIDTH,
    REWARD_MAX,
    TIME_THRESHOLD_MS,
    TURN_LIMIT,
)
from maze_beam.errors import ConfigurationError

__all__ = [
    "BeamSearchConfig",
    "EvaluationConfig",
    "MazeConfig",
    "PolicyKind",
    "SearchMode",
]


class SearchMode(Enum):
    """Stopping rule of a beam search."""

    DEPTH = "depth"
    TIME = "time"


class PolicyKind(Enum):
    """Move selector used to drive an episode."""

    RANDOM = "random"
    GREEDY = "greedy"
    BEAM = "beam"


@dataclass(frozen=True)
class MazeConfig:
    """Grid dimensions, turn budget, and reward range of one maze."""

    height: int = GRID_HEIGHT
    width: int = GRID_WIDTH
    turn_limit: int = TURN_LIMIT
    reward_max: int = REWARD_MAX

    def __post_init__(self) -> None:
        if self.height < 1:
            raise ConfigurationError("height must be >= 1")
        if self.width < 1:
            raise ConfigurationError("width must be >= 1")
        if self.turn_limit < 0:
            raise ConfigurationError("turn_limit must be >= 0")
        if self.turn_limit > 0 and self.height * self.width < 2:
            raise ConfigurationError("a single-cell grid has no legal moves; turn_limit must be 0")
        if self.reward_max < 1:
            raise ConfigurationError("reward_max must be >= 1")


@dataclass(frozen=True)
class BeamSearchConfig:
    """Beam width plus exactly one of a depth bound or a time budget.

    ``BeamSearchConfig()`` is the time-bounded reference setup (width 10,
    10 ms per move). Pass ``max_depth`` with ``time_threshold_ms=None`` for
    the depth-bounded variant.
    """

    beam_width: int = BEAM_WIDTH
    max_depth: int | None = None
    time_threshold_ms: float | None = TIME_THRESHOLD_MS

    def __post_init__(self) -> None:
        if self.beam_width < 1:
            raise ConfigurationError("beam_width must be >= 1")
        if (self.max_depth is None) == (self.time_threshold_ms is None):
            raise ConfigurationError("exactly one of max_depth or time_threshold_ms must be set")
        if self.max_depth is not None and self.max_depth < 1:
            raise ConfigurationError("max_depth must be >= 1")
        if self.time_threshold_ms is not None and self.time_threshold_ms < 0:
            raise ConfigurationError("time_threshold_ms must be >= 0")

    @property
    def mode(self) -> SearchMode:
        """Stopping rule selected by this config."""
        return SearchMode.DEPTH if self.max_depth is not None else SearchMode.TIME

    @classmethod
    def depth_bounded(cls, beam_width: int, max_depth: int) -> "BeamSearchConfig":
        return cls(beam_width=beam_width, max_depth=max_depth, time_threshold_ms=None)

    @classmethod
    def time_bounded(cls, beam_width: int, time_threshold_ms: float) -> "BeamSearchConfig":
        return cls(beam_width=beam_width, max_depth=None, time_threshold_ms=time_threshold_ms)


@dataclass(frozen=True)
class EvaluationConfig:
    """Batch-evaluation settings: how many seeded episodes and which policy."""

    n_games: int = EVALUATION_GAMES
    seed: int = EVALUATION_SEED
    policy: PolicyKind = PolicyKind.BEAM
    maze: MazeConfig = field(default_factory=MazeConfig)
    search: BeamSearchConfig = field(default_factory=BeamSearchConfig)
    out_dir: Path | None = None

    def __post_init__(self) -> None:
        if self.n_games < 1:
            raise ConfigurationError("n_games must be >= 1")
