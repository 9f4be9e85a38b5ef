"""Reference configuration constants for the reward maze.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_HEIGHT = 30
"""Default grid height in cells."""

GRID_WIDTH = 30
"""Default grid width in cells."""

TURN_LIMIT = 100
"""Number of moves in one episode."""

REWARD_MAX = 10
"""Exclusive upper bound of a generated cell reward."""

BEAM_WIDTH = 10
"""Default number of states kept per search depth."""

TIME_THRESHOLD_MS = 10
"""Default wall-clock budget per move for the time-bounded search."""

EVALUATION_GAMES = 100
"""Default number of episodes in a batch evaluation."""

EVALUATION_SEED = 0
"""Seed of the master stream that derives per-episode seeds."""

EPISODE_SEED_BITS = 64
"""Width of each derived per-episode seed."""
