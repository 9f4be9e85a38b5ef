"""Experiment orchestration: episode driver and batch evaluation."""

from maze_beam.experiments.episode import EpisodeResult, Policy, build_policy, play_episode
from maze_beam.experiments.evaluation import (
    EvaluationSummary,
    derive_seeds,
    episode_seeds,
    run_evaluation,
)

__all__ = [
    "EpisodeResult",
    "EvaluationSummary",
    "Policy",
    "build_policy",
    "derive_seeds",
    "episode_seeds",
    "play_episode",
    "run_evaluation",
]
