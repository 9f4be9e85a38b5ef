"""Batch evaluation: average final score of a policy over seeded episodes."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from random import Random

import numpy as np
import pyarrow as pa
import pyarrow.parquet as pq

from maze_beam.config.constants import EPISODE_SEED_BITS
from maze_beam.config.types import EvaluationConfig, SearchMode
from maze_beam.domain.state import MazeState
from maze_beam.experiments.episode import build_policy, play_episode
from maze_beam.io.paths import episodes_path, evaluation_summary_path
from maze_beam.io.schemas import EPISODE_SCHEMA, EVALUATION_SCHEMA_VERSION

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationSummary:
    """Aggregate scores of one evaluation run."""

    n_games: int
    mean_score: float
    min_score: int
    max_score: int
    std_score: float

    def to_dict(self) -> dict[str, int | float]:
        return {
            "n_games": self.n_games,
            "mean_score": self.mean_score,
            "min_score": self.min_score,
            "max_score": self.max_score,
            "std_score": self.std_score,
        }


def derive_seeds(seed: int, n_games: int) -> tuple[list[int], int]:
    """Draw *n_games* episode seeds, then one policy seed, from ``Random(seed)``.

    The policy seed comes after every episode seed, so a random policy never
    replays the bits that built its mazes.
    """
    master = Random(seed)
    seeds = [master.getrandbits(EPISODE_SEED_BITS) for _ in range(n_games)]
    return seeds, master.getrandbits(EPISODE_SEED_BITS)


def episode_seeds(seed: int, n_games: int) -> list[int]:
    """Per-episode seeds of an evaluation run."""
    return derive_seeds(seed, n_games)[0]


def _search_description(config: EvaluationConfig) -> dict[str, object]:
    search = config.search
    payload: dict[str, object] = {"beam_width": search.beam_width, "mode": search.mode.value}
    if search.mode == SearchMode.DEPTH:
        payload["max_depth"] = search.max_depth
    else:
        payload["time_threshold_ms"] = search.time_threshold_ms
    return payload


def run_evaluation(config: EvaluationConfig) -> EvaluationSummary:
    """Play ``config.n_games`` episodes and persist results when ``out_dir`` is set."""
    seeds, policy_seed = derive_seeds(config.seed, config.n_games)
    policy = build_policy(config.policy, config.search, rng=Random(policy_seed))
    rows: list[dict[str, object]] = []
    scores: list[int] = []

    for game_index, seed in enumerate(seeds):
        state = MazeState.create(config.maze, seed)
        started = time.perf_counter()
        result = play_episode(state, policy)
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        scores.append(result.final_score)
        logger.info(
            "game %d/%d seed=%d score=%d (%.1f ms)",
            game_index + 1,
            config.n_games,
            seed,
            result.final_score,
            elapsed_ms,
        )
        rows.append(
            {
                "schema_version": EVALUATION_SCHEMA_VERSION,
                "game_index": game_index,
                "seed": seed,
                "policy": config.policy.value,
                "final_score": result.final_score,
                "turns": result.turns,
                "start_row": result.start.row,
                "start_col": result.start.col,
                "elapsed_ms": elapsed_ms,
            }
        )

    score_array = np.asarray(scores, dtype=np.int64)
    summary = EvaluationSummary(
        n_games=config.n_games,
        mean_score=float(score_array.mean()),
        min_score=int(score_array.min()),
        max_score=int(score_array.max()),
        std_score=float(score_array.std()),
    )
    logger.info("mean score over %d games: %.3f", summary.n_games, summary.mean_score)

    if config.out_dir is not None:
        _write_outputs(Path(config.out_dir), rows, summary, config)
    return summary


def _write_outputs(
    out_dir: Path,
    rows: list[dict[str, object]],
    summary: EvaluationSummary,
    config: EvaluationConfig,
) -> None:
    table_path = episodes_path(out_dir)
    table_path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(pa.Table.from_pylist(rows, schema=EPISODE_SCHEMA), table_path)
    payload = {
        "schema_version": EVALUATION_SCHEMA_VERSION,
        "policy": config.policy.value,
        "seed": config.seed,
        "maze": {
            "height": config.maze.height,
            "width": config.maze.width,
            "turn_limit": config.maze.turn_limit,
            "reward_max": config.maze.reward_max,
        },
        "search": _search_description(config),
        **summary.to_dict(),
    }
    evaluation_summary_path(out_dir).write_text(json.dumps(payload, ensure_ascii=False, indent=2))
