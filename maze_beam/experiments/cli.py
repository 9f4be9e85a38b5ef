"""CLI entrypoint for playing and evaluating maze policies.

This module owns CLI argument parsing and mode dispatch. All domain logic
lives in the extracted modules:

- ``maze_beam.config``                  – configuration dataclasses
- ``maze_beam.experiments.episode``     – single-episode driver
- ``maze_beam.experiments.evaluation``  – batch evaluation and persistence
- ``maze_beam.viz.render``              – text and figure rendering
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from random import Random

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
from maze_beam.config.types import BeamSearchConfig, EvaluationConfig, MazeConfig, PolicyKind
from maze_beam.domain.state import MazeState
from maze_beam.errors import ConfigurationError
from maze_beam.experiments.episode import build_policy, play_episode
from maze_beam.experiments.evaluation import derive_seeds, run_evaluation
from maze_beam.io.paths import episodes_path
from maze_beam.viz.render import render_score_histogram, render_state_figure, render_text

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_policy(raw_policy: object) -> PolicyKind:
    """Parse policy name from CLI/config."""
    try:
        return PolicyKind(raw_policy)
    except ValueError as exc:
        valid = ", ".join(kind.value for kind in PolicyKind)
        raise ValueError(f"policy must be one of {valid}") from exc


def _coerce_int(raw: object, key: str) -> int:
    """Accept ints, integral floats and numeric strings from JSON; never booleans."""
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, (int, str)) and not isinstance(raw, bool):
        return int(raw)
    raise ValueError(f"{key} must be an integer value, got {raw!r}")


def _coerce_float(raw: object, key: str) -> float:
    if isinstance(raw, (int, float, str)) and not isinstance(raw, bool):
        return float(raw)
    raise ValueError(f"{key} must be a number, got {raw!r}")


def _resolve(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _resolve_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_resolve(cli_val, key, file_cfg, default), key)


def _resolve_policy(
    cli_val: str | None, file_cfg: dict[str, object], default: PolicyKind
) -> PolicyKind:
    return _parse_policy(_resolve(cli_val, "policy", file_cfg, default.value))


def _resolve_maze_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> MazeConfig:
    return MazeConfig(
        height=_resolve_int(args.height, "height", file_cfg, GRID_HEIGHT),
        width=_resolve_int(args.width, "width", file_cfg, GRID_WIDTH),
        turn_limit=_resolve_int(args.turn_limit, "turn_limit", file_cfg, TURN_LIMIT),
        reward_max=_resolve_int(args.reward_max, "reward_max", file_cfg, REWARD_MAX),
    )


def _resolve_search_config(
    args: argparse.Namespace, file_cfg: dict[str, object]
) -> BeamSearchConfig:
    """Pick depth or time mode; a CLI flag beats either file key."""
    beam_width = _resolve_int(args.beam_width, "beam_width", file_cfg, BEAM_WIDTH)
    if args.beam_depth is not None:
        return BeamSearchConfig.depth_bounded(
            beam_width, _coerce_int(args.beam_depth, "beam_depth")
        )
    if args.time_threshold_ms is not None:
        return BeamSearchConfig.time_bounded(
            beam_width, _coerce_float(args.time_threshold_ms, "time_threshold_ms")
        )
    if "beam_depth" in file_cfg and "time_threshold_ms" in file_cfg:
        raise ConfigurationError("config file sets both beam_depth and time_threshold_ms")
    if "beam_depth" in file_cfg:
        return BeamSearchConfig.depth_bounded(
            beam_width, _coerce_int(file_cfg["beam_depth"], "beam_depth")
        )
    threshold = _coerce_float(
        file_cfg.get("time_threshold_ms", TIME_THRESHOLD_MS), "time_threshold_ms"
    )
    return BeamSearchConfig.time_bounded(beam_width, threshold)


def _load_file_config(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    try:
        loaded = json.loads(Path(path).read_text())
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(loaded, dict):
        parser.error(f"Config file must contain a JSON object: {path}")
    return loaded


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--turn-limit", type=int, default=None)
    parser.add_argument("--reward-max", type=int, default=None)
    parser.add_argument(
        "--policy",
        type=str,
        choices=[kind.value for kind in PolicyKind],
        default=None,
    )
    parser.add_argument("--beam-width", type=int, default=None)
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--beam-depth", type=int, default=None)
    mode_group.add_argument("--time-threshold-ms", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Beam-search agent for the reward maze")
    subparsers = parser.add_subparsers(dest="command", required=True)

    play = subparsers.add_parser("play", help="Play one seeded episode and print every state")
    _add_common_arguments(play)
    play.add_argument("--figure", type=Path, default=None, help="Save the final state as an image")
    play.add_argument("--quiet", action="store_true", help="Print only the final summary")

    evaluate = subparsers.add_parser("evaluate", help="Average final score over many episodes")
    _add_common_arguments(evaluate)
    evaluate.add_argument("--games", type=int, default=None)
    evaluate.add_argument("--out-dir", type=Path, default=None)
    evaluate.add_argument(
        "--histogram",
        type=Path,
        default=None,
        help="Save a final-score histogram (requires --out-dir)",
    )
    return parser


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _handle_play(args: argparse.Namespace, file_cfg: dict[str, object]) -> dict[str, object]:
    maze_config = _resolve_maze_config(args, file_cfg)
    search_config = _resolve_search_config(args, file_cfg)
    policy_kind = _resolve_policy(args.policy, file_cfg, PolicyKind.GREEDY)
    seed = _resolve_int(args.seed, "seed", file_cfg, EVALUATION_SEED)

    # same streams as game 0 of an evaluation with this seed
    (episode_seed,), policy_seed = derive_seeds(seed, 1)
    state = MazeState.create(maze_config, episode_seed)
    if not args.quiet:
        print(render_text(state))

    def show(current: MazeState) -> None:
        if not args.quiet:
            print(render_text(current))

    policy = build_policy(policy_kind, search_config, rng=Random(policy_seed))
    result = play_episode(state, policy, on_step=show)
    if args.figure is not None:
        render_state_figure(result.final_state, args.figure)
    return {
        "mode": "play",
        "policy": policy_kind.value,
        "seed": seed,
        "episode_seed": episode_seed,
        "final_score": result.final_score,
        "turns": result.turns,
    }


def _handle_evaluate(args: argparse.Namespace, file_cfg: dict[str, object]) -> dict[str, object]:
    out_dir_raw = _resolve(args.out_dir, "out_dir", file_cfg, None)
    if out_dir_raw is not None and not isinstance(out_dir_raw, (str, Path)):
        raise ConfigurationError(f"out_dir must be a path, got {out_dir_raw!r}")
    out_dir = Path(out_dir_raw) if out_dir_raw is not None else None
    if args.histogram is not None and out_dir is None:
        raise ConfigurationError("--histogram requires --out-dir")

    config = EvaluationConfig(
        n_games=_resolve_int(args.games, "games", file_cfg, EVALUATION_GAMES),
        seed=_resolve_int(args.seed, "seed", file_cfg, EVALUATION_SEED),
        policy=_resolve_policy(args.policy, file_cfg, PolicyKind.BEAM),
        maze=_resolve_maze_config(args, file_cfg),
        search=_resolve_search_config(args, file_cfg),
        out_dir=out_dir,
    )
    summary = run_evaluation(config)
    if args.histogram is not None and out_dir is not None:
        render_score_histogram(episodes_path(out_dir), args.histogram)
    return {"mode": "evaluate", "policy": config.policy.value, **summary.to_dict()}


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    Supports ``--config path/to/config.json`` for reproducible runs.
    CLI arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    file_cfg = _load_file_config(parser, args.config)

    try:
        if args.command == "play":
            summary = _handle_play(args, file_cfg)
        else:
            summary = _handle_evaluate(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
