"""Path construction helpers for evaluation output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def episodes_path(out_dir: Path) -> Path:
    """Return path to the per-episode results Parquet file."""
    return logs_dir(out_dir) / "episodes.parquet"


def evaluation_summary_path(out_dir: Path) -> Path:
    """Return path to the evaluation summary JSON file."""
    return logs_dir(out_dir) / "evaluation_summary.json"
