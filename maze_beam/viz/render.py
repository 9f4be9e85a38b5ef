"""Text and matplotlib renderings of maze states and evaluation results."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pyarrow.parquet as pq

from maze_beam.domain.state import MazeState

AGENT_MARKER = "@"
EMPTY_MARKER = "."
REWARD_CMAP = "YlOrBr"
AGENT_COLOR = "#1f77b4"
GRID_LINE_COLOR = "#d0d0d0"


def render_text(state: MazeState) -> str:
    """Render turn, score, and the grid as plain text.

    Each cell is ``@`` for the agent, its reward digit when positive, or
    ``.`` once collected.
    """
    lines = [f"turn:\t{state.turn}", f"score:\t{state.game_score}"]
    for row in range(state.height):
        cells = []
        for col in range(state.width):
            if state.position.row == row and state.position.col == col:
                cells.append(AGENT_MARKER)
            elif state.rewards[row, col] > 0:
                cells.append(str(int(state.rewards[row, col])))
            else:
                cells.append(EMPTY_MARKER)
        lines.append("".join(cells))
    return "\n".join(lines)


def _draw_reward_grid(ax: plt.Axes, state: MazeState) -> None:
    """imshow of remaining rewards with subtle grid lines and the agent dot."""
    ax.imshow(
        state.rewards,
        cmap=REWARD_CMAP,
        vmin=0,
        vmax=max(state.config.reward_max - 1, 1),
        origin="upper",
        aspect="equal",
    )
    h, w = state.rewards.shape
    for x in range(w + 1):
        ax.axvline(x - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
    for y in range(h + 1):
        ax.axhline(y - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
    ax.scatter([state.position.col], [state.position.row], color=AGENT_COLOR, s=40, zorder=3)
    ax.set_xticks([])
    ax.set_yticks([])


def render_state_figure(state: MazeState, output_path: Path) -> None:
    """Save a heatmap of the remaining rewards with the agent marked."""
    fig, ax = plt.subplots(figsize=(5, 5))
    _draw_reward_grid(ax, state)
    ax.set_title(f"turn {state.turn}  score {state.game_score}", fontsize=10)
    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)


def render_score_histogram(episodes_path: Path, output_path: Path, bins: int = 20) -> None:
    """Histogram of ``final_score`` from an ``episodes.parquet`` file."""
    table = pq.read_table(episodes_path, columns=["final_score"])
    scores = np.asarray(table.column("final_score").to_pylist(), dtype=np.int64)
    if scores.size == 0:
        raise ValueError(f"No episodes in {episodes_path}")

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.hist(scores, bins=bins, color=AGENT_COLOR, edgecolor="white")
    ax.axvline(float(scores.mean()), color="black", linestyle="--", linewidth=1)
    ax.set_xlabel("final score")
    ax.set_ylabel("episodes")
    ax.set_title(f"mean {scores.mean():.2f} over {scores.size} episodes", fontsize=10)
    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
