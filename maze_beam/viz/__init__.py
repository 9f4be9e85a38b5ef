"""Rendering helpers for maze states and evaluation artifacts."""

from maze_beam.viz.render import render_score_histogram, render_state_figure, render_text

__all__ = ["render_score_histogram", "render_state_figure", "render_text"]
