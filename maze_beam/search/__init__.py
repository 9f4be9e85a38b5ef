"""Search layer: time budget guard, beam search engine, baseline policies."""

from maze_beam.search.baselines import greedy_action, random_action
from maze_beam.search.beam import (
    BeamSearchResult,
    Frontier,
    beam_search_action,
    beam_search_with_time_threshold,
    choose_beam_move,
    run_beam_search,
)
from maze_beam.search.time_keeper import TimeKeeper

__all__ = [
    "BeamSearchResult",
    "Frontier",
    "TimeKeeper",
    "beam_search_action",
    "beam_search_with_time_threshold",
    "choose_beam_move",
    "greedy_action",
    "random_action",
    "run_beam_search",
]
