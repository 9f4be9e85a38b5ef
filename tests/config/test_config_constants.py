from maze_beam.config.constants import (
    BEAM_WIDTH,
    EPISODE_SEED_BITS,
    EVALUATION_GAMES,
    GRID_HEIGHT,
    GRID_WIDTH,
    REWARD_MAX,
    TIME_THRESHOLD_MS,
    TURN_LIMIT,
)


def test_reference_grid_is_30_by_30() -> None:
    assert GRID_HEIGHT == 30
    assert GRID_WIDTH == 30


def test_reference_turn_limit() -> None:
    assert TURN_LIMIT == 100


def test_rewards_are_single_digits() -> None:
    assert REWARD_MAX == 10


def test_search_defaults_are_positive() -> None:
    assert isinstance(BEAM_WIDTH, int) and BEAM_WIDTH > 0
    assert TIME_THRESHOLD_MS > 0


def test_evaluation_defaults() -> None:
    assert isinstance(EVALUATION_GAMES, int) and EVALUATION_GAMES > 0
    assert EPISODE_SEED_BITS == 64
