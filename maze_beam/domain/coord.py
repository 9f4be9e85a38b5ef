"""Grid coordinates and the four unit moves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Move(Enum):
    """Axis-aligned unit move as a ``(d_row, d_col)`` offset.

    Definition order is the enumeration order of legal moves and therefore
    decides which of several equally scored candidates wins.
    """

    DOWN = (1, 0)
    UP = (-1, 0)
    RIGHT = (0, 1)
    LEFT = (0, -1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]


MOVE_ORDER: tuple[Move, ...] = tuple(Move)
"""All moves in the fixed order used by ``MazeState.legal_actions``."""


@dataclass(frozen=True)
class Coord:
    """A cell address; compared by equality only."""

    row: int
    col: int

    def shifted(self, move: Move) -> Coord:
        """Return the cell reached by applying *move*."""
        return Coord(self.row + move.d_row, self.col + move.d_col)

    def in_bounds(self, height: int, width: int) -> bool:
        return 0 <= self.row < height and 0 <= self.col < width
