"""Error taxonomy shared by the domain, search, and experiment layers."""

from __future__ import annotations


class MazeBeamError(Exception):
    """Base class for every error raised deliberately by maze_beam."""


class ConfigurationError(MazeBeamError, ValueError):
    """Invalid construction parameters (grid shape, beam width, budgets)."""


class SearchError(MazeBeamError, RuntimeError):
    """A search finished without producing a usable answer."""


class NoFirstMoveError(SearchError):
    """No depth-0 move was recorded before the search had to stop.

    Raised when the deadline (or a cancellation request) fires before the
    first expansion completes, or when the root has no legal moves at all.
    """
