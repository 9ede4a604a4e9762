"""Exceptions raised by the hex grid library."""

from __future__ import annotations


class CubeInvariantError(ValueError):
    """Raised when a cube coordinate is built from a triple that does not sum to zero.

    This signals a bug at the call site. Values produced by the library itself
    (arithmetic, rounding, conversions, rings) never trigger it.
    """

    def __init__(self, q: int, r: int, s: int) -> None:
        super().__init__(f"For cube coords, q + r + s must be 0 (got {q}, {r}, {s})")
        self.q = q
        self.r = r
        self.s = s
