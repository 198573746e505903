"""Board coordinates and diagonal offset helpers.

Rows and columns are zero based. Row 0 is the first rank, the home rank
of the player moving in :attr:`Direction.INCREASING_RANK`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class BoardPosition:
    """Immutable ``(row, column)`` pair."""

    row: int
    column: int

    def offset(self, d_row: int, d_col: int) -> BoardPosition:
        """Position shifted by the given deltas; may fall off the board."""
        return BoardPosition(self.row + d_row, self.column + d_col)

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


# (d_row, d_col) single diagonal steps, in generation order.
KING_DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

# Column deltas for a man: left, then right.
MAN_SIDE_STEPS: tuple[int, ...] = (-1, 1)


def midpoint(a: BoardPosition, b: BoardPosition) -> BoardPosition:
    """Square jumped over when moving from *a* to *b* two diagonal steps away."""
    return BoardPosition((a.row + b.row) // 2, (a.column + b.column) // 2)


def is_diagonal_step(a: BoardPosition, b: BoardPosition) -> bool:
    """Whether *b* is one diagonal step away from *a*."""
    return abs(a.row - b.row) == 1 and abs(a.column - b.column) == 1
