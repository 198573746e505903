"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class PieceKind(IntEnum):
    """Kind of a draughts piece."""

    MAN = 1
    KING = 2


class Direction(IntEnum):
    """Forward orientation of a player's men.

    The value is the signed row increment of a forward step.
    """

    INCREASING_RANK = 1
    DECREASING_RANK = -1

    @property
    def step(self) -> int:
        return int(self.value)

    @property
    def opposite(self) -> Direction:
        return Direction(-self.value)

    def final_row(self, number_rows: int) -> int:
        """Row on which a man moving in this direction is crowned."""
        if self is Direction.INCREASING_RANK:
            return number_rows - 1
        return 0
