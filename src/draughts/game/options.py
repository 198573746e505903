"""Game configuration value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from draughts.core.board import DEFAULT_ROWS_PER_PLAYER, DEFAULT_SIZE


class CaptureRule(IntEnum):
    """How far a submitted capture path has to go.

    ALLOW_PARTIAL accepts any walk from the piece through its capture tree,
    so a multi-jump may be stopped early. REQUIRE_COMPLETE only accepts a
    walk that ends where no further capture is possible.
    """

    ALLOW_PARTIAL = auto()
    REQUIRE_COMPLETE = auto()


@dataclass(frozen=True, slots=True)
class GameOptions:
    """Board geometry and rule switches for a new game.

    Args:
        board_size: Rows and columns of the square board.
        rows_per_player: Rows of men each side starts with.
        capture_rule: Whether capture sequences may stop before a leaf.
    """

    board_size: int = DEFAULT_SIZE
    rows_per_player: int = DEFAULT_ROWS_PER_PLAYER
    capture_rule: CaptureRule = CaptureRule.ALLOW_PARTIAL

    def __post_init__(self) -> None:
        if self.board_size < 2:
            raise ValueError(f"Board size must be >= 2, got {self.board_size}")
        if self.rows_per_player < 1:
            raise ValueError(
                f"Rows per player must be >= 1, got {self.rows_per_player}"
            )
        if 2 * self.rows_per_player > self.board_size:
            raise ValueError(
                f"{self.rows_per_player} rows per player do not fit on a "
                f"{self.board_size}x{self.board_size} board"
            )
