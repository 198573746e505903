"""Results of applying a move and the per-ply history record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from draughts.core.piece import Player
from draughts.core.types import BoardPosition


class MoveError(IntEnum):
    """Why a submitted move was rejected. Returned, never raised."""

    INVALID_MOVE = auto()
    SHOULD_HAVE_JUMPED = auto()

    @property
    def message(self) -> str:
        if self is MoveError.SHOULD_HAVE_JUMPED:
            return "Must take jump"
        return "Illegal move"


@dataclass(frozen=True, slots=True)
class GameState:
    """Outcome after a move: in progress, or over with a winner."""

    winner: Player | None = None

    @classmethod
    def game_over(cls, winner: Player) -> GameState:
        return cls(winner)

    @property
    def is_over(self) -> bool:
        return self.winner is not None


IN_PROGRESS = GameState()


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    player: Player
    path: tuple[BoardPosition, ...]
    captured: tuple[BoardPosition, ...] = ()
    promoted: bool = False

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)
