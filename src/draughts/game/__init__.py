"""Game management layer - the turn state machine and its results.

Quick start::

    from draughts.core import SimpleMove
    from draughts.game import Game, MoveError

    game = Game()
    result = game.apply_simple_move(SimpleMove.from_coords(2, 0, 3, 1))
    assert not isinstance(result, MoveError)
"""

from draughts.game.controller import Game, MoveResult
from draughts.game.options import CaptureRule, GameOptions
from draughts.game.state import IN_PROGRESS, GameState, MoveError, MoveRecord

__all__ = [
    "CaptureRule",
    "Game",
    "GameOptions",
    "GameState",
    "IN_PROGRESS",
    "MoveError",
    "MoveRecord",
    "MoveResult",
]
