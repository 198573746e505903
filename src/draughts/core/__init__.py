"""Core domain layer - pure draughts logic with zero external dependencies.

Quick start::

    from draughts.core import Board, Direction, Player, jump_moves_for_man

    red, black = Player(1), Player(2)
    board = Board.initial(red, black)
    tree = jump_moves_for_man(board, red, Direction.INCREASING_RANK, 2, 0)
    for path in tree.sequences():
        print(path)
"""

from draughts.core.board import Board
from draughts.core.enums import Direction, PieceKind
from draughts.core.move import JumpMove, SimpleMove
from draughts.core.move_generator import (
    jump_moves_for_king,
    jump_moves_for_man,
    simple_moves_for_king,
    simple_moves_for_man,
)
from draughts.core.notation import (
    InputError,
    board_from_layout,
    board_to_layout,
    format_board,
    parse_move,
    position_name,
)
from draughts.core.piece import EMPTY_TILE, Piece, Player, Tile
from draughts.core.types import (
    KING_DIRECTIONS,
    MAN_SIDE_STEPS,
    BoardPosition,
    is_diagonal_step,
    midpoint,
)

__all__ = [
    # Enums
    "Direction",
    "PieceKind",
    # Types / helpers
    "BoardPosition",
    "KING_DIRECTIONS",
    "MAN_SIDE_STEPS",
    "is_diagonal_step",
    "midpoint",
    # Domain objects
    "Board",
    "EMPTY_TILE",
    "JumpMove",
    "Piece",
    "Player",
    "SimpleMove",
    "Tile",
    # Move generation
    "jump_moves_for_king",
    "jump_moves_for_man",
    "simple_moves_for_king",
    "simple_moves_for_man",
    # Notation
    "InputError",
    "board_from_layout",
    "board_to_layout",
    "format_board",
    "parse_move",
    "position_name",
]
