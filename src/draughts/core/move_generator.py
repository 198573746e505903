"""Per-piece move generation: simple steps and capture trees.

All functions are pure. Capture search works on the board as it stands;
nothing is moved or removed while a tree is built, so the board is only
changed later, when a chosen path is applied by the game.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from draughts.core.enums import Direction
from draughts.core.move import JumpMove, SimpleMove
from draughts.core.types import KING_DIRECTIONS, MAN_SIDE_STEPS, BoardPosition

if TYPE_CHECKING:
    from draughts.core.board import Board
    from draughts.core.piece import Player


# -- Simple moves -----------------------------------------------------------


def simple_moves_for_man(
    board: Board, direction: Direction, row: int, col: int
) -> list[SimpleMove]:
    """Forward diagonal steps into empty tiles, left before right."""
    offsets = [(direction.step, d_col) for d_col in MAN_SIDE_STEPS]
    return _simple_moves(board, row, col, offsets)


def simple_moves_for_king(board: Board, row: int, col: int) -> list[SimpleMove]:
    """Diagonal steps in all four directions into empty tiles."""
    return _simple_moves(board, row, col, KING_DIRECTIONS)


def _simple_moves(
    board: Board,
    row: int,
    col: int,
    offsets: Sequence[tuple[int, int]],
) -> list[SimpleMove]:
    start = BoardPosition(row, col)
    moves: list[SimpleMove] = []
    for d_row, d_col in offsets:
        to_row = row + d_row
        to_col = col + d_col
        if board.contains(to_row, to_col) and board.is_empty(to_row, to_col):
            moves.append(SimpleMove(start, BoardPosition(to_row, to_col)))
    return moves


# -- Capture trees ----------------------------------------------------------


def jump_moves_for_man(
    board: Board, player: Player, direction: Direction, row: int, col: int
) -> JumpMove:
    """Capture tree for a man; every capture continues in *direction*."""
    root = JumpMove(BoardPosition(row, col))
    _extend_man_jumps(board, player, direction, root)
    return root


def _extend_man_jumps(
    board: Board, player: Player, direction: Direction, node: JumpMove
) -> None:
    for d_col in MAN_SIDE_STEPS:
        captured = node.position.offset(direction.step, d_col)
        landing = node.position.offset(2 * direction.step, 2 * d_col)
        if not _can_land(board, landing):
            continue
        if not _is_opponent_piece(board, player, captured):
            continue
        child = JumpMove(landing)
        node.jumps.append(child)
        _extend_man_jumps(board, player, direction, child)


def jump_moves_for_king(board: Board, player: Player, row: int, col: int) -> JumpMove:
    """Capture tree for a king, in all four directions at every node.

    A captured square is never jumped twice along one sequence. The king's
    own starting square counts as empty, so a sequence may end where it
    began.
    """
    root = JumpMove(BoardPosition(row, col))
    _extend_king_jumps(board, player, root.position, root, set())
    return root


def _extend_king_jumps(
    board: Board,
    player: Player,
    start: BoardPosition,
    node: JumpMove,
    jumped: set[BoardPosition],
) -> None:
    for d_row, d_col in KING_DIRECTIONS:
        captured = node.position.offset(d_row, d_col)
        landing = node.position.offset(2 * d_row, 2 * d_col)
        if captured in jumped:
            continue
        if landing != start and not _can_land(board, landing):
            continue
        if not _is_opponent_piece(board, player, captured):
            continue
        child = JumpMove(landing)
        node.jumps.append(child)
        jumped.add(captured)
        _extend_king_jumps(board, player, start, child, jumped)
        jumped.remove(captured)


def _can_land(board: Board, pos: BoardPosition) -> bool:
    return board.contains(pos.row, pos.column) and board.is_empty(pos.row, pos.column)


def _is_opponent_piece(board: Board, player: Player, pos: BoardPosition) -> bool:
    # Only called once the landing square two steps out is on the board,
    # so the square in between is on the board too.
    piece = board[pos]
    return piece is not None and not piece.belongs_to(player)
