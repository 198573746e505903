"""Text diagrams of a board: the console rendering and a compact layout.

The compact layout is one line per rank, highest rank first, with ``.``
for an empty tile and ``r``/``R`` (player 1 man/king) or ``b``/``B``
(player 2 man/king) for pieces. Spaces are ignored::

    . b . b
    . . . .
    r . r .
"""

from __future__ import annotations

from draughts.core.board import Board
from draughts.core.enums import PieceKind
from draughts.core.notation.coordinates import column_to_file
from draughts.core.piece import Piece, Tile

EMPTY_CHAR = "."

# (player id, kind) <-> layout character
_CHAR_MAP: dict[str, tuple[int, PieceKind]] = {
    "r": (1, PieceKind.MAN),
    "R": (1, PieceKind.KING),
    "b": (2, PieceKind.MAN),
    "B": (2, PieceKind.KING),
}
_PIECE_CHARS: dict[tuple[int, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


def piece_char(piece: Piece) -> str:
    """Layout character for *piece*; ``?`` for a player other than 1 or 2."""
    return _PIECE_CHARS.get((piece.player_id, piece.kind), "?")


def piece_from_char(char: str) -> Piece:
    try:
        player_id, kind = _CHAR_MAP[char]
    except KeyError:
        raise ValueError(f"Invalid piece character: {char!r}") from None
    return Piece(player_id, kind)


def format_board(board: Board) -> str:
    """Console rendering with file letters and rank numbers on every side."""
    label_width = len(str(board.number_rows))
    files = "".join(
        f"  {column_to_file(col).upper()}" for col in range(board.number_columns)
    )
    header = " " * label_width + files

    lines = [header]
    for row in range(board.number_rows - 1, -1, -1):
        rank = str(row + 1)
        cells = []
        for col in range(board.number_columns):
            piece = board.get_tile(row, col).piece
            cells.append(f"[{' ' if piece is None else piece_char(piece)}]")
        lines.append(f"{rank.rjust(label_width)} {''.join(cells)} {rank}")
    lines.append(header)
    return "\n".join(lines) + "\n"


def board_from_layout(layout: str) -> Board:
    """Parse a compact layout into a new :class:`Board`."""
    rows = ["".join(line.split()) for line in layout.strip().splitlines()]
    rows = [row for row in rows if row]
    if not rows:
        raise ValueError("Layout must contain at least one rank")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError(f"Layout ranks must all be {width} tiles wide: {layout!r}")

    board = Board(len(rows), width)
    for rank_idx, row_text in enumerate(rows):
        row = len(rows) - 1 - rank_idx
        for col, ch in enumerate(row_text):
            if ch != EMPTY_CHAR:
                board.set_tile(row, col, Tile.occupied(piece_from_char(ch)))
    return board


def board_to_layout(board: Board) -> str:
    """Inverse of :func:`board_from_layout`, one space between tiles."""
    lines: list[str] = []
    for row in range(board.number_rows - 1, -1, -1):
        chars = []
        for col in range(board.number_columns):
            piece = board.get_tile(row, col).piece
            chars.append(EMPTY_CHAR if piece is None else piece_char(piece))
        lines.append(" ".join(chars))
    return "\n".join(lines)
