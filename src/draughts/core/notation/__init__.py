"""Notation package: move coordinates and board diagrams."""

from draughts.core.notation.coordinates import (
    InputError,
    TokenError,
    TokenErrorKind,
    column_to_file,
    file_to_column,
    parse_move,
    parse_position,
    position_name,
)
from draughts.core.notation.diagram import (
    board_from_layout,
    board_to_layout,
    format_board,
    piece_char,
    piece_from_char,
)

__all__ = [
    "InputError",
    "TokenError",
    "TokenErrorKind",
    "column_to_file",
    "file_to_column",
    "parse_move",
    "parse_position",
    "position_name",
    "board_from_layout",
    "board_to_layout",
    "format_board",
    "piece_char",
    "piece_from_char",
]
