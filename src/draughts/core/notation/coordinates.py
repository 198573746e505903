"""Coordinate notation for moves typed by a human, e.g. ``"c3 d4"``.

A board position is written as a file (one or more letters, ``a`` is the
first column, ``z`` the 26th, ``aa`` the 27th) followed by a rank (a
1-based row number).
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import IntEnum, auto

from draughts.core.types import BoardPosition

_ALPHABET_LENGTH = 26
_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


class TokenErrorKind(IntEnum):
    MISSING_FILE = auto()
    MISSING_RANK = auto()
    ZERO_RANK = auto()
    INVALID_CHARACTER = auto()


@dataclass(frozen=True, slots=True)
class TokenError:
    """A single malformed position token."""

    kind: TokenErrorKind
    token: str
    char_index: int | None = None

    @property
    def message(self) -> str:
        if self.kind == TokenErrorKind.MISSING_FILE:
            return f"Board position '{self.token}' must specify file"
        if self.kind == TokenErrorKind.MISSING_RANK:
            return f"Board position '{self.token}' must specify rank"
        if self.kind == TokenErrorKind.ZERO_RANK:
            return f"Rank cannot be zero: {self.token}"
        assert self.char_index is not None
        return (
            f"Board position '{self.token}' contains invalid character "
            f"'{self.token[self.char_index]}'"
        )


class InputError(ValueError):
    """Raised by :func:`parse_move` for unusable input.

    ``token_errors`` is empty when the input was well formed but named
    fewer than two positions.
    """

    def __init__(self, message: str, token_errors: list[TokenError] | None = None) -> None:
        super().__init__(message)
        self.token_errors: list[TokenError] = list(token_errors or [])

    @property
    def too_few_positions(self) -> bool:
        return not self.token_errors


def parse_move(text: str) -> list[BoardPosition]:
    """Parse whitespace separated positions, e.g. ``"c3 e5 g7"``.

    Every bad token is reported, not only the first one.
    """
    positions: list[BoardPosition] = []
    errors: list[TokenError] = []
    for token in text.split():
        result = parse_position(token)
        if isinstance(result, TokenError):
            errors.append(result)
        else:
            positions.append(result)

    if errors:
        raise InputError("; ".join(e.message for e in errors), errors)
    if len(positions) < 2:
        raise InputError("You must specify at least two board positions")
    return positions


def parse_position(token: str) -> BoardPosition | TokenError:
    """Parse one token such as ``"b6"``; returns the error instead of raising."""
    file_part = ""
    rank_part = ""
    for index, ch in enumerate(token):
        if not rank_part and ch in _LETTERS:
            file_part += ch
        elif ch in _DIGITS:
            rank_part += ch
        else:
            return TokenError(TokenErrorKind.INVALID_CHARACTER, token, index)

    if not file_part:
        return TokenError(TokenErrorKind.MISSING_FILE, token)
    if not rank_part:
        return TokenError(TokenErrorKind.MISSING_RANK, token)

    rank = int(rank_part)
    if rank == 0:
        return TokenError(TokenErrorKind.ZERO_RANK, token)
    return BoardPosition(rank - 1, file_to_column(file_part))


def file_to_column(file: str) -> int:
    """``"a"`` -> 0, ``"z"`` -> 25, ``"aa"`` -> 26 (case-insensitive)."""
    value = 0
    for ch in file.lower():
        value = value * _ALPHABET_LENGTH + (ord(ch) - ord("a") + 1)
    return value - 1


def column_to_file(column: int) -> str:
    """Inverse of :func:`file_to_column`."""
    if column < 0:
        raise ValueError(f"Column must be non-negative, got {column}")
    letters = ""
    value = column + 1
    while value:
        value, rem = divmod(value - 1, _ALPHABET_LENGTH)
        letters = chr(ord("a") + rem) + letters
    return letters


def position_name(pos: BoardPosition) -> str:
    """Human-readable name, e.g. ``BoardPosition(2, 0)`` -> ``'a3'``."""
    return f"{column_to_file(pos.column)}{pos.row + 1}"
