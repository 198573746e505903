"""Board - a rectangular grid of tiles."""

from __future__ import annotations

from collections.abc import Iterator

from draughts.core.piece import EMPTY_TILE, Piece, Player, Tile
from draughts.core.types import BoardPosition

DEFAULT_SIZE = 8
DEFAULT_ROWS_PER_PLAYER = 3


class Board:
    """Mutable ``rows x columns`` board stored as a flat, row-major tile list.

    Every in-range ``(row, column)`` resolves to exactly one tile.
    Out-of-range access is a caller bug and raises :class:`IndexError`.
    """

    __slots__ = ("_rows", "_columns", "_tiles")

    def __init__(
        self, number_rows: int = DEFAULT_SIZE, number_columns: int = DEFAULT_SIZE
    ) -> None:
        if number_rows < 1 or number_columns < 1:
            raise ValueError(
                f"Board dimensions must be positive, got {number_rows}x{number_columns}"
            )
        self._rows = number_rows
        self._columns = number_columns
        self._tiles: list[Tile] = [EMPTY_TILE] * (number_rows * number_columns)

    @property
    def number_rows(self) -> int:
        return self._rows

    @property
    def number_columns(self) -> int:
        return self._columns

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._columns

    def _index(self, row: int, col: int) -> int:
        if not self.contains(row, col):
            raise IndexError(
                f"Board position ({row}, {col}) is outside the "
                f"{self._rows}x{self._columns} board"
            )
        return row * self._columns + col

    # -- Element access -----------------------------------------------------

    def get_tile(self, row: int, col: int) -> Tile:
        return self._tiles[self._index(row, col)]

    def set_tile(self, row: int, col: int, tile: Tile) -> None:
        self._tiles[self._index(row, col)] = tile

    def clear_tile(self, row: int, col: int) -> None:
        self._tiles[self._index(row, col)] = EMPTY_TILE

    def swap_tiles(self, row1: int, col1: int, row2: int, col2: int) -> None:
        """Exchange two tiles; both positions are checked before either moves."""
        first = self._index(row1, col1)
        second = self._index(row2, col2)
        self._tiles[first], self._tiles[second] = self._tiles[second], self._tiles[first]

    def __getitem__(self, pos: BoardPosition) -> Piece | None:
        return self.get_tile(pos.row, pos.column).piece

    def is_empty(self, row: int, col: int) -> bool:
        return self.get_tile(row, col).is_empty

    # -- Query helpers ------------------------------------------------------

    def positions(self) -> Iterator[BoardPosition]:
        """Every position, row by row from row 0."""
        for row in range(self._rows):
            for col in range(self._columns):
                yield BoardPosition(row, col)

    def pieces(self, player_id: int) -> list[tuple[BoardPosition, Piece]]:
        """``(position, piece)`` for every piece owned by *player_id*."""
        owned: list[tuple[BoardPosition, Piece]] = []
        for pos in self.positions():
            piece = self[pos]
            if piece is not None and piece.player_id == player_id:
                owned.append((pos, piece))
        return owned

    def piece_count(self, player_id: int) -> int:
        return len(self.pieces(player_id))

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board(self._rows, self._columns)
        b._tiles = self._tiles.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(
        cls,
        player1: Player,
        player2: Player,
        size: int = DEFAULT_SIZE,
        rows_per_player: int = DEFAULT_ROWS_PER_PLAYER,
    ) -> Board:
        """Standard starting layout.

        *player1* fills the dark squares (``row + col`` even) of the first
        *rows_per_player* rows, *player2* those of the last ones.
        """
        if 2 * rows_per_player > size:
            raise ValueError(
                f"{rows_per_player} rows per player do not fit on a {size}x{size} board"
            )
        b = cls(size, size)
        for row in range(size):
            if row < rows_per_player:
                owner = player1
            elif row >= size - rows_per_player:
                owner = player2
            else:
                continue
            for col in range(size):
                if (row + col) % 2 == 0:
                    b.set_tile(row, col, Tile.occupied(Piece.man(owner)))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._columns == other._columns
            and self._tiles == other._tiles
        )

    def __repr__(self) -> str:
        from draughts.core.notation.diagram import format_board

        return format_board(self)
