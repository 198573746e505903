"""Tests for Board."""

import pytest

from draughts.core.board import Board
from draughts.core.piece import EMPTY_TILE, Piece, Player, Tile
from draughts.core.types import BoardPosition

RED = Player(1)
BLACK = Player(2)


class TestBoardInitial:
    def test_dimensions(self) -> None:
        board = Board.initial(RED, BLACK)
        assert board.number_rows == 8
        assert board.number_columns == 8

    def test_piece_counts(self) -> None:
        board = Board.initial(RED, BLACK)
        assert board.piece_count(RED.id) == 12
        assert board.piece_count(BLACK.id) == 12

    def test_red_on_low_rows(self) -> None:
        board = Board.initial(RED, BLACK)
        for pos, piece in board.pieces(RED.id):
            assert pos.row <= 2
            assert (pos.row + pos.column) % 2 == 0
            assert piece == Piece.man(RED)

    def test_black_on_high_rows(self, red: Player, black: Player) -> None:
        board = Board.initial(red, black)
        for pos, piece in board.pieces(black.id):
            assert pos.row >= 5
            assert (pos.row + pos.column) % 2 == 0
            assert piece == Piece.man(black)

    def test_known_squares(self) -> None:
        board = Board.initial(RED, BLACK)
        assert board[BoardPosition(2, 0)] == Piece.man(RED)
        assert board[BoardPosition(5, 1)] == Piece.man(BLACK)
        assert board[BoardPosition(0, 1)] is None

    def test_empty_middle(self) -> None:
        board = Board.initial(RED, BLACK)
        for row in (3, 4):
            for col in range(8):
                assert board.is_empty(row, col)

    def test_custom_size(self) -> None:
        board = Board.initial(RED, BLACK, size=10, rows_per_player=4)
        assert board.number_rows == 10
        assert board.piece_count(RED.id) == 20
        assert board.piece_count(BLACK.id) == 20

    def test_armies_must_fit(self) -> None:
        with pytest.raises(ValueError, match="do not fit"):
            Board.initial(RED, BLACK, size=4, rows_per_player=3)


class TestBoardOperations:
    def test_new_board_is_empty(self) -> None:
        board = Board(3, 5)
        assert board.number_rows == 3
        assert board.number_columns == 5
        assert all(board[pos] is None for pos in board.positions())

    def test_positions_row_major(self) -> None:
        board = Board(2, 2)
        assert list(board.positions()) == [
            BoardPosition(0, 0),
            BoardPosition(0, 1),
            BoardPosition(1, 0),
            BoardPosition(1, 1),
        ]

    def test_set_and_get(self, empty_board: Board, red: Player) -> None:
        tile = Tile.occupied(Piece.king(red))
        empty_board.set_tile(4, 3, tile)
        assert empty_board.get_tile(4, 3) == tile
        assert empty_board[BoardPosition(4, 3)] == Piece.king(red)

    def test_clear(self) -> None:
        board = Board.initial(RED, BLACK)
        board.clear_tile(2, 0)
        assert board.get_tile(2, 0) == EMPTY_TILE

    def test_swap(self, empty_board: Board, red: Player) -> None:
        empty_board.set_tile(2, 0, Tile.occupied(Piece.man(red)))
        empty_board.swap_tiles(2, 0, 3, 1)
        assert empty_board.is_empty(2, 0)
        assert empty_board[BoardPosition(3, 1)] == Piece.man(red)

    def test_swap_same_square(self) -> None:
        board = Board()
        board.set_tile(4, 1, Tile.occupied(Piece.king(RED)))
        board.swap_tiles(4, 1, 4, 1)
        assert board[BoardPosition(4, 1)] == Piece.king(RED)

    def test_copy_independence(self) -> None:
        board = Board.initial(RED, BLACK)
        copy = board.copy()
        assert board == copy
        copy.clear_tile(2, 0)
        assert board != copy
        assert board[BoardPosition(2, 0)] == Piece.man(RED)

    def test_different_sizes_not_equal(self) -> None:
        assert Board(3, 3) != Board(3, 4)

    def test_repr_shows_diagram(self) -> None:
        text = repr(Board.initial(RED, BLACK))
        assert "A  B  C  D  E  F  G  H" in text
        assert "[r]" in text and "[b]" in text


class TestBoardContract:
    @pytest.mark.parametrize("row, col", [(8, 0), (0, 8), (-1, 0), (0, -1)])
    def test_get_out_of_range_raises(
        self, empty_board: Board, row: int, col: int
    ) -> None:
        assert not empty_board.contains(row, col)
        with pytest.raises(IndexError, match="outside"):
            empty_board.get_tile(row, col)

    def test_set_out_of_range_raises(self) -> None:
        with pytest.raises(IndexError):
            Board().set_tile(8, 8, EMPTY_TILE)

    def test_swap_out_of_range_leaves_board(self) -> None:
        board = Board()
        board.set_tile(7, 7, Tile.occupied(Piece.man(RED)))
        with pytest.raises(IndexError):
            board.swap_tiles(7, 7, 8, 8)
        assert board[BoardPosition(7, 7)] == Piece.man(RED)

    def test_non_positive_dimensions_raise(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            Board(0, 8)
