"""Tests for coordinates and offset helpers."""

from draughts.core.types import (
    KING_DIRECTIONS,
    MAN_SIDE_STEPS,
    BoardPosition,
    is_diagonal_step,
    midpoint,
)


class TestBoardPosition:
    def test_equality_and_hash(self) -> None:
        assert BoardPosition(2, 3) == BoardPosition(2, 3)
        assert len({BoardPosition(2, 3), BoardPosition(2, 3), BoardPosition(3, 2)}) == 2

    def test_ordering_is_row_major(self) -> None:
        assert BoardPosition(1, 7) < BoardPosition(2, 0)
        assert BoardPosition(2, 0) < BoardPosition(2, 1)

    def test_offset(self) -> None:
        assert BoardPosition(4, 3).offset(1, -1) == BoardPosition(5, 2)

    def test_offset_may_leave_board(self) -> None:
        assert BoardPosition(0, 0).offset(-1, -1) == BoardPosition(-1, -1)

    def test_str(self) -> None:
        assert str(BoardPosition(4, 1)) == "(4, 1)"


class TestHelpers:
    def test_midpoint(self) -> None:
        assert midpoint(BoardPosition(3, 3), BoardPosition(5, 5)) == BoardPosition(4, 4)
        assert midpoint(BoardPosition(6, 3), BoardPosition(4, 1)) == BoardPosition(5, 2)

    def test_diagonal_step(self) -> None:
        assert is_diagonal_step(BoardPosition(2, 0), BoardPosition(3, 1))
        assert is_diagonal_step(BoardPosition(3, 1), BoardPosition(2, 0))
        assert not is_diagonal_step(BoardPosition(2, 0), BoardPosition(3, 0))
        assert not is_diagonal_step(BoardPosition(2, 0), BoardPosition(4, 2))

    def test_direction_order(self) -> None:
        assert KING_DIRECTIONS == ((-1, -1), (-1, 1), (1, -1), (1, 1))
        assert MAN_SIDE_STEPS == (-1, 1)
