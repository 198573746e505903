"""Tests for game results and move history records."""

from draughts.core.piece import Player
from draughts.core.types import BoardPosition as P
from draughts.game.state import IN_PROGRESS, GameState, MoveError, MoveRecord


class TestGameState:
    def test_in_progress(self) -> None:
        assert not IN_PROGRESS.is_over
        assert IN_PROGRESS.winner is None
        assert GameState() == IN_PROGRESS

    def test_game_over(self) -> None:
        state = GameState.game_over(Player(2))
        assert state.is_over
        assert state.winner == Player(2)
        assert state != GameState.game_over(Player(1))


class TestMoveError:
    def test_messages(self) -> None:
        assert MoveError.INVALID_MOVE.message == "Illegal move"
        assert MoveError.SHOULD_HAVE_JUMPED.message == "Must take jump"


class TestMoveRecord:
    def test_capture_flag(self) -> None:
        simple = MoveRecord(Player(1), (P(2, 0), P(3, 1)))
        jump = MoveRecord(Player(1), (P(3, 3), P(5, 5)), captured=(P(4, 4),))
        assert not simple.is_capture
        assert jump.is_capture
