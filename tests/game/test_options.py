"""Tests for GameOptions."""

import dataclasses

import pytest

from draughts.game.options import CaptureRule, GameOptions


class TestGameOptions:
    def test_defaults(self) -> None:
        options = GameOptions()
        assert options.board_size == 8
        assert options.rows_per_player == 3
        assert options.capture_rule == CaptureRule.ALLOW_PARTIAL

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            GameOptions().board_size = 10  # type: ignore[misc]

    def test_larger_board(self) -> None:
        options = GameOptions(board_size=10, rows_per_player=4)
        assert options.board_size == 10

    @pytest.mark.parametrize(
        "kwargs, match",
        [
            ({"board_size": 1}, "Board size"),
            ({"rows_per_player": 0}, "Rows per player"),
            ({"board_size": 6, "rows_per_player": 4}, "do not fit"),
        ],
    )
    def test_invalid(self, kwargs: dict[str, int], match: str) -> None:
        with pytest.raises(ValueError, match=match):
            GameOptions(**kwargs)
