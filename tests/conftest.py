"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from draughts.core.board import Board
from draughts.core.piece import Player


@pytest.fixture
def red() -> Player:
    return Player(1)


@pytest.fixture
def black() -> Player:
    return Player(2)


@pytest.fixture
def empty_board() -> Board:
    return Board()
