"""Game - the turn-based state machine of a draughts match.

Owns the board, both players and their directions, whose turn it is and
the moves available to that side. Available moves are recomputed in full
after construction and after every applied move.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from draughts.core.board import Board
from draughts.core.enums import Direction
from draughts.core.move import JumpMove, SimpleMove
from draughts.core.move_generator import (
    jump_moves_for_king,
    jump_moves_for_man,
    simple_moves_for_king,
    simple_moves_for_man,
)
from draughts.core.piece import Piece, Player, Tile
from draughts.core.types import BoardPosition, is_diagonal_step, midpoint
from draughts.game.options import CaptureRule, GameOptions
from draughts.game.state import IN_PROGRESS, GameState, MoveError, MoveRecord

_LOGGER = logging.getLogger(__name__)

MoveResult = GameState | MoveError


@dataclass(frozen=True, slots=True)
class PlayerInfo:
    player: Player
    direction: Direction


class Game:
    """A two-player draughts game.

    Player 1 moves first, towards increasing rows; player 2 moves towards
    decreasing rows. Moves are validated against the cached legal moves of
    the side to move and are either applied whole or rejected with a
    :class:`MoveError` and no board change.
    """

    __slots__ = (
        "_players",
        "_board",
        "_options",
        "_current_index",
        "_available_simple_moves",
        "_available_jump_moves",
        "_state",
        "_history",
    )

    def __init__(self, options: GameOptions | None = None) -> None:
        options = options or GameOptions()
        player1, player2 = _create_two_players()
        board = Board.initial(
            player1, player2, options.board_size, options.rows_per_player
        )
        self._setup(board, player1, player2, options)

    @classmethod
    def from_board(
        cls,
        board: Board,
        player1: Player | None = None,
        player2: Player | None = None,
        options: GameOptions | None = None,
    ) -> Game:
        """Start a game from an arbitrary layout; *player1* moves first."""
        default1, default2 = _create_two_players()
        game = cls.__new__(cls)
        game._setup(
            board, player1 or default1, player2 or default2, options or GameOptions()
        )
        return game

    @classmethod
    def with_piece_positions(
        cls,
        player1_positions: Sequence[BoardPosition],
        player2_positions: Sequence[BoardPosition],
        options: GameOptions | None = None,
    ) -> Game:
        """Start a game with men at the given positions only."""
        options = options or GameOptions()
        player1, player2 = _create_two_players()
        board = Board(options.board_size, options.board_size)
        _place_men(board, player1, player1_positions)
        _place_men(board, player2, player2_positions)
        return cls.from_board(board, player1, player2, options)

    def _setup(
        self, board: Board, player1: Player, player2: Player, options: GameOptions
    ) -> None:
        if player1.id == player2.id:
            raise ValueError(f"Players must have distinct ids, both are {player1.id}")
        self._players = (
            PlayerInfo(player1, Direction.INCREASING_RANK),
            PlayerInfo(player2, Direction.DECREASING_RANK),
        )
        self._board = board
        self._options = options
        self._current_index = 0
        self._available_simple_moves: list[SimpleMove] = []
        self._available_jump_moves: list[JumpMove] = []
        self._state = IN_PROGRESS
        self._history: list[MoveRecord] = []
        self._find_available_moves()

    # -- Properties ---------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def options(self) -> GameOptions:
        return self._options

    @property
    def current_player(self) -> Player:
        return self._players[self._current_index].player

    @property
    def current_direction(self) -> Direction:
        return self._players[self._current_index].direction

    @property
    def players(self) -> tuple[Player, Player]:
        return (self._players[0].player, self._players[1].player)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def available_simple_moves(self) -> tuple[SimpleMove, ...]:
        return tuple(self._available_simple_moves)

    @property
    def available_jump_moves(self) -> tuple[JumpMove, ...]:
        """Capture trees with at least one capture, one per capturing piece."""
        return tuple(self._available_jump_moves)

    @property
    def must_jump(self) -> bool:
        return bool(self._available_jump_moves)

    @property
    def move_history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    # -- Move application ---------------------------------------------------

    def apply_simple_move(self, move: SimpleMove) -> MoveResult:
        if self._available_jump_moves:
            _LOGGER.debug("Rejected %s: a capture is available", move)
            return MoveError.SHOULD_HAVE_JUMPED
        if move not in self._available_simple_moves:
            _LOGGER.debug("Rejected %s: not a legal move", move)
            return MoveError.INVALID_MOVE

        mover = self.current_player
        self._board.swap_tiles(
            move.from_pos.row, move.from_pos.column, move.to_pos.row, move.to_pos.column
        )
        return self._finish_move(mover, (move.from_pos, move.to_pos), ())

    def apply_jump_move(self, path: Sequence[BoardPosition]) -> MoveResult:
        """Apply a capture path from the piece's start to its final landing.

        Under :attr:`CaptureRule.ALLOW_PARTIAL` the path may stop before
        the end of a longer sequence.
        """
        if not self._is_available_jump(path):
            _LOGGER.debug("Rejected jump path %s", [str(p) for p in path])
            return MoveError.INVALID_MOVE

        mover = self.current_player
        start = path[0]
        final = path[-1]
        # The jumping piece never stands on an intermediate landing square.
        self._board.swap_tiles(start.row, start.column, final.row, final.column)

        captured = tuple(midpoint(a, b) for a, b in zip(path, path[1:]))
        for pos in captured:
            self._board.clear_tile(pos.row, pos.column)
        return self._finish_move(mover, tuple(path), captured)

    def apply_positions(self, positions: Sequence[BoardPosition]) -> MoveResult:
        """Apply positions as typed by a player.

        Two positions one diagonal step apart are a simple move; anything
        else is treated as a capture path.
        """
        if len(positions) == 2 and is_diagonal_step(positions[0], positions[1]):
            return self.apply_simple_move(SimpleMove(positions[0], positions[1]))
        return self.apply_jump_move(positions)

    def _is_available_jump(self, path: Sequence[BoardPosition]) -> bool:
        if self._options.capture_rule == CaptureRule.REQUIRE_COMPLETE:
            return any(
                tree.contains_complete_sequence(path)
                for tree in self._available_jump_moves
            )
        return any(
            tree.contains_jump_sequence(path) for tree in self._available_jump_moves
        )

    # -- Turn bookkeeping ---------------------------------------------------

    def _finish_move(
        self,
        mover: Player,
        path: tuple[BoardPosition, ...],
        captured: tuple[BoardPosition, ...],
    ) -> GameState:
        final = path[-1]
        promoted = self._check_for_coronation(final.row, final.column)
        self._history.append(MoveRecord(mover, path, captured, promoted))
        _LOGGER.debug(
            "Player %d moved %s capturing %d piece(s)",
            mover.id,
            " -> ".join(str(p) for p in path),
            len(captured),
        )

        self._select_next_player()
        self._find_available_moves()

        if self._is_game_over():
            self._state = GameState.game_over(mover)
            _LOGGER.info("Game over: player %d wins", mover.id)
        else:
            self._state = IN_PROGRESS
        return self._state

    def _check_for_coronation(self, row: int, col: int) -> bool:
        piece = self._board.get_tile(row, col).piece
        assert piece is not None, f"no piece at ({row}, {col}) after a move"
        if piece.is_king:
            return False
        final_row = self.current_direction.final_row(self._board.number_rows)
        if row != final_row:
            return False
        self._board.set_tile(row, col, Tile.occupied(piece.crowned()))
        _LOGGER.debug("Player %d crowned a king at (%d, %d)", piece.player_id, row, col)
        return True

    def _select_next_player(self) -> None:
        # two-player toggle
        self._current_index = 1 - self._current_index

    def _is_game_over(self) -> bool:
        # Valid once the moves of the side to move are computed: no moves
        # means no pieces left or every piece blocked.
        return not self._available_simple_moves and not self._available_jump_moves

    def _find_available_moves(self) -> None:
        self._available_simple_moves = self._find_available_simple_moves()
        self._available_jump_moves = self._find_available_jump_moves()

    def _own_pieces(self) -> list[tuple[BoardPosition, Piece]]:
        return self._board.pieces(self.current_player.id)

    def _find_available_simple_moves(self) -> list[SimpleMove]:
        moves: list[SimpleMove] = []
        direction = self.current_direction
        for pos, piece in self._own_pieces():
            if piece.is_king:
                moves.extend(simple_moves_for_king(self._board, pos.row, pos.column))
            else:
                moves.extend(
                    simple_moves_for_man(self._board, direction, pos.row, pos.column)
                )
        return moves

    def _find_available_jump_moves(self) -> list[JumpMove]:
        trees: list[JumpMove] = []
        player = self.current_player
        direction = self.current_direction
        for pos, piece in self._own_pieces():
            if piece.is_king:
                tree = jump_moves_for_king(self._board, player, pos.row, pos.column)
            else:
                tree = jump_moves_for_man(
                    self._board, player, direction, pos.row, pos.column
                )
            if not tree.is_leaf:
                trees.append(tree)
        return trees


def _create_two_players() -> tuple[Player, Player]:
    return Player(1), Player(2)


def _place_men(board: Board, player: Player, positions: Sequence[BoardPosition]) -> None:
    for pos in positions:
        if not board.is_empty(pos.row, pos.column):
            raise ValueError(f"Position {pos} is occupied twice")
        board.set_tile(pos.row, pos.column, Tile.occupied(Piece.man(player)))
