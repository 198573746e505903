"""Console entry point: play a game of draughts in the terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from draughts.core.notation import InputError, format_board, parse_move
from draughts.game import CaptureRule, Game, GameOptions, GameState, MoveError

_LOGGER = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset({"q", "Q"})

_PLAYER_NAMES = {1: "Red", 2: "Black"}

_CAPTURE_RULES = {
    "partial": CaptureRule.ALLOW_PARTIAL,
    "complete": CaptureRule.REQUIRE_COMPLETE,
}


def player_name(player_id: int) -> str:
    return _PLAYER_NAMES.get(player_id, f"Player {player_id}")


def run_session(
    game: Game,
    read_line: Callable[[str], str] | None = None,
    out: TextIO | None = None,
) -> GameState:
    """Read moves until the game ends or the player quits.

    Returns the last game state; it is still in progress if the player quit
    or input ran out.
    """
    if read_line is None:
        read_line = input
    if out is None:
        out = sys.stdout
    out.write("Welcome to Draughts!\n")
    out.write(format_board(game.board))

    while True:
        try:
            line = read_line(f"\n{player_name(game.current_player.id)}'s move: ").strip()
        except EOFError:
            _LOGGER.debug("Input closed, leaving the game")
            return game.state

        if line in QUIT_COMMANDS:
            out.write("\nGiving up so soon?\n")
            return game.state

        try:
            positions = parse_move(line)
        except InputError as exc:
            if exc.too_few_positions:
                out.write("\n *** You must specify at least two board positions\n")
            for error in exc.token_errors:
                out.write(f"\n *** {error.message}\n")
        else:
            result = game.apply_positions(positions)
            if isinstance(result, MoveError):
                out.write(f"\n *** {result.message}\n")
            elif result.is_over:
                assert result.winner is not None
                out.write(f"\nGame over! {player_name(result.winner.id)} won!\n")
                return result

        out.write("\n")
        out.write(format_board(game.board))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="draughts",
        description="Two-player draughts in the terminal",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--capture-rule",
        choices=sorted(_CAPTURE_RULES),
        default="partial",
        help="'partial' lets a multi-jump stop early, 'complete' requires "
        "every available capture in the sequence",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Launch a console game."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    game = Game(GameOptions(capture_rule=_CAPTURE_RULES[args.capture_rule]))
    run_session(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())
