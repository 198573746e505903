"""Two-player draughts engine: board model, move generation, game rules."""

__version__ = "0.1.0"
