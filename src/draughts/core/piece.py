"""Player, piece and tile value objects."""

from __future__ import annotations

from dataclasses import dataclass

from draughts.core.enums import PieceKind


@dataclass(frozen=True, slots=True)
class Player:
    """Opaque player identity."""

    id: int


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object for a piece on the board."""

    player_id: int
    kind: PieceKind = PieceKind.MAN

    @classmethod
    def man(cls, player: Player) -> Piece:
        return cls(player.id, PieceKind.MAN)

    @classmethod
    def king(cls, player: Player) -> Piece:
        return cls(player.id, PieceKind.KING)

    @property
    def is_king(self) -> bool:
        return self.kind == PieceKind.KING

    def belongs_to(self, player: Player) -> bool:
        return self.player_id == player.id

    def crowned(self) -> Piece:
        """The king this piece becomes on promotion. Kings stay kings."""
        if self.is_king:
            return self
        return Piece(self.player_id, PieceKind.KING)


@dataclass(frozen=True, slots=True)
class Tile:
    """A board square, either empty or holding exactly one piece."""

    piece: Piece | None = None

    @classmethod
    def occupied(cls, piece: Piece) -> Tile:
        return cls(piece)

    @property
    def is_empty(self) -> bool:
        return self.piece is None


EMPTY_TILE = Tile()
