"""Move value objects: single steps and capture trees."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from draughts.core.types import BoardPosition


@dataclass(frozen=True, slots=True)
class SimpleMove:
    """A one-step diagonal move into an empty tile."""

    from_pos: BoardPosition
    to_pos: BoardPosition

    @classmethod
    def from_coords(
        cls, from_row: int, from_col: int, to_row: int, to_col: int
    ) -> SimpleMove:
        return cls(BoardPosition(from_row, from_col), BoardPosition(to_row, to_col))

    def __str__(self) -> str:
        return f"{self.from_pos} -> {self.to_pos}"


@dataclass(slots=True)
class JumpMove:
    """Node of a capture tree.

    The root is labelled with the jumping piece's starting position; every
    child is a landing square reachable by one more capture. Any walk from
    the root through children is a legal capture sequence.
    """

    position: BoardPosition
    jumps: list[JumpMove] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.jumps

    def contains_jump_sequence(self, path: Sequence[BoardPosition]) -> bool:
        """Whether *path* is a root-to-node walk of at least one capture.

        The walk may stop at any node, not only at a leaf.
        """
        return self._walk(path) is not None

    def contains_complete_sequence(self, path: Sequence[BoardPosition]) -> bool:
        """Whether *path* is a root-to-leaf walk, i.e. a maximal capture."""
        node = self._walk(path)
        return node is not None and node.is_leaf

    def _walk(self, path: Sequence[BoardPosition]) -> JumpMove | None:
        if len(path) < 2 or path[0] != self.position:
            return None
        node = self
        for pos in path[1:]:
            for child in node.jumps:
                if child.position == pos:
                    node = child
                    break
            else:
                return None
        return node

    def sequences(self) -> Iterator[list[BoardPosition]]:
        """Every root-to-leaf path, depth first in child order."""
        if self.is_leaf:
            yield [self.position]
            return
        for child in self.jumps:
            for tail in child.sequences():
                yield [self.position, *tail]

    def depth(self) -> int:
        """Number of captures along the longest sequence."""
        if self.is_leaf:
            return 0
        return 1 + max(child.depth() for child in self.jumps)
