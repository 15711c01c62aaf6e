"""Side and piece-kind enumerations used by decoded board snapshots."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Owner of a piece; also the side to move in a :class:`Position`.

    Notation letter case decides it: uppercase is White, lowercase Black.
    """

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """What a notation letter names, independent of its case."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()
