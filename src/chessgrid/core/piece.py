"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.types import Square

# Notation letter ↔ (Color, PieceKind)
_CHAR_MAP: dict[str, tuple[Color, PieceKind]] = {
    "P": (Color.WHITE, PieceKind.PAWN),
    "N": (Color.WHITE, PieceKind.KNIGHT),
    "B": (Color.WHITE, PieceKind.BISHOP),
    "R": (Color.WHITE, PieceKind.ROOK),
    "Q": (Color.WHITE, PieceKind.QUEEN),
    "K": (Color.WHITE, PieceKind.KING),
    "p": (Color.BLACK, PieceKind.PAWN),
    "n": (Color.BLACK, PieceKind.KNIGHT),
    "b": (Color.BLACK, PieceKind.BISHOP),
    "r": (Color.BLACK, PieceKind.ROOK),
    "q": (Color.BLACK, PieceKind.QUEEN),
    "k": (Color.BLACK, PieceKind.KING),
}

_NOTATION_CHARS: dict[tuple[Color, PieceKind], str] = {
    v: k for k, v in _CHAR_MAP.items()
}

PIECE_CHARS = frozenset(_CHAR_MAP)


def classify(char: str) -> tuple[PieceKind, Color]:
    """Map a notation letter to ``(kind, color)``, e.g. 'n' → black knight."""
    try:
        color, kind = _CHAR_MAP[char]
    except KeyError:
        raise ValueError(f"Invalid piece character: {char!r}") from None
    return kind, color


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable record of one piece on a decoded board.

    ``alive`` and ``moved`` are carried for move-execution code; nothing in
    this package changes them after creation.
    """

    position: Square
    color: Color
    kind: PieceKind
    alive: bool = True
    moved: bool = False

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Notation letter (uppercase = white, lowercase = black)."""
        return _NOTATION_CHARS[(self.color, self.kind)]

    @classmethod
    def from_char(cls, char: str, position: Square) -> Piece:
        """Create piece from a notation letter, e.g. 'N' → white knight."""
        kind, color = classify(char)
        return cls(position, color, kind)
