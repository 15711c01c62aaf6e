"""Position — decoded board snapshot (pieces + game-state scalars)."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.piece import Piece
from chessgrid.core.types import Square


@dataclass(frozen=True, slots=True)
class CastlingRights:
    """Four independent castling flags."""

    white_kingside: bool = False
    white_queenside: bool = False
    black_kingside: bool = False
    black_queenside: bool = False

    @classmethod
    def none(cls) -> CastlingRights:
        return cls()

    @classmethod
    def all(cls) -> CastlingRights:
        return cls(True, True, True, True)

    @classmethod
    def from_field(cls, text: str) -> CastlingRights:
        """Read the castling field, e.g. 'Kq' or '-'.

        Each flag is a plain membership test; unknown characters are ignored.
        """
        return cls(
            white_kingside="K" in text,
            white_queenside="Q" in text,
            black_kingside="k" in text,
            black_queenside="q" in text,
        )

    @property
    def any(self) -> bool:
        return (
            self.white_kingside
            or self.white_queenside
            or self.black_kingside
            or self.black_queenside
        )

    def as_tuple(self) -> tuple[bool, bool, bool, bool]:
        return (
            self.white_kingside,
            self.white_queenside,
            self.black_kingside,
            self.black_queenside,
        )


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable board snapshot produced by a single decode call.

    ``pieces`` follows row-major scan order of the notation; the order has
    no meaning beyond that. ``en_passant`` is always ``None`` for decoded
    positions.
    """

    pieces: tuple[Piece, ...]
    active_color: Color = Color.WHITE
    castling_rights: CastlingRights = CastlingRights()
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    def __post_init__(self) -> None:
        if self.halfmove_clock < 0:
            raise ValueError(f"Negative halfmove clock: {self.halfmove_clock}")
        if self.fullmove_number < 1:
            raise ValueError(f"Fullmove number below 1: {self.fullmove_number}")

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        """First piece standing on *sq*, or ``None``."""
        for piece in self.pieces:
            if piece.position == sq:
                return piece
        return None

    def pieces_of(self, color: Color) -> tuple[Piece, ...]:
        return tuple(p for p in self.pieces if p.color == color)

    def pieces_by_kind(self, color: Color, kind: PieceKind) -> tuple[Piece, ...]:
        """*color*'s pieces of *kind*, in scan order."""
        return tuple(p for p in self.pieces if p.color == color and p.kind == kind)

    def occupied_squares(self) -> frozenset[Square]:
        return frozenset(p.position for p in self.pieces)

    def __repr__(self) -> str:
        return (
            f"Position({len(self.pieces)} pieces, {self.active_color}, "
            f"halfmove={self.halfmove_clock}, fullmove={self.fullmove_number})"
        )
