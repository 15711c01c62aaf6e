"""chessgrid — board-notation decoding and grid geometry for chess tooling."""

from chessgrid.core import (
    STARTING_FEN,
    CastlingRights,
    Color,
    DecoderOptions,
    Piece,
    PieceKind,
    Position,
    decode,
    position_from_fen,
)

__version__ = "0.1.0"

__all__ = [
    "STARTING_FEN",
    "CastlingRights",
    "Color",
    "DecoderOptions",
    "Piece",
    "PieceKind",
    "Position",
    "decode",
    "position_from_fen",
]
