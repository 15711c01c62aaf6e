"""Notation package: board-notation decoding."""

from chessgrid.core.notation.errors import (
    BoardShapeError,
    FenFormatError,
    InvalidPieceError,
    NotationError,
    NumericFieldError,
)
from chessgrid.core.notation.fen import (
    STARTING_FEN,
    DecoderOptions,
    decode,
    position_from_fen,
)

__all__ = [
    "STARTING_FEN",
    "DecoderOptions",
    "decode",
    "position_from_fen",
    "NotationError",
    "FenFormatError",
    "InvalidPieceError",
    "BoardShapeError",
    "NumericFieldError",
]
