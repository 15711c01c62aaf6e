"""Core domain layer — board snapshot types and notation decoding.

Quick start::

    from chessgrid.core import Color, STARTING_FEN, decode

    pos = decode(STARTING_FEN)
    assert pos.active_color == Color.WHITE
    for piece in pos.pieces_of(Color.BLACK):
        print(piece.position, piece.kind)
"""

from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.notation import (
    STARTING_FEN,
    BoardShapeError,
    DecoderOptions,
    FenFormatError,
    InvalidPieceError,
    NotationError,
    NumericFieldError,
    decode,
    position_from_fen,
)
from chessgrid.core.piece import Piece, classify
from chessgrid.core.position import CastlingRights, Position
from chessgrid.core.types import (
    BOARD_SIZE,
    Square,
    column_of,
    is_valid_square,
    make_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceKind",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "column_of",
    "is_valid_square",
    "make_square",
    "row_of",
    "square_name",
    # Domain objects
    "CastlingRights",
    "Piece",
    "Position",
    "classify",
    # Notation
    "STARTING_FEN",
    "DecoderOptions",
    "decode",
    "position_from_fen",
    # Errors
    "NotationError",
    "FenFormatError",
    "InvalidPieceError",
    "BoardShapeError",
    "NumericFieldError",
]
