"""Board-notation (FEN) decoding."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chessgrid.core.enums import Color
from chessgrid.core.notation.errors import (
    BoardShapeError,
    FenFormatError,
    InvalidPieceError,
    NotationError,
    NumericFieldError,
)
from chessgrid.core.piece import PIECE_CHARS, Piece
from chessgrid.core.position import CastlingRights, Position
from chessgrid.core.types import BOARD_SIZE, make_square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_FIELD_NAMES = (
    "placement",
    "active-color",
    "castling",
    "en-passant",
    "halfmove-clock",
    "fullmove-number",
)
_ROW_SEPARATOR = "/"
_RUN_DIGITS = "12345678"


@dataclass(frozen=True, slots=True)
class DecoderOptions:
    """Decoder configuration.

    Args:
        strict: Require exactly ``board_size`` rows of ``board_size`` cells.
        board_size: Expected rows/columns in strict mode.
        log_pieces: Emit the decoded piece list at DEBUG level.
    """

    strict: bool = True
    board_size: int = BOARD_SIZE
    log_pieces: bool = True

    def __post_init__(self) -> None:
        if not (1 <= self.board_size <= 8):
            raise ValueError(f"Unsupported board size: {self.board_size}")

    @classmethod
    def permissive(cls) -> DecoderOptions:
        """Accept any row count and row width."""
        return cls(strict=False)


_DEFAULT_OPTIONS = DecoderOptions()


def _check_row_width(
    cells: int, row: int, placement: str, options: DecoderOptions
) -> None:
    if options.strict and cells != options.board_size:
        raise BoardShapeError(
            f"Invalid FEN row width ({cells} != {options.board_size}) "
            f"in row {row}: {placement!r}",
            text=placement,
            row=row,
        )


def _decode_placement(placement: str, options: DecoderOptions) -> list[Piece]:
    """Expand run-length digits and place pieces in one left-to-right scan."""
    pieces: list[Piece] = []
    row = 0
    column = 0
    for offset, ch in enumerate(placement):
        if ch == _ROW_SEPARATOR:
            _check_row_width(column, row, placement, options)
            row += 1
            column = 0
        elif ch in _RUN_DIGITS:
            column += int(ch)
        elif ch in PIECE_CHARS:
            pieces.append(Piece.from_char(ch, make_square(row, column)))
            column += 1
        else:
            raise InvalidPieceError(
                f"Invalid FEN piece character {ch!r} at offset {offset}: {placement!r}",
                text=placement,
                char=ch,
                offset=offset,
            )
    _check_row_width(column, row, placement, options)

    rows = row + 1
    if options.strict and rows != options.board_size:
        raise BoardShapeError(
            f"Invalid FEN board (must contain {options.board_size} rows, "
            f"got {rows}): {placement!r}",
            text=placement,
            row=row,
        )
    return pieces


def _parse_counter(value: str, field: str, minimum: int) -> int:
    # ``int()`` alone would also take signs, underscores and non-ASCII digits.
    if not (value.isascii() and value.isdigit()):
        raise NumericFieldError(
            f"Invalid FEN {field} field: {value!r}", field=field, text=value
        )
    number = int(value)
    if number < minimum:
        raise NumericFieldError(
            f"Invalid FEN {field} field (must be >= {minimum}): {value!r}",
            field=field,
            text=value,
        )
    return number


def decode(
    text: str,
    options: DecoderOptions | None = None,
    *,
    logger: logging.Logger | None = None,
) -> Position:
    """Decode six-field board notation into a :class:`Position`.

    The active-color field is read permissively (anything but ``"w"`` is
    Black) and the en-passant field is ignored: ``en_passant`` is always
    ``None``.

    Raises:
        FenFormatError: the input is not exactly six space-separated fields.
        InvalidPieceError: the placement holds a character outside
            ``PNBRQKpnbrqk``, ``1``-``8`` and ``/``.
        BoardShapeError: strict mode only, wrong row count or width.
        NumericFieldError: a clock field is not a valid counter.
    """
    opts = options if options is not None else _DEFAULT_OPTIONS
    log = logger if logger is not None else _LOGGER

    try:
        position = _decode(text, opts)
    except NotationError as exc:
        log.debug("FEN decode failed (%s field): %s", exc.field, exc)
        raise

    if opts.log_pieces:
        log.debug("Decoded %d pieces: %s", len(position.pieces), position.pieces)
    return position


def _decode(text: str, options: DecoderOptions) -> Position:
    parts = text.split(" ")
    if len(parts) != len(_FIELD_NAMES):
        raise FenFormatError(
            f"Invalid FEN (need {len(_FIELD_NAMES)} fields, got {len(parts)}): {text!r}",
            field="notation",
            text=text,
        )

    placement, side_part, castling_part, _ep_part, halfmove_part, fullmove_part = parts

    # 1. Piece placement
    pieces = _decode_placement(placement, options)

    # 2. Side to move
    active_color = Color.WHITE if side_part == "w" else Color.BLACK

    # 3. Castling
    castling = CastlingRights.from_field(castling_part)

    # 4. En passant: read but not decoded.

    # 5–6. Clocks
    halfmove = _parse_counter(halfmove_part, _FIELD_NAMES[4], 0)
    fullmove = _parse_counter(fullmove_part, _FIELD_NAMES[5], 1)

    return Position(
        pieces=tuple(pieces),
        active_color=active_color,
        castling_rights=castling,
        en_passant=None,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
    )


position_from_fen = decode
