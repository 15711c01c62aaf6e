"""Square type alias and grid helpers.

Squares are ``(row, column)`` pairs read straight off board notation:
row 0 is the first rank listed (the top of the board), column 0 the
leftmost file.

    (0, 0) (0, 1) ... (0, 7)
    (1, 0) (1, 1) ... (1, 7)
    ...
    (7, 0) (7, 1) ... (7, 7)
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]

BOARD_SIZE = 8


def make_square(row: int, column: int) -> Square:
    return (row, column)


def row_of(sq: Square) -> int:
    return sq[0]


def column_of(sq: Square) -> int:
    return sq[1]


def is_valid_square(sq: Square, size: int = BOARD_SIZE) -> bool:
    """Check whether *sq* lies on a ``size`` x ``size`` grid."""
    row, column = sq
    return 0 <= row < size and 0 <= column < size


def square_name(sq: Square, size: int = BOARD_SIZE) -> str:
    """Algebraic name, e.g. (7, 4) → 'e1' on a standard board."""
    if not is_valid_square(sq, size):
        raise ValueError(f"Square off the board: {sq!r}")
    row, column = sq
    return chr(ord("a") + column) + str(size - row)
