"""Decode errors for board notation.

All of them are ``ValueError`` subclasses, so callers that only care about
"bad notation" can keep catching ``ValueError``.
"""

from __future__ import annotations


class NotationError(ValueError):
    """Base class: *field* names the notation field, *text* the offending input."""

    def __init__(self, message: str, *, field: str, text: str) -> None:
        super().__init__(message)
        self.field = field
        self.text = text


class FenFormatError(NotationError):
    """Input does not split into exactly six fields."""


class InvalidPieceError(NotationError):
    """Unrecognised character in the placement field."""

    def __init__(self, message: str, *, text: str, char: str, offset: int) -> None:
        super().__init__(message, field="placement", text=text)
        self.char = char
        self.offset = offset


class BoardShapeError(NotationError):
    """Row count or row width does not match the configured board size."""

    def __init__(self, message: str, *, text: str, row: int) -> None:
        super().__init__(message, field="placement", text=text)
        self.row = row


class NumericFieldError(NotationError):
    """Halfmove clock or fullmove number is not a valid integer."""
