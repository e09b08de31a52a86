"""A single square of the board."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from consolechess.piece import Piece


class Square:
    """A board square at ``row`` (0 is rank 8) and ``column`` (0 is file A)."""

    __slots__ = ("row", "column", "_piece")

    def __init__(self, row: int, column: int) -> None:
        self.row = row
        self.column = column
        self._piece: Optional[Piece] = None

    @property
    def piece(self) -> Optional[Piece]:
        """The piece standing here, or ``None``."""
        return self._piece

    @piece.setter
    def piece(self, value: Optional[Piece]) -> None:
        self._piece = value

    def __str__(self) -> str:
        return f"{chr(ord('A') + self.column)}{8 - self.row}"

    def __repr__(self) -> str:
        return f"Square({self.row}, {self.column})"