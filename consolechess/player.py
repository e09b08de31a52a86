"""A participant of the game."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from consolechess.piece import Color

if TYPE_CHECKING:
    from consolechess.piece import Piece


class Player:
    """A named player of one colour, with a king and maybe a checking piece."""

    def __init__(self, name: str, color: Color) -> None:
        self.name = name
        self.color = color
        self.king: Optional[Piece] = None
        self._checking_piece: Optional[Piece] = None

    @property
    def checking_piece(self) -> Optional[Piece]:
        """The enemy piece giving check, or ``None``."""
        return self._checking_piece

    @checking_piece.setter
    def checking_piece(self, piece: Optional[Piece]) -> None:
        self._checking_piece = piece

    @property
    def in_check(self) -> bool:
        """Whether some piece is checking this player."""
        return self._checking_piece is not None

    def cancel_check(self) -> None:
        """Forget the checking piece."""
        self._checking_piece = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.color})"