"""Colours, piece kinds and the state shared by every chess piece."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from consolechess.game import GameData
    from consolechess.player import Player
    from consolechess.square import Square


class Color(Enum):
    """Side of a player."""

    WHITE = "WHITE"
    BLACK = "BLACK"

    def opposite(self) -> Color:
        """Return the other colour."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def __str__(self) -> str:
        return self.value


class PieceType(Enum):
    """Kind of piece; the value is its one-letter abbreviation."""

    PAWN = "P"
    ROOK = "R"
    BISHOP = "B"
    KNIGHT = "N"
    QUEEN = "Q"
    KING = "K"


class Piece(ABC):
    """A piece owned by a player and standing on a square unless captured."""

    def __init__(self, type: PieceType, player: Player, square: Optional[Square]) -> None:
        self.type = type
        self.player = player
        self.square = square
        self.captured = False
        self.first_move = True

    @property
    def abbr(self) -> str:
        """Colour letter followed by the piece letter, e.g. ``WQ``."""
        side = "W" if self.player.color is Color.WHITE else "B"
        return side + self.type.value

    def move_to(self, square: Square) -> None:
        """Place the piece on ``square``; it has moved at least once after this."""
        self.first_move = False
        self.square = square

    def capture(self) -> None:
        """Take the piece off the board."""
        self.captured = True
        self.square = None

    def restore(self, square: Square) -> None:
        """Bring a captured piece back onto ``square``."""
        self.captured = False
        self.square = square

    @abstractmethod
    def can_move_to(self, to_square: Square, game_data: GameData) -> bool:
        """Whether the piece's movement rule allows reaching ``to_square``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.abbr}, {self.square})"