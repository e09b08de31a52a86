"""The chess board: its squares and every piece placed on it."""

from __future__ import annotations

from typing import TYPE_CHECKING

from consolechess.piece import Piece, PieceType
from consolechess.pieces import create_piece
from consolechess.square import Square

if TYPE_CHECKING:
    from consolechess.player import Player


class Board:
    """Squares addressed by (row, column) and the pieces ever placed on them."""

    SIZE = 8

    def __init__(self) -> None:
        self._squares: dict[tuple[int, int], Square] = {}
        self._pieces: list[Piece] = []

    def add_square(self, row: int, column: int) -> Square:
        """Create the square at ``(row, column)``."""
        square = Square(row, column)
        self._squares[row, column] = square
        return square

    def square(self, row: int, column: int) -> Square:
        """Return the square at ``(row, column)``; ``KeyError`` if there is none."""
        try:
            return self._squares[row, column]
        except KeyError:
            raise KeyError(f"no square at ({row}, {column})") from None

    def add_piece(self, type: PieceType, player: Player, row: int, column: int) -> Piece:
        """Create a piece and put it on the square at ``(row, column)``."""
        square = self.square(row, column)
        piece = create_piece(type, player, square)
        self._pieces.append(piece)
        square.piece = piece
        return piece

    def delete_piece(self, piece: Piece) -> None:
        """Remove ``piece`` from the board altogether."""
        self._pieces = [p for p in self._pieces if p is not piece]
        if piece.square is not None and piece.square.piece is piece:
            piece.square.piece = None

    @property
    def pieces(self) -> list[Piece]:
        """All pieces, captured ones included, in the order they were added."""
        return list(self._pieces)

    def pieces_of_player(self, player: Player) -> list[Piece]:
        """Pieces owned by ``player``."""
        return [p for p in self._pieces if p.player is player]

    def pieces_captured_by(self, player: Player) -> list[Piece]:
        """Captured pieces that belong to the opponents of ``player``."""
        return [p for p in self._pieces if p.captured and p.player is not player]

    def _cell(self, row: int, column: int) -> str:
        piece = self.square(row, column).piece
        if piece is None:
            return "[.]"
        return piece.abbr + ("1" if piece.first_move else "0")

    def __str__(self) -> str:
        rows = (
            "".join(f"{self._cell(row, column)}   " for column in range(self.SIZE)) + "\n\n"
            for row in range(self.SIZE)
        )
        return "".join(rows)