"""Concrete pieces with their movement rules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional

from consolechess.piece import Color, Piece, PieceType

if TYPE_CHECKING:
    from consolechess.board import Board
    from consolechess.game import GameData
    from consolechess.player import Player
    from consolechess.square import Square


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _between(board: Board, start: Square, end: Square) -> Iterator[Square]:
    """Squares strictly between two squares on one line or diagonal."""
    step_row = _sign(end.row - start.row)
    step_column = _sign(end.column - start.column)
    distance = max(abs(end.row - start.row), abs(end.column - start.column))
    for step in range(1, distance):
        yield board.square(start.row + step * step_row, start.column + step * step_column)


def _path_clear(board: Board, start: Square, end: Square) -> bool:
    return all(square.piece is None for square in _between(board, start, end))


def _on_diagonal(a: Square, b: Square) -> bool:
    return abs(a.row - b.row) == abs(a.column - b.column)


def _on_line(a: Square, b: Square) -> bool:
    return a.row == b.row or a.column == b.column


class Bishop(Piece):
    """Moves any distance diagonally."""

    def __init__(self, player: Player, square: Optional[Square]) -> None:
        super().__init__(PieceType.BISHOP, player, square)

    def can_move_to(self, to_square: Square, game_data: GameData) -> bool:
        if to_square is self.square:
            return False
        if not _on_diagonal(self.square, to_square):
            return False
        return _path_clear(game_data.board, self.square, to_square)


class King(Piece):
    """Moves one square in any direction."""

    def __init__(self, player: Player, square: Optional[Square]) -> None:
        super().__init__(PieceType.KING, player, square)

    def can_move_to(self, to_square: Square, game_data: GameData) -> bool:
        if to_square is self.square:
            return False
        return (
            abs(self.square.row - to_square.row) <= 1
            and abs(self.square.column - to_square.column) <= 1
        )


class Knight(Piece):
    """Jumps two squares one way and one square the other."""

    def __init__(self, player: Player, square: Optional[Square]) -> None:
        super().__init__(PieceType.KNIGHT, player, square)

    def can_move_to(self, to_square: Square, game_data: GameData) -> bool:
        if to_square is self.square:
            return False
        offsets = {
            abs(self.square.row - to_square.row),
            abs(self.square.column - to_square.column),
        }
        return offsets == {1, 2}


class Pawn(Piece):
    """Moves forward, captures diagonally, and takes en passant."""

    def __init__(self, player: Player, square: Optional[Square]) -> None:
        super().__init__(PieceType.PAWN, player, square)

    def can_move_to(self, to_square: Square, game_data: GameData) -> bool:
        if to_square is self.square:
            return False
        board = game_data.board
        white = self.player.color is Color.WHITE
        forward = -1 if white else 1
        advance = (to_square.row - self.square.row) * forward
        column_shift = abs(self.square.column - to_square.column)

        if to_square.piece is not None:
            return column_shift == 1 and advance == 1

        if column_shift == 0:
            if advance == 1:
                return True
            if advance == 2:
                if not self.first_move:
                    return False
                passed = board.square(self.square.row + forward, self.square.column)
                return passed.piece is None
            return False

        if column_shift == 1:
            return self._can_take_en_passant(to_square, game_data, white)
        return False

    def _can_take_en_passant(self, to_square: Square, game_data: GameData, white: bool) -> bool:
        victim = game_data.board.square(self.square.row, to_square.column).piece
        if (
            victim is None
            or victim.type is not PieceType.PAWN
            or victim.player.color is self.player.color
        ):
            return False
        last = game_data.last_move()
        if last is None or last.from_square is None or last.to_square is None:
            return False
        start_row, end_row = (1, 3) if white else (6, 4)
        column = to_square.column
        return (
            last.from_square.column == column
            and last.from_square.row == start_row
            and last.to_square.column == column
            and last.to_square.row == end_row
        )


class Queen(Piece):
    """Moves any distance along a rank, file or diagonal."""

    def __init__(self, player: Player, square: Optional[Square]) -> None:
        super().__init__(PieceType.QUEEN, player, square)

    def can_move_to(self, to_square: Square, game_data: GameData) -> bool:
        if to_square is self.square:
            return False
        if not (_on_line(self.square, to_square) or _on_diagonal(self.square, to_square)):
            return False
        return _path_clear(game_data.board, self.square, to_square)


class Rook(Piece):
    """Moves any distance along a rank or file."""

    def __init__(self, player: Player, square: Optional[Square]) -> None:
        super().__init__(PieceType.ROOK, player, square)

    def can_move_to(self, to_square: Square, game_data: GameData) -> bool:
        if to_square is self.square:
            return False
        if not _on_line(self.square, to_square):
            return False
        return _path_clear(game_data.board, self.square, to_square)


_CLASSES = {
    PieceType.BISHOP: Bishop,
    PieceType.QUEEN: Queen,
    PieceType.KING: King,
    PieceType.PAWN: Pawn,
    PieceType.KNIGHT: Knight,
    PieceType.ROOK: Rook,
}


def create_piece(type: PieceType, player: Player, square: Optional[Square]) -> Piece:
    """Build a piece of the given kind."""
    try:
        cls = _CLASSES[type]
    except (KeyError, TypeError):
        raise ValueError(f"unknown piece type: {type!r}") from None
    return cls(player, square)