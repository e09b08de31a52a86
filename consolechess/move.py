"""A single move, able to execute and undo itself on a game."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from consolechess.piece import Color, Piece, PieceType

if TYPE_CHECKING:
    from consolechess.board import Board
    from consolechess.game import GameData
    from consolechess.player import Player
    from consolechess.square import Square

SHORT_CASTLING = "O-O"
LONG_CASTLING = "O-O-O"

# (king from, king to), (rook from, rook to) columns on the home row.
_CASTLING = {
    SHORT_CASTLING: ((4, 6), (7, 5)),
    LONG_CASTLING: ((4, 2), (0, 3)),
}


def _relocate(board: Board, row: int, source: int, target: int) -> Piece:
    origin = board.square(row, source)
    destination = board.square(row, target)
    piece = origin.piece
    destination.piece = piece
    piece.move_to(destination)
    origin.piece = None
    return piece


class Move:
    """A move from one square to another, or a castling given by its notation."""

    def __init__(
        self,
        from_square: Optional[Square],
        to_square: Optional[Square],
        player: Optional[Player],
    ) -> None:
        self.from_square = from_square
        self.to_square = to_square
        self.player = player
        self.abbr = (
            f"{from_square}-{to_square}"
            if from_square is not None and to_square is not None
            else ""
        )
        self.executed = False
        self._captured: Optional[Piece] = None
        self._en_passant = False
        self._piece_first_move = False

    @classmethod
    def parse(cls, text: str, board: Board, player: Optional[Player]) -> Move:
        """Build a move from text such as ``E2-E4``."""
        if len(text) < 5:
            raise ValueError(f"move text too short: {text!r}")
        from_row = 8 - int(text[1])
        from_column = ord(text[0]) - ord("A")
        to_row = 8 - int(text[4])
        to_column = ord(text[3]) - ord("A")
        return cls(board.square(from_row, from_column), board.square(to_row, to_column), player)

    @classmethod
    def from_abbr(cls, abbr: str, player: Optional[Player]) -> Move:
        """Build a move known only by its notation, e.g. a castling."""
        move = cls(None, None, player)
        move.abbr = abbr
        return move

    def _home_row(self) -> int:
        return 7 if self.player.color is Color.WHITE else 0

    def execute(self, game_data: GameData) -> None:
        """Play the move on the board and record it; a second call does nothing."""
        if self.executed or self.player is None:
            return
        board = game_data.board
        if self.abbr in _CASTLING:
            row = self._home_row()
            for source, target in _CASTLING[self.abbr]:
                _relocate(board, row, source, target)
        else:
            self._execute_plain(board)
        game_data.add_move(self)
        self.executed = True

    def _execute_plain(self, board: Board) -> None:
        origin, destination = self.from_square, self.to_square
        piece = origin.piece
        self._piece_first_move = piece.first_move
        self._captured = None
        self._en_passant = False
        if destination.piece is not None:
            self._captured = destination.piece
            self._captured.capture()
        elif (
            piece.type is PieceType.PAWN
            and abs(origin.row - destination.row) == 1
            and abs(origin.column - destination.column) == 1
        ):
            self._en_passant = True
            victim_square = board.square(origin.row, destination.column)
            self._captured = victim_square.piece
            self._captured.capture()
            victim_square.piece = None
            self._piece_first_move = False
        destination.piece = piece
        piece.move_to(destination)
        origin.piece = None

    def undo(self, game_data: GameData) -> None:
        """Take back an executed move and drop it from the history."""
        if not self.executed or self.player is None:
            return
        board = game_data.board
        if self.abbr in _CASTLING:
            row = self._home_row()
            for source, target in _CASTLING[self.abbr]:
                _relocate(board, row, target, source).first_move = True
        else:
            self._undo_plain(board)
        game_data.remove_move(self)
        self.executed = False

    def _undo_plain(self, board: Board) -> None:
        origin, destination = self.from_square, self.to_square
        piece = destination.piece
        origin.piece = piece
        piece.move_to(origin)
        if self._piece_first_move:
            piece.first_move = True
        captured = self._captured
        if captured is None:
            destination.piece = None
        elif self._en_passant:
            victim_square = board.square(origin.row, destination.column)
            captured.restore(victim_square)
            victim_square.piece = captured
            destination.piece = None
        else:
            captured.restore(destination)
            destination.piece = captured

    def __str__(self) -> str:
        return self.abbr

    def __repr__(self) -> str:
        return f"Move({self.abbr!r})"