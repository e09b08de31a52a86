"""Players that pick their moves: a person at the console or the computer."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Optional

from consolechess.move import LONG_CASTLING, SHORT_CASTLING, Move
from consolechess.piece import Color, PieceType
from consolechess.player import Player

if TYPE_CHECKING:
    from consolechess.board import Board
    from consolechess.view import ConsoleView


class HumanPlayer(Player):
    """A player whose moves and promotion choices are read from a view."""

    def get_move(self, board: Board, view: ConsoleView) -> Optional[Move]:
        """Read a move; ``None`` when the player asked for the menu instead."""
        text = view.read_move(self.color)
        if len(text) == 1:
            return None
        if text in (SHORT_CASTLING, LONG_CASTLING):
            return Move.from_abbr(text, self)
        return Move.parse(text, board, self)

    def promotion(self, view: ConsoleView) -> PieceType:
        """Ask the view which piece a pawn becomes."""
        return view.read_promotion_choice()


_PROMOTION_CHOICES = (PieceType.KNIGHT, PieceType.ROOK, PieceType.BISHOP)


class ComputerPlayer(Player):
    """A player that moves a random piece of its own to a random square."""

    def __init__(self, name: str, color: Color, rng: Optional[random.Random] = None) -> None:
        super().__init__(name, color)
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, board: Board, view: Optional[ConsoleView] = None) -> Move:
        """Pick an active piece and a different square for it, both at random."""
        active = [p for p in board.pieces_of_player(self) if not p.captured]
        if not active:
            raise ValueError(f"{self.name} has no pieces left to move")
        piece = self.rng.choice(active)
        while True:
            target = board.square(self.rng.randrange(8), self.rng.randrange(8))
            if target is not piece.square:
                break
        return Move(piece.square, target, self)

    def promotion(self, view: Optional[ConsoleView] = None) -> PieceType:
        """Choose the promotion piece at random."""
        number = self.rng.randrange(4)
        if number < len(_PROMOTION_CHOICES):
            return _PROMOTION_CHOICES[number]
        return PieceType.QUEEN