"""State of a game in progress: board, players, turn and move history."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from consolechess.board import Board
    from consolechess.move import Move
    from consolechess.player import Player


class GameData:
    """Board, the two players, whose turn it is, and the executed moves."""

    def __init__(self, board: Board, player1: Player, player2: Player, player_turn: Player) -> None:
        self.board = board
        self.player1 = player1
        self.player2 = player2
        self.player_turn = player_turn
        self._history: list[Move] = []

    def next_turn(self) -> None:
        """Hand the turn to the other player."""
        self.player_turn = self.player2 if self.player_turn is self.player1 else self.player1

    def add_move(self, move: Move) -> None:
        """Append ``move`` to the history."""
        self._history.append(move)

    def remove_move(self, move: Move) -> None:
        """Drop ``move`` from the history if it is there."""
        self._history = [m for m in self._history if m is not move]

    @property
    def moves_history(self) -> list[Move]:
        """All moves in the order they were made."""
        return list(self._history)

    def last_move(self, player: Optional[Player] = None) -> Optional[Move]:
        """The latest move overall, or the latest of ``player``; ``None`` if none."""
        moves = self._history if player is None else self.moves_of_player(player)
        return moves[-1] if moves else None

    def moves_of_player(self, player: Player) -> list[Move]:
        """Moves made by ``player``, oldest first."""
        return [m for m in self._history if m.player is player]