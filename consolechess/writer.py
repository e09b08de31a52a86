"""Saving a game in progress to a text file."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from consolechess.game import GameData
    from consolechess.player import Player


class GameFileError(OSError):
    """A game file could not be opened."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        super().__init__(f"cannot open game file: {path}")
        self.path = path


def _player_line(player: Player) -> str:
    checking = player.checking_piece
    where = str(checking.square) if player.in_check and checking is not None else ""
    return f"{player.name} {player.color} {where}\n"


def save_game(game_data: GameData, path: Union[str, os.PathLike]) -> None:
    """Write the board, players, move history and captured pieces to ``path``."""
    board = game_data.board
    player1, player2 = game_data.player1, game_data.player2
    saver = player1 if game_data.player_turn is player1 else player2

    captured_by_1: list[str] = []
    captured_by_2: list[str] = []
    for piece in board.pieces:
        if piece.captured:
            (captured_by_2 if piece.player is player1 else captured_by_1).append(piece.abbr)

    content = "".join(
        [
            str(board),
            f"Save: {saver.name}\n",
            _player_line(player1),
            _player_line(player2),
            " ".join(move.abbr for move in game_data.moves_history) + "\n",
            " ".join(captured_by_1) + "\n",
            " ".join(captured_by_2) + "\n",
        ]
    )
    try:
        with open(path, "w", encoding="utf-8") as file:
            file.write(content)
    except OSError as error:
        raise GameFileError(path) from error