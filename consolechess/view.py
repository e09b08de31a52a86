"""Text interface that draws the game and reads the players' input."""

from __future__ import annotations

import subprocess
import sys
from typing import TYPE_CHECKING, Callable, Optional, TextIO, TypeVar

from consolechess.piece import Color, PieceType

if TYPE_CHECKING:
    from consolechess.board import Board
    from consolechess.game import GameData
    from consolechess.player import Player

T = TypeVar("T")

_COLUMNS = "ABCDEFGH"
_MENU_OPTIONS = {"D", "S", "Q", "C", "N"}
_PROMOTIONS = {
    "Q": PieceType.QUEEN,
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "K": PieceType.KNIGHT,
}


class InputError(ValueError):
    """The user typed something that is not an accepted answer."""


def _parse_move(token: str) -> str:
    move = token[:5]

    def at(index: int) -> str:
        return move[index] if index < len(move) else ""

    if len(move) == 5 and at(0) in _COLUMNS and at(3) in _COLUMNS and at(1) in "12345678" \
            and at(4) in "12345678":
        return move[:2] + "-" + move[3:]
    if at(0) == "O" and at(2) == "O":
        return "O-O-O" if at(4) == "O" else "O-O"
    if at(0) == "M":
        return "M"
    raise InputError("Incorrect move format!!!")


class ConsoleView:
    """Draws the board on a text stream and reads answers word by word."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._buffer = ""
        self.error = False

    # input and output helpers

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _fill(self) -> bool:
        line = self._in.readline()
        if not line:
            return False
        self._buffer += line
        return True

    def _read_token(self) -> str:
        while True:
            stripped = self._buffer.lstrip()
            if stripped:
                self._buffer = stripped
                break
            self._buffer = ""
            if not self._fill():
                raise EOFError("no more input")
        end = next((i for i, ch in enumerate(self._buffer) if ch.isspace()), len(self._buffer))
        token, self._buffer = self._buffer[:end], self._buffer[end:]
        return token

    def _get_char(self) -> str:
        if not self._buffer and not self._fill():
            return ""
        char, self._buffer = self._buffer[0], self._buffer[1:]
        return char

    def _clear(self) -> None:
        if self._out is sys.stdout and self._out.isatty():
            try:
                subprocess.run(["clear"], check=False)
            except OSError:
                pass

    def _ask(self, prompt: str, parse: Callable[[str], T], *, blank_line: bool = True) -> T:
        while True:
            self._write(prompt)
            token = self._read_token()
            try:
                return parse(token)
            except InputError as error:
                self._write(f"\n{error}\n" if blank_line else f"{error}\n")
                self._get_char()
                self._clear()

    # drawing

    def _column_names(self) -> None:
        self._write("".join(f"    {letter}" for letter in _COLUMNS) + "\n")

    def _horizontal_edge(self) -> None:
        self._write(" " + "+----" * 8 + "+\n")

    def _row(self, board: Board, row: int, info: str) -> None:
        cells = []
        for column in range(8):
            piece = board.square(row, column).piece
            cells.append(f"| {'  ' if piece is None else piece.abbr} ")
        self._write(f"{8 - row}{''.join(cells)}|{8 - row}  {info}\n")
        self._horizontal_edge()

    def display_board(self, game_data: GameData) -> None:
        """Draw the board with player names and their last moves."""
        if game_data.player1.color is Color.WHITE:
            white, black = game_data.player1, game_data.player2
        else:
            white, black = game_data.player2, game_data.player1

        def last(player: Player) -> str:
            move = game_data.last_move(player)
            return "Last move: " + ("" if move is None else move.abbr)

        infos = {
            0: f"BLACK: {black.name}",
            1: last(black),
            6: f"WHITE: {white.name}",
            7: last(white),
        }
        self._column_names()
        self._horizontal_edge()
        for row in range(8):
            self._row(game_data.board, row, infos.get(row, ""))
        self._column_names()
        self._write("\n")

    def display_captured_pieces(self, game_data: GameData) -> None:
        """List the captured pieces of each colour."""
        player1, player2 = game_data.player1, game_data.player2
        board = game_data.board
        by_1 = [p.abbr for p in board.pieces_captured_by(player1)]
        by_2 = [p.abbr for p in board.pieces_captured_by(player2)]
        blacks, whites = (by_1, by_2) if player1.color is Color.WHITE else (by_2, by_1)
        self._write("captured blacks: " + "".join(f"{a} " for a in blacks) + "\n")
        self._write("captured whites: " + "".join(f"{a} " for a in whites) + "\n")

    def display_default_view(self, game_data: GameData) -> None:
        """Draw the board, captures, menu hint and check notice."""
        self.display_board(game_data)
        self.display_captured_pieces(game_data)
        self._write("(M)enu\n")
        if game_data.player1.in_check:
            self.display_check_info(game_data.player1)
        elif game_data.player2.in_check:
            self.display_check_info(game_data.player2)

    def display_check_info(self, player: Player) -> None:
        self._write(f"{player.name}({player.color}) is in CHECK!\n")

    def display_winner(self, winner: Player) -> None:
        self._write(
            f"CHECKMATE: game ended\n\nThe winner is {winner.name} ({winner.color})\n"
            "Congratulations!!!\n"
        )
        self._get_char()
        self.display_end_game_menu()

    def display_draw(self) -> None:
        self._write("STALEMATE: game ended in a DRAW\n")
        self._get_char()
        self.display_end_game_menu()

    def display_menu(self) -> None:
        self._write(
            "============== MENU ==============\n"
            "Display all player moves (D)\n"
            "Save game (S)\n"
            "Quit game (Q)\n"
            "Close menu (C)\n"
        )

    def display_end_game_menu(self) -> None:
        self._write("New game (N)\nQuit game (Q)\n")

    def display_player_moves(self, player: Player, game_data: GameData) -> None:
        moves = "".join(f"{m.abbr} " for m in game_data.moves_of_player(player))
        self._write(f"Player moves: {moves}\n")

    def display_error(self, message: str) -> None:
        self._write(f"ERROR: {message}")

    # reading

    def read_if_play_with_computer(self) -> bool:
        """Ask whether the opponent is the computer."""

        def parse(choice: str) -> bool:
            if choice in ("N", "n"):
                return False
            if choice in ("Y", "y"):
                return True
            raise InputError("Incorrect choice!!!")

        return self._ask("Do you want to play against computer(Y/n)\n> ", parse)

    def read_choice_of_color(self) -> Color:
        """Ask which colour the first player takes."""

        def parse(choice: str) -> Color:
            if choice in ("W", "w"):
                return Color.WHITE
            if choice in ("B", "b"):
                return Color.BLACK
            raise InputError("Incorrect choice!!!")

        return self._ask("Choose Player 1 color: WHITE(W) or BLACK(B)\n> ", parse)

    def read_move(self, color: Color) -> str:
        """Read a move as ``E2-E4``, ``O-O``, ``O-O-O`` or ``M`` for the menu."""
        if self.error:
            self._write("Move incorrect\n")
        return self._ask(f"Move of {color}\n> ", _parse_move)

    def read_promotion_choice(self) -> PieceType:
        """Ask which piece a promoted pawn becomes."""

        def parse(text: str) -> PieceType:
            try:
                return _PROMOTIONS[text[:1].upper()]
            except KeyError:
                raise InputError("Incorrect choice of piece!!!") from None

        return self._ask(
            "Pawn promotion: choose piece: (Q)ueen,(R)ook,(B)ishop,(K)night\n> ", parse
        )

    def read_menu_option(self) -> str:
        """Read one of the menu letters D, S, Q, C or N."""

        def parse(text: str) -> str:
            option = text[:1]
            if option not in _MENU_OPTIONS:
                raise InputError("Incorrect option!!!")
            return option

        return self._ask("> ", parse, blank_line=False)

    def read_if_new_game(self) -> bool:
        """Ask whether to start a new game (``True``) or load one (``False``)."""

        def parse(text: str) -> bool:
            option = text[:1]
            if option == "N":
                return True
            if option == "L":
                return False
            raise InputError("Incorrect option!!!")

        return self._ask("1. New game (N)\n2. Load game (L)\n> ", parse)

    def read_file_path(self) -> str:
        self._write("Enter file path: ")
        return self._read_token()

    def restart_or_quit(self) -> bool:
        """Show the restart prompt; the answer is always restart."""
        self._write("Restart(R) or quit(q)")
        return True