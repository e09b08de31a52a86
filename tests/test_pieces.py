from itertools import product

import pytest

from consolechess.board import Board
from consolechess.game import GameData
from consolechess.move import Move
from consolechess.piece import Color, PieceType
from consolechess.pieces import Bishop, King, Knight, Pawn, Queen, Rook, create_piece
from consolechess.player import Player
from consolechess.square import Square


@pytest.fixture
def white():
    return Player("Player", Color.WHITE)


@pytest.fixture
def black():
    return Player("Player", Color.BLACK)


@pytest.fixture
def game(white, black):
    board = Board()
    for row, column in product(range(8), range(8)):
        board.add_square(row, column)
    return GameData(board, white, black, white)


def can(game, src, dst):
    board = game.board
    return board.square(*src).piece.can_move_to(board.square(*dst), game)


@pytest.mark.parametrize("cls", [Bishop, King, Knight, Pawn, Queen, Rook])
def test_set_square(cls, white):
    square0, square1 = Square(5, 0), Square(2, 0)
    piece = cls(white, square0)
    piece.move_to(square1)
    assert square0.piece is None
    assert piece.square is square1


@pytest.mark.parametrize(
    "kind, cls",
    [
        (PieceType.BISHOP, Bishop),
        (PieceType.QUEEN, Queen),
        (PieceType.KING, King),
        (PieceType.PAWN, Pawn),
        (PieceType.KNIGHT, Knight),
        (PieceType.ROOK, Rook),
    ],
)
def test_create_piece(kind, cls, white):
    square = Square(0, 0)
    piece = create_piece(kind, white, square)
    assert isinstance(piece, cls)
    assert piece.type is kind
    assert piece.player is white
    assert piece.square is square


def test_create_piece_unknown(white):
    with pytest.raises(ValueError):
        create_piece("dragon", white, None)


# Bishop


@pytest.mark.parametrize("dst", [(1, 0), (3, 4), (6, 5), (7, 0)])
def test_bishop_diagonals(game, white, dst):
    game.board.add_piece(PieceType.BISHOP, white, 4, 3)
    assert can(game, (4, 3), dst) is True


def test_bishop_negative(game, white):
    game.board.add_piece(PieceType.BISHOP, white, 1, 1)
    assert can(game, (1, 1), (3, 2)) is False
    assert can(game, (1, 1), (1, 3)) is False


def test_bishop_blocked(game, white):
    game.board.add_piece(PieceType.PAWN, white, 2, 5)
    game.board.add_piece(PieceType.BISHOP, white, 4, 3)
    assert can(game, (4, 3), (1, 6)) is False


def test_bishop_capture(game, white, black):
    game.board.add_piece(PieceType.PAWN, white, 5, 2)
    game.board.add_piece(PieceType.BISHOP, black, 3, 0)
    assert can(game, (3, 0), (5, 2)) is True


def test_bishop_same_square(game, white):
    game.board.add_piece(PieceType.BISHOP, white, 4, 3)
    assert can(game, (4, 3), (4, 3)) is False


# King


@pytest.mark.parametrize(
    "dst", [(4, 4), (4, 2), (3, 3), (5, 3), (3, 4), (3, 2), (5, 2), (5, 4)]
)
def test_king_all_directions(game, white, dst):
    game.board.add_piece(PieceType.KING, white, 4, 3)
    assert can(game, (4, 3), dst) is True


def test_king_negative(game, white):
    game.board.add_piece(PieceType.KING, white, 2, 1)
    assert can(game, (2, 1), (4, 1)) is False
    assert can(game, (2, 1), (2, 3)) is False


def test_king_capture(game, white, black):
    game.board.add_piece(PieceType.KING, white, 5, 0)
    game.board.add_piece(PieceType.PAWN, black, 5, 1)
    assert can(game, (5, 0), (5, 1)) is True


# Knight


@pytest.mark.parametrize("dst", [(5, 1), (3, 5), (3, 1), (5, 5)])
def test_knight_column_by_two(game, white, dst):
    game.board.add_piece(PieceType.KNIGHT, white, 4, 3)
    assert can(game, (4, 3), dst) is True


@pytest.mark.parametrize("dst", [(6, 2), (2, 4), (2, 2), (6, 4)])
def test_knight_row_by_two(game, white, dst):
    game.board.add_piece(PieceType.KNIGHT, white, 4, 3)
    assert can(game, (4, 3), dst) is True


def test_knight_negative(game, white):
    game.board.add_piece(PieceType.KNIGHT, white, 0, 1)
    assert can(game, (0, 1), (2, 1)) is False
    assert can(game, (0, 1), (3, 2)) is False


def test_knight_capture(game, white, black):
    game.board.add_piece(PieceType.KNIGHT, white, 4, 3)
    game.board.add_piece(PieceType.KNIGHT, black, 6, 2)
    assert can(game, (4, 3), (6, 2)) is True


# Pawn


def test_pawn_forward_one(game, white, black):
    game.board.add_piece(PieceType.PAWN, white, 6, 0)
    game.board.add_piece(PieceType.PAWN, black, 1, 4)
    assert can(game, (6, 0), (5, 0)) is True
    assert can(game, (1, 4), (2, 4)) is True


def test_pawn_forward_one_blocked(game, white, black):
    game.board.add_piece(PieceType.PAWN, white, 6, 0)
    game.board.add_piece(PieceType.PAWN, black, 5, 0)
    game.board.add_piece(PieceType.PAWN, black, 1, 4)
    game.board.add_piece(PieceType.PAWN, white, 2, 4)
    assert can(game, (6, 0), (5, 0)) is False
    assert can(game, (1, 4), (2, 4)) is False


def test_pawn_backwards(game, white, black):
    game.board.add_piece(PieceType.PAWN, white, 5, 0)
    game.board.add_piece(PieceType.PAWN, black, 2, 4)
    assert can(game, (5, 0), (6, 0)) is False
    assert can(game, (2, 4), (1, 4)) is False


def test_pawn_forward_two(game, white, black):
    game.board.add_piece(PieceType.PAWN, white, 6, 0)
    game.board.add_piece(PieceType.PAWN, black, 1, 0)
    assert can(game, (6, 0), (4, 0)) is True
    assert can(game, (1, 0), (3, 0)) is True


def test_pawn_forward_two_not_first_move(game, white):
    pawn = game.board.add_piece(PieceType.PAWN, white, 6, 0)
    pawn.first_move = False
    assert can(game, (6, 0), (4, 0)) is False


def test_pawn_forward_three(game, white, black):
    game.board.add_piece(PieceType.PAWN, white, 6, 1)
    game.board.add_piece(PieceType.PAWN, black, 1, 0)
    assert can(game, (6, 1), (3, 1)) is False
    assert can(game, (1, 0), (4, 0)) is False


def test_pawn_negative(game, white):
    game.board.add_piece(PieceType.PAWN, white, 6, 1)
    assert can(game, (6, 1), (6, 2)) is False
    assert can(game, (6, 1), (4, 3)) is False


def test_pawn_capture(game, white, black):
    game.board.add_piece(PieceType.PAWN, white, 2, 1)
    game.board.add_piece(PieceType.PAWN, black, 1, 0)
    assert can(game, (2, 1), (1, 0)) is True


def test_en_passant_positive(game, white, black):
    board = game.board
    board.add_piece(PieceType.PAWN, white, 3, 1)
    board.add_piece(PieceType.PAWN, black, 3, 0)
    game.add_move(Move.parse("A7-A5", board, black))
    assert can(game, (3, 1), (2, 0)) is True

    board.add_piece(PieceType.PAWN, white, 4, 7)
    board.add_piece(PieceType.PAWN, black, 4, 6)
    game.add_move(Move.parse("H2-H4", board, white))
    assert can(game, (4, 6), (5, 7)) is True


def test_en_passant_negative(game, white, black):
    board = game.board
    board.add_piece(PieceType.PAWN, white, 3, 1)
    queen = board.add_piece(PieceType.QUEEN, black, 3, 0)
    game.add_move(Move.parse("A7-A5", board, black))
    pawn = board.square(3, 1).piece
    assert can(game, (3, 1), (2, 0)) is False
    assert queen.square is board.square(3, 0)
    assert queen.captured is False
    assert pawn.square is board.square(3, 1)

    board.add_piece(PieceType.PAWN, white, 4, 7)
    board.add_piece(PieceType.PAWN, black, 4, 6)
    game.add_move(Move.parse("A2-H4", board, white))
    white_pawn = board.square(4, 7).piece
    capturing = board.square(4, 6).piece
    assert can(game, (4, 6), (5, 7)) is False
    assert white_pawn.square is board.square(4, 7)
    assert white_pawn.captured is False
    assert capturing.square is board.square(4, 6)


def test_en_passant_without_history(game, white, black):
    game.board.add_piece(PieceType.PAWN, white, 3, 1)
    game.board.add_piece(PieceType.PAWN, black, 3, 0)
    assert can(game, (3, 1), (2, 0)) is False


# Queen


@pytest.mark.parametrize("dst", [(1, 0), (3, 4), (6, 5), (7, 0)])
def test_queen_diagonals(game, white, dst):
    game.board.add_piece(PieceType.QUEEN, white, 4, 3)
    assert can(game, (4, 3), dst) is True


def test_queen_blocked(game, white):
    game.board.add_piece(PieceType.PAWN, white, 2, 5)
    game.board.add_piece(PieceType.PAWN, white, 1, 3)
    game.board.add_piece(PieceType.QUEEN, white, 4, 3)
    assert can(game, (4, 3), (1, 6)) is False
    assert can(game, (4, 3), (0, 3)) is False


def test_queen_rank(game, white):
    game.board.add_piece(PieceType.QUEEN, white, 4, 0)
    game.board.add_piece(PieceType.QUEEN, white, 3, 7)
    assert can(game, (4, 0), (4, 7)) is True
    assert can(game, (3, 7), (3, 0)) is True


def test_queen_file(game, white):
    game.board.add_piece(PieceType.QUEEN, white, 2, 1)
    game.board.add_piece(PieceType.QUEEN, white, 7, 0)
    assert can(game, (2, 1), (7, 1)) is True
    assert can(game, (7, 0), (0, 0)) is True


def test_queen_negative(game, white):
    game.board.add_piece(PieceType.QUEEN, white, 0, 2)
    assert can(game, (0, 2), (4, 3)) is False
    assert can(game, (0, 2), (1, 4)) is False


def test_queen_rank_blocked(game, white, black):
    game.board.add_piece(PieceType.QUEEN, white, 2, 1)
    game.board.add_piece(PieceType.QUEEN, black, 2, 3)
    assert can(game, (2, 1), (2, 5)) is False


def test_queen_file_blocked(game, white, black):
    game.board.add_piece(PieceType.QUEEN, white, 0, 2)
    game.board.add_piece(PieceType.QUEEN, black, 2, 2)
    assert can(game, (0, 2), (6, 2)) is False


def test_queen_capture(game, white, black):
    game.board.add_piece(PieceType.QUEEN, white, 3, 3)
    game.board.add_piece(PieceType.QUEEN, white, 3, 6)
    game.board.add_piece(PieceType.QUEEN, black, 1, 1)
    assert can(game, (1, 1), (3, 3)) is True
    assert can(game, (3, 3), (3, 6)) is True


# Rook


def test_rook_rank(game, white):
    game.board.add_piece(PieceType.ROOK, white, 4, 0)
    game.board.add_piece(PieceType.ROOK, white, 3, 7)
    assert can(game, (4, 0), (4, 7)) is True
    assert can(game, (3, 7), (3, 2)) is True


def test_rook_file(game, white):
    game.board.add_piece(PieceType.ROOK, white, 2, 1)
    game.board.add_piece(PieceType.ROOK, white, 7, 6)
    assert can(game, (2, 1), (2, 6)) is True
    assert can(game, (7, 6), (1, 6)) is True


def test_rook_negative(game, white):
    game.board.add_piece(PieceType.ROOK, white, 0, 2)
    assert can(game, (0, 2), (4, 3)) is False
    assert can(game, (0, 2), (1, 3)) is False


def test_rook_rank_blocked(game, white, black):
    game.board.add_piece(PieceType.ROOK, white, 2, 1)
    game.board.add_piece(PieceType.ROOK, black, 2, 3)
    assert can(game, (2, 1), (2, 5)) is False


def test_rook_file_blocked(game, white, black):
    game.board.add_piece(PieceType.ROOK, white, 0, 2)
    game.board.add_piece(PieceType.ROOK, black, 2, 2)
    assert can(game, (0, 2), (6, 2)) is False


def test_rook_capture(game, white, black):
    game.board.add_piece(PieceType.ROOK, white, 5, 0)
    game.board.add_piece(PieceType.ROOK, black, 5, 3)
    assert can(game, (5, 0), (5, 3)) is True