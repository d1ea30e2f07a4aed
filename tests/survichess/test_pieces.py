"""Unit tests for /src/survichess/pieces.py"""

from typing import Callable

import pytest

from src.survichess.board import Board
from src.survichess.pieces import (
    MOVEMENT_RULES,
    Piece,
    PieceKind,
    bishop_geometry,
    is_valid_move,
    knight_geometry,
    queen_geometry,
    rook_geometry,
    stag_geometry,
    trident_geometry,
)
from src.survichess.tile import BOARD_SIZE, Tile

ALL_KINDS = [kind for kind in PieceKind]


@pytest.fixture
def board_with_single_piece() -> Callable[[PieceKind, int, int], tuple[Board, Piece]]:
    """Call the inner function that will be returned with the desired piece kind and tile"""

    def _create_board(kind: PieceKind, row: int = 2, col: int = 2) -> tuple[Board, Piece]:
        board = Board()
        piece = Piece(kind, row, col)
        board.place_piece(piece)
        return board, piece

    return _create_board


# -- PIECE --
@pytest.mark.parametrize("kind", ALL_KINDS)
def test_single_character_tags(kind: PieceKind) -> None:
    piece = Piece(kind, 0, 0)
    assert piece.tag == kind.value
    assert len(piece.tag) == 1


def test_tags() -> None:
    assert [kind.value for kind in PieceKind] == ["Q", "R", "B", "N", "S", "T"]


@pytest.mark.parametrize("character", ["Q", "r", "B", "n", "S", "t"])
def test_piece_from_tag(character: str) -> None:
    piece = Piece.from_tag(character, Tile(3, 1))
    assert piece.kind == PieceKind(character.upper())
    assert piece.tile == Tile(3, 1)


@pytest.mark.parametrize("row, col, dark", [(0, 0, True), (0, 1, False), (3, 1, True)])
def test_dark_square_flag_from_starting_tile(row: int, col: int, dark: bool) -> None:
    assert Piece(PieceKind.QUEEN, row, col).on_dark_square == dark


def test_dark_square_flag_is_not_updated_after_moving() -> None:
    """Known quirk kept on purpose: the flag describes where the piece started, not where it is."""
    piece = Piece(PieceKind.ROOK, 0, 0)
    assert piece.on_dark_square
    piece.move_to(Tile(0, 1))
    assert piece.tile == Tile(0, 1)
    assert not Tile(0, 1).is_dark()
    assert piece.on_dark_square


def test_pieces_compare_by_identity() -> None:
    """Two Queens on the same tile are still two different pieces"""
    assert Piece(PieceKind.QUEEN, 1, 1) != Piece(PieceKind.QUEEN, 1, 1)


# -- GEOMETRY --
@pytest.mark.parametrize(
    "delta, expected",
    [((1, 0), True), ((0, 1), True), ((1, 1), True), ((2, 0), False), ((0, 0), False), ((2, 1), False)],
)
def test_queen_geometry(delta: tuple[int, int], expected: bool) -> None:
    assert queen_geometry(delta) == expected


@pytest.mark.parametrize(
    "delta, expected",
    [((1, 0), True), ((0, 1), True), ((1, 1), False), ((2, 0), False), ((0, 0), False)],
)
def test_rook_geometry(delta: tuple[int, int], expected: bool) -> None:
    assert rook_geometry(delta) == expected


@pytest.mark.parametrize(
    "delta, expected",
    [((1, 1), True), ((1, 0), False), ((0, 1), False), ((2, 2), False), ((0, 0), False)],
)
def test_bishop_geometry(delta: tuple[int, int], expected: bool) -> None:
    assert bishop_geometry(delta) == expected


@pytest.mark.parametrize(
    "delta, expected",
    [((2, 1), True), ((1, 2), True), ((2, 2), False), ((1, 1), False), ((3, 0), False)],
)
def test_knight_geometry(delta: tuple[int, int], expected: bool) -> None:
    assert knight_geometry(delta) == expected


@pytest.mark.parametrize(
    "delta, expected",
    [((0, 1), False), ((1, 0), False), ((0, 2), True), ((4, 0), True), ((2, 2), False), ((0, 0), False)],
)
def test_stag_geometry(delta: tuple[int, int], expected: bool) -> None:
    assert stag_geometry(delta) == expected


@pytest.mark.parametrize(
    "delta, expected",
    [((1, 1), False), ((2, 2), True), ((4, 4), True), ((2, 1), False), ((0, 2), False), ((0, 0), False)],
)
def test_trident_geometry(delta: tuple[int, int], expected: bool) -> None:
    assert trident_geometry(delta) == expected


def test_every_kind_has_a_movement_rule() -> None:
    assert set(MOVEMENT_RULES.keys()) == set(PieceKind)


# -- SHARED PRECONDITIONS --
@pytest.mark.parametrize("kind", ALL_KINDS)
@pytest.mark.parametrize("destination", [Tile(-1, 2), Tile(2, -2), Tile(5, 2), Tile(2, 5), Tile(6, 6)])
def test_off_board_destination_is_never_valid(
    board_with_single_piece, kind: PieceKind, destination: Tile
) -> None:
    board, piece = board_with_single_piece(kind, 2, 2)
    assert not piece.is_valid_move(destination, board)


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_staying_put_is_never_valid(board_with_single_piece, kind: PieceKind) -> None:
    """The piece's own tile is occupied (by itself)"""
    board, piece = board_with_single_piece(kind, 2, 2)
    assert not piece.is_valid_move(Tile(2, 2), board)


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_occupied_destination_is_never_valid(kind: PieceKind) -> None:
    """Surround the piece with blockers on every tile: no captures exist, so nothing is reachable"""
    board = Board()
    piece = Piece(kind, 2, 2)
    board.place_piece(piece)
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if (row, col) != (2, 2):
                board.place_piece(Piece(PieceKind.ROOK, row, col))

    assert piece.candidate_moves(board) == []


# -- BOUNDARY CASES ON AN OTHERWISE EMPTY BOARD --
@pytest.mark.parametrize(
    "kind, destination, expected",
    [
        (PieceKind.QUEEN, Tile(1, 1), True),
        (PieceKind.QUEEN, Tile(0, 0), False),
        (PieceKind.QUEEN, Tile(0, 2), False),
        (PieceKind.ROOK, Tile(1, 0), True),
        (PieceKind.ROOK, Tile(1, 1), False),
        (PieceKind.BISHOP, Tile(1, 1), True),
        (PieceKind.BISHOP, Tile(0, 1), False),
        (PieceKind.KNIGHT, Tile(2, 1), True),
        (PieceKind.KNIGHT, Tile(1, 2), True),
        (PieceKind.KNIGHT, Tile(2, 2), False),
        (PieceKind.STAG, Tile(0, 1), False),
        (PieceKind.STAG, Tile(1, 0), False),
        (PieceKind.STAG, Tile(0, 2), True),
        (PieceKind.STAG, Tile(0, 4), True),
        (PieceKind.TRIDENT, Tile(1, 1), False),
        (PieceKind.TRIDENT, Tile(2, 2), True),
        (PieceKind.TRIDENT, Tile(4, 4), True),
    ],
)
def test_moves_from_the_corner(
    board_with_single_piece, kind: PieceKind, destination: Tile, expected: bool
) -> None:
    board, piece = board_with_single_piece(kind, 0, 0)
    assert is_valid_move(kind, Tile(0, 0), destination, board) == expected
    assert piece.is_valid_move(destination, board) == expected


@pytest.mark.parametrize("kind", [PieceKind.STAG, PieceKind.TRIDENT])
def test_jumping_pieces_ignore_blockers_in_between(kind: PieceKind) -> None:
    """Only the destination matters, whatever stands in between"""
    board = Board.from_text("S3T/RR1RR/2R2/RR1RR/5")
    piece = board.piece(Tile(0, 0) if kind == PieceKind.STAG else Tile(0, 4))
    assert piece is not None
    assert piece.is_valid_move(Tile(4, 0), board)


def test_candidate_moves_of_a_centered_knight(board_with_single_piece) -> None:
    board, piece = board_with_single_piece(PieceKind.KNIGHT, 2, 2)
    expected = {
        Tile(0, 1), Tile(0, 3), Tile(1, 0), Tile(1, 4),
        Tile(3, 0), Tile(3, 4), Tile(4, 1), Tile(4, 3),
    }
    assert set(piece.candidate_moves(board)) == expected


def test_candidate_moves_of_a_stag(board_with_single_piece) -> None:
    board, piece = board_with_single_piece(PieceKind.STAG, 0, 0)
    assert set(piece.candidate_moves(board)) == {
        Tile(0, 2), Tile(0, 3), Tile(0, 4), Tile(2, 0), Tile(3, 0), Tile(4, 0)
    }
