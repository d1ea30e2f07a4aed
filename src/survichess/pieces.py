"""
The six kinds of pieces and their movement rules.

Key idea: Use strategy pattern to define the geometry of a legal move for each piece kind.
Every kind shares the same preconditions (destination on the board and empty: there are no captures).
No kind ever looks at the tiles in between, so Stag and Trident simply jump.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

from src.core.shared_types import PieceKind
from src.survichess.tile import BOARD_SIZE, Tile


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, tile: Tile) -> Optional["Piece"]: ...


# (|delta row|, |delta col|)
Delta = tuple[int, int]


# --- MOVEMENT RULES (geometry only) ---
def queen_geometry(delta: Delta) -> bool:
    """Exactly one step in any of the 8 directions"""
    d_row, d_col = delta
    return max(d_row, d_col) == 1


def rook_geometry(delta: Delta) -> bool:
    """Exactly one step, horizontal or vertical"""
    return delta in [(1, 0), (0, 1)]


def bishop_geometry(delta: Delta) -> bool:
    """Exactly one step diagonally"""
    return delta == (1, 1)


def knight_geometry(delta: Delta) -> bool:
    """The L-shape: |delta_row| + |delta_col| = 3, neither of them zero"""
    return delta in [(2, 1), (1, 2)]


def stag_geometry(delta: Delta) -> bool:
    """
    Stays on its row or column, but must skip at least one tile.
    The adjacent step is the one thing a Stag cannot do along a line.
    """
    d_row, d_col = delta
    return (d_row == 0 and d_col >= 2) or (d_col == 0 and d_row >= 2)


def trident_geometry(delta: Delta) -> bool:
    """Diagonal, skipping at least one tile (so never the adjacent diagonal)."""
    d_row, d_col = delta
    return d_row == d_col and d_row >= 2


# -- STRATEGY PATTERN: MOVEMENT RULES ---
GeometryFn = Callable[[Delta], bool]
MOVEMENT_RULES: dict[PieceKind, GeometryFn] = {
    PieceKind.QUEEN: queen_geometry,
    PieceKind.ROOK: rook_geometry,
    PieceKind.BISHOP: bishop_geometry,
    PieceKind.KNIGHT: knight_geometry,
    PieceKind.STAG: stag_geometry,
    PieceKind.TRIDENT: trident_geometry,
}


def is_valid_move(
    kind: PieceKind, origin: Tile, destination: Tile, board: Board
) -> bool:
    """
    Pure check, nothing gets moved.
    ---
    1. destination must lie on the board
    2. destination must be empty (any occupied tile is off limits, whatever the geometry)
    3. the kind's geometry must allow the jump from origin to destination
    """
    if not destination.is_within_bounds():
        return False
    if board.piece(destination) is not None:
        return False

    delta = (abs(destination.row - origin.row), abs(destination.col - origin.col))
    return MOVEMENT_RULES[kind](delta)


@dataclass(eq=False)
class Piece:
    """
    A piece is identified by reference (eq=False): two Queens are never "the same" Queen.
    That is what lets a wave keep track of its targets while they move around.
    """

    kind: PieceKind
    row: int
    col: int
    on_dark_square: bool = field(init=False)

    def __post_init__(self):
        # NOTE: Computed once from the starting tile and deliberately never updated by move_to().
        # A piece that moves onto a light tile still reports its original colour.
        self.on_dark_square = Tile(self.row, self.col).is_dark()

    @property
    def tile(self) -> Tile:
        return Tile(self.row, self.col)

    @property
    def tag(self) -> str:
        return self.kind.value

    @classmethod
    def from_tag(cls, character: str, tile: Tile) -> "Piece":
        return cls(PieceKind(character.upper()), tile.row, tile.col)

    def is_valid_move(self, destination: Tile, board: Board) -> bool:
        return is_valid_move(self.kind, self.tile, destination, board)

    def candidate_moves(self, board: Board) -> list[Tile]:
        """Every tile this piece could move to right now."""
        return [
            Tile(row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self.is_valid_move(Tile(row, col), board)
        ]

    def move_to(self, tile: Tile) -> None:
        """Update the stored position only (no validation here)."""
        self.row = tile.row
        self.col = tile.col

    def __repr__(self) -> str:
        return f"Piece({self.tag}@{self.row},{self.col})"
