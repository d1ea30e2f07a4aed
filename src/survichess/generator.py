"""
Constrained-random board generation.

The pieces with the tightest placement rules go first (Tridents, then Bishops), the rest are dealt out from a shuffled bag.
"""

import logging
import random
from typing import Optional, TypeVar

from src.core.exceptions import BoardGenerationError
from src.core.shared_types import PieceKind
from src.survichess.board import Board, TileFilter
from src.survichess.pieces import Piece
from src.survichess.tile import Tile

logger = logging.getLogger(__name__)

T = TypeVar("T")

PIECES_PER_COLOR = 2
BAG_COUNTS: dict[PieceKind, int] = {
    PieceKind.QUEEN: 4,
    PieceKind.KNIGHT: 4,
    PieceKind.ROOK: 4,
    PieceKind.STAG: 4,
}


def is_dark(tile: Tile) -> bool:
    return tile.is_dark()


def is_light(tile: Tile) -> bool:
    return not tile.is_dark()


def is_dark_trident_tile(tile: Tile) -> bool:
    """Dark Tridents stay off the four tiles orthogonally next to the centre"""
    return tile.is_dark() and not tile.is_mid_edge()


# (kind, where it may go) in placement order
CONSTRAINED_PLACEMENTS: list[tuple[PieceKind, TileFilter]] = [
    (PieceKind.TRIDENT, is_dark_trident_tile),
    (PieceKind.TRIDENT, is_light),
    (PieceKind.BISHOP, is_dark),
    (PieceKind.BISHOP, is_light),
]


class BoardGenerator:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        # inject a seeded Random for reproducible boards
        self.rng = rng if rng is not None else random.Random()

    def generate(self, board: Optional[Board] = None) -> Board:
        """
        Fill (or refill) a board
        ---

        1. Clear all tiles. The centre stays empty for good.
        2. 2 Tridents on dark tiles, but not on the mid-edge tiles.
        3. 2 Tridents on light tiles.
        4. 2 Bishops on dark tiles.
        5. 2 Bishops on light tiles.
        6. The remaining 16 tiles get one piece each from a shuffled bag of 4 Queens, 4 Knights, 4 Rooks, 4 Stags.
        """
        board = board if board is not None else Board()
        board.clear()

        for kind, tile_filter in CONSTRAINED_PLACEMENTS:
            candidates = board.empty_tiles(tile_filter)
            for tile in self._pick(candidates, PIECES_PER_COLOR):
                board.place_piece(Piece(kind, tile.row, tile.col))

        bag = [kind for kind, count in BAG_COUNTS.items() for _ in range(count)]
        self.rng.shuffle(bag)
        empties = board.empty_tiles()
        self.rng.shuffle(empties)

        if len(empties) != len(bag):
            # only possible if the counts above no longer fit the board
            message = f"Bag/empty mismatch: empties={len(empties)}, bag={len(bag)}"
            logger.error(message)
            raise BoardGenerationError(message)

        for kind, tile in zip(bag, empties):
            board.place_piece(Piece(kind, tile.row, tile.col))

        logger.debug("Generated board %s", board.to_text())
        return board

    def _pick(self, candidates: list[T], n: int) -> list[T]:
        """n distinct items, uniformly at random. The input list is left untouched."""
        if len(candidates) < n:
            message = f"Not enough candidates (need {n}, have {len(candidates)})."
            logger.error(message)
            raise BoardGenerationError(message)
        pool = list(candidates)
        self.rng.shuffle(pool)
        return pool[:n]
