"""The Board owns the live 5x5 grid of pieces. Only the Controller and the Wave manager get to mutate it."""

import logging
from typing import Callable, Iterator, Optional, Protocol, Self

from src.core.exceptions import BoardNotationError
from src.core.shared_types import PieceKind
from src.survichess.pieces import Piece
from src.survichess.tile import BOARD_SIZE, Tile, all_tiles

logger = logging.getLogger(__name__)

PIECE_TAGS = {kind.value for kind in PieceKind}
TileFilter = Callable[[Tile], bool]


class BoardView(Protocol):
    """Read-only face of the Board, handed to anyone outside the engine."""

    def piece(self, tile: Tile) -> Optional[Piece]: ...
    def pieces(self) -> Iterator[tuple[Tile, Piece]]: ...
    def occupied_tiles(self) -> list[Tile]: ...
    def locate(self, piece: Piece) -> Optional[Tile]: ...
    def to_text(self) -> str: ...


class Board:
    def __init__(self) -> None:
        self._grid: list[list[Optional[Piece]]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Construct a board from its text notation.

        FEN-like: rows go from row 0 (top) to row 4 (bottom), separated by slashes.
        ex. "QRBNS/TT1BB/QR1NS/5/5"
        * a letter is a piece (Q, R, B, N, S, T)
        * a digit is that many empty tiles in a row
        """
        rows = text.strip().split("/")
        if len(rows) != BOARD_SIZE:
            raise BoardNotationError(
                f"Expected {BOARD_SIZE} rows separated by '/', got {len(rows)}: {text!r}"
            )

        board = cls()
        for row, row_text in enumerate(rows):
            col = 0
            for character in row_text:
                if character.isdigit():
                    col += int(character)
                elif character.upper() in PIECE_TAGS:
                    if col < BOARD_SIZE:
                        board.place_piece(Piece.from_tag(character, Tile(row, col)))
                    col += 1
                else:
                    raise BoardNotationError(
                        f"Unknown character {character!r} in row {row}: {row_text!r}"
                    )
            if col != BOARD_SIZE:
                raise BoardNotationError(
                    f"Row {row} covers {col} tiles instead of {BOARD_SIZE}: {row_text!r}"
                )
        return board

    def to_text(self) -> str:
        return "/".join(self._row_to_text(row) for row in range(BOARD_SIZE))

    def _row_to_text(self, row: int) -> str:
        characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_SIZE):
            piece = self._grid[row][col]
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(piece.tag)

        # an entirely empty row still gets its number
        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    # -- READ ACCESS --
    def piece(self, tile: Tile) -> Optional[Piece]:
        return self._grid[tile.row][tile.col]

    def is_empty(self, tile: Tile) -> bool:
        return self.piece(tile) is None

    def pieces(self) -> Iterator[tuple[Tile, Piece]]:
        for tile in all_tiles():
            piece = self.piece(tile)
            if piece is not None:
                yield tile, piece

    def occupied_tiles(self) -> list[Tile]:
        return [tile for tile, _ in self.pieces()]

    def empty_tiles(self, tile_filter: Optional[TileFilter] = None) -> list[Tile]:
        """
        Empty tiles, top-left to bottom-right.
        The centre tile is never handed out: it has to stay empty.
        """
        return [
            tile
            for tile in all_tiles()
            if not tile.is_center()
            and self.is_empty(tile)
            and (tile_filter is None or tile_filter(tile))
        ]

    def locate(self, piece: Piece) -> Optional[Tile]:
        """Find the tile that holds this exact piece (by reference, not by kind)."""
        return next((tile for tile, found in self.pieces() if found is piece), None)

    def snapshot(self) -> list[list[Optional[str]]]:
        """Grid of piece tags (None for empty tiles). A copy: changing it does nothing to the board."""
        return [
            [piece.tag if piece else None for piece in row] for row in self._grid
        ]

    # -- MUTATIONS --
    def clear(self) -> None:
        for row in self._grid:
            row[:] = [None] * BOARD_SIZE

    def place_piece(self, piece: Piece) -> None:
        """Put the piece on the tile it thinks it is on."""
        self._grid[piece.row][piece.col] = piece

    def move_piece(self, origin: Tile, destination: Tile) -> None:
        """
        Transfer ownership of the piece in one go: destination receives it, origin is cleared, stored position follows.
        NOTE: No legality checks here. That is the Controller's job.
        """
        piece = self.piece(origin)
        if piece is None:
            return
        self._grid[destination.row][destination.col] = piece
        self._grid[origin.row][origin.col] = None
        piece.move_to(destination)
        logger.debug("Moved %s from %s to %s", piece.tag, origin, destination)
