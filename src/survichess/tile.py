"""
A tile (cell) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# The board is always 5x5 with a permanently empty centre tile
BOARD_SIZE = 5
CENTER = 2

# The four tiles orthogonally next to the centre (west, north, east, south)
MID_EDGE_TILES: frozenset[tuple[int, int]] = frozenset(
    {(CENTER, 0), (0, CENTER), (CENTER, BOARD_SIZE - 1), (BOARD_SIZE - 1, CENTER)}
)


@dataclass(frozen=True)
class Tile:
    row: int
    col: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)

    def is_dark(self) -> bool:
        """Checker pattern: tiles where row + col is even count as dark"""
        return (self.row + self.col) % 2 == 0

    def is_center(self) -> bool:
        return self.row == CENTER and self.col == CENTER

    def is_mid_edge(self) -> bool:
        return (self.row, self.col) in MID_EDGE_TILES

    def as_tuple(self) -> tuple[int, int]:
        return self.row, self.col


def all_tiles() -> list[Tile]:
    """Row by row, top-left to bottom-right."""
    return [Tile(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]
