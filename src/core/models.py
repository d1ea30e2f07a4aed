"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The domain layer (Session) produces a GameModel, the Service turns it into API responses.
Only plain strings / ints in here, so nothing outside the domain layer can get hold of a live Piece.
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
Cell = tuple[int, int]
PieceTag = str


@dataclass
class TargetModel:
    row: int
    col: int
    kind: PieceTag


@dataclass
class GameModel:
    """Transport-safe snapshot of a running (or stopped) session."""

    board: str
    selection: Optional[Cell]
    phase: str
    wave_number: int
    lives_remaining: int
    time_remaining: int
    total_time: int
    targets: list[TargetModel] = field(default_factory=list)
    danger_tiles: list[Cell] = field(default_factory=list)
