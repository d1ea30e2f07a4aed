"""
Type definitions used across layers
"""

from enum import StrEnum


class PieceKind(StrEnum):
    """The six movable kinds. The value is the single-character tag shown to external consumers."""

    QUEEN = "Q"
    ROOK = "R"
    BISHOP = "B"
    KNIGHT = "N"
    STAG = "S"
    TRIDENT = "T"


class Phase(StrEnum):
    INACTIVE = "inactive"
    COUNTING_DOWN = "counting down"
    WAVE_ENDED = "wave ended"
    GAME_OVER = "game over"


# a game is "active" while waves keep coming, including the short pause in between two waves
ACTIVE_PHASES: frozenset[Phase] = frozenset({Phase.COUNTING_DOWN, Phase.WAVE_ENDED})
