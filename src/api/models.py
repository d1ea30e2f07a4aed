"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Phase, PieceKind
from src.survichess.tile import BOARD_SIZE

Cell = tuple[int, int]


# --- REQUEST MODELS ---
class TileRequest(BaseModel):
    row: int
    col: int

    @field_validator(*["row", "col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        if not 0 <= value < BOARD_SIZE:
            raise InvalidRequestError(
                f"Coordinate {value} is off the board (must be 0 to {BOARD_SIZE - 1})."
            )
        return value


# --- RESPONSE MODELS ---
class TargetResponse(BaseModel):
    row: int
    col: int
    kind: PieceKind


class WaveResponse(BaseModel):
    wave_number: int
    targets: list[TargetResponse]
    danger_tiles: list[Cell]
    time_remaining: int
    total_time: int
    lives_remaining: int


class GameStateResponse(BaseModel):
    board: str
    selection: Optional[Cell]
    phase: Phase
    wave: WaveResponse


class MoveResponse(BaseModel):
    moved: bool
    state: GameStateResponse


class ValidMovesResponse(BaseModel):
    selection: Optional[Cell]
    destinations: list[Cell]
