"""
The Game Controller mediates every change to the board coming from the player:
selecting a piece and trying to move it. After a move has been applied it asks the wave system whether the wave is won.
"""

import logging
from typing import Optional

from src.survichess.board import Board, BoardView
from src.survichess.tile import Tile
from src.survichess.waves import WaveManager

logger = logging.getLogger(__name__)


class GameController:
    def __init__(self, board: Board, waves: WaveManager) -> None:
        self._board = board
        self.waves = waves
        self.selection: Optional[Tile] = None

    @property
    def board(self) -> BoardView:
        return self._board

    def select(self, row: int, col: int) -> None:
        """Any occupied tile can be selected at any time. Selecting an empty (or off-board) tile clears the selection."""
        tile = Tile(row, col)
        if tile.is_within_bounds() and self._board.piece(tile) is not None:
            self.selection = tile
        else:
            self.selection = None
        logger.debug("Selection: %s", self.selection)

    def clear_selection(self) -> None:
        self.selection = None

    def try_move(self, row: int, col: int) -> bool:
        """
        Try moving the selected piece to (row, col).
        ---

        * No selection: nothing happens.
        * The selected tile lost its piece in the meantime: selection is cleared, nothing happens.
        * Illegal move: nothing happens, selection stays (the caller decides whether to reselect).
        * Legal move: board is updated, selection cleared, and only then is wave completion checked.
        Returns True if a move was made.
        """
        if self.selection is None:
            return False

        origin = self.selection
        piece = self._board.piece(origin)
        if piece is None:
            self.selection = None
            return False

        destination = Tile(row, col)
        if not piece.is_valid_move(destination, self._board):
            logger.debug("Rejected %s move %s -> %s", piece.tag, origin, destination)
            return False

        self._board.move_piece(origin, destination)
        self.selection = None
        self.waves.check_wave_completion()
        return True

    def valid_moves(self) -> list[Tile]:
        """Destinations for the selected piece (empty if nothing is selected)."""
        if self.selection is None:
            return []
        piece = self._board.piece(self.selection)
        if piece is None:
            return []
        return piece.candidate_moves(self._board)

    def snapshot(self) -> tuple[list[list[Optional[str]]], Optional[Tile]]:
        return self._board.snapshot(), self.selection
