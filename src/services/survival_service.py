"""Orchestration of communication from a presentation layer to the game engine (and the reverse direction)."""

import logging

from src.api.models import (
    GameStateResponse,
    MoveResponse,
    TargetResponse,
    TileRequest,
    ValidMovesResponse,
    WaveResponse,
)
from src.core.models import GameModel
from src.core.shared_types import Phase, PieceKind
from src.survichess.session import Session
from src.survichess.tile import Tile

logger = logging.getLogger(__name__)


class SurvivalService:
    """Orchestration of layers for one game of survival chess."""

    def __init__(self, session: Session) -> None:
        self.session = session

    # -- Presentation layer calls ---
    def start_game(self) -> GameStateResponse:
        """Start a new game (also used for restarting: the board is dealt anew)."""
        self.session.start_game()
        return self.get_game_state()

    def stop_game(self) -> GameStateResponse:
        self.session.stop_game()
        return self.get_game_state()

    def get_game_state(self) -> GameStateResponse:
        return self._create_state_response(self.session.to_model())

    def select(self, request: TileRequest) -> GameStateResponse:
        self.session.controller.select(request.row, request.col)
        return self.get_game_state()

    def clear_selection(self) -> GameStateResponse:
        self.session.controller.clear_selection()
        return self.get_game_state()

    def move(self, request: TileRequest) -> MoveResponse:
        moved = self.session.controller.try_move(request.row, request.col)
        return MoveResponse(moved=moved, state=self.get_game_state())

    def click(self, request: TileRequest) -> MoveResponse:
        """
        A click on a tile.
        ----
        1. nothing selected yet? select the tile (if it holds a piece).
        2. clicked the selected tile again? deselect.
        3. otherwise try to move there. If that fails and the tile holds a piece, select that piece instead.
        """
        controller = self.session.controller
        clicked = Tile(request.row, request.col)
        logger.debug("Click on %s (selection: %s)", clicked, controller.selection)

        if controller.selection is None:
            controller.select(clicked.row, clicked.col)
            return MoveResponse(moved=False, state=self.get_game_state())

        if controller.selection == clicked:
            controller.clear_selection()
            return MoveResponse(moved=False, state=self.get_game_state())

        moved = controller.try_move(clicked.row, clicked.col)
        if not moved and controller.board.piece(clicked) is not None:
            controller.select(clicked.row, clicked.col)
        return MoveResponse(moved=moved, state=self.get_game_state())

    def valid_moves(self) -> ValidMovesResponse:
        controller = self.session.controller
        selection = controller.selection
        return ValidMovesResponse(
            selection=selection.as_tuple() if selection else None,
            destinations=[tile.as_tuple() for tile in controller.valid_moves()],
        )

    # -- Internal helpers --
    def _create_state_response(self, model: GameModel) -> GameStateResponse:
        """Convert info in GameModel to a GameStateResponse."""
        return GameStateResponse(
            board=model.board,
            selection=model.selection,
            phase=Phase(model.phase),
            wave=WaveResponse(
                wave_number=model.wave_number,
                targets=[
                    TargetResponse(
                        row=target.row, col=target.col, kind=PieceKind(target.kind)
                    )
                    for target in model.targets
                ],
                danger_tiles=model.danger_tiles,
                time_remaining=model.time_remaining,
                total_time=model.total_time,
                lives_remaining=model.lives_remaining,
            ),
        )
