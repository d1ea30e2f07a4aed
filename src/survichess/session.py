"""
The Session is the entrypoint into the domain layer for the service layer.
It owns the live board and wires generator, wave system and controller together.
"""

import logging
import random
from typing import Optional, Self

from src.core.config import Settings
from src.core.models import GameModel, TargetModel
from src.survichess.board import Board, BoardView
from src.survichess.controller import GameController
from src.survichess.generator import BoardGenerator
from src.survichess.scheduler import AsyncioScheduler, Scheduler
from src.survichess.waves import WaveManager

logger = logging.getLogger(__name__)


class Session:
    def __init__(
        self,
        board: Board,
        generator: BoardGenerator,
        waves: WaveManager,
        controller: GameController,
    ) -> None:
        self._board = board
        self.generator = generator
        self.waves = waves
        self.controller = controller

    @classmethod
    def create(
        cls,
        settings: Optional[Settings] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
    ) -> Self:
        """Build a session with a freshly generated board. The game itself starts with start_game()."""
        settings = settings if settings is not None else Settings()
        scheduler = scheduler if scheduler is not None else AsyncioScheduler()
        rng = rng if rng is not None else random.Random(settings.seed)

        generator = BoardGenerator(rng)
        board = generator.generate()
        waves = WaveManager(
            board,
            scheduler,
            rng=rng,
            starting_lives=settings.starting_lives,
            tick_seconds=settings.tick_seconds,
            transition_delay_seconds=settings.transition_delay_seconds,
        )
        controller = GameController(board, waves)
        return cls(board, generator, waves, controller)

    @property
    def board(self) -> BoardView:
        return self._board

    def start_game(self) -> None:
        """(Re)start: stop whatever is running, deal a new board and begin at wave 1."""
        self.waves.stop_game()
        self.generator.generate(self._board)
        logger.info("New board dealt: %s", self._board.to_text())
        self.controller.clear_selection()
        self.waves.start_game()

    def stop_game(self) -> None:
        self.waves.stop_game()

    def to_model(self) -> GameModel:
        """Encode into a format the Service layer uses"""
        wave = self.waves.snapshot()
        selection = self.controller.selection
        return GameModel(
            board=self._board.to_text(),
            selection=selection.as_tuple() if selection else None,
            phase=self.waves.phase.value,
            wave_number=wave.wave_number,
            lives_remaining=wave.lives_remaining,
            time_remaining=wave.time_remaining,
            total_time=wave.total_time,
            targets=[
                TargetModel(
                    row=target.origin.row,
                    col=target.origin.col,
                    kind=target.piece.tag,
                )
                for target in wave.targets
            ],
            danger_tiles=sorted(tile.as_tuple() for tile in self.waves.danger_tiles),
        )
