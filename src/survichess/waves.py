"""
Wave / survival state machine.

INACTIVE --start_game--> COUNTING_DOWN --(all targets safe)--> WAVE_ENDED --(delay)--> COUNTING_DOWN ...
                              |
                              +--(time is up / forced)--> WAVE_ENDED (life lost) or GAME_OVER (no lives left)

Every wave picks 2-4 pieces as targets. The tiles they stand on when the wave starts are the "danger tiles"
for the whole wave: a target is only safe once it stands on none of them (not just off its own starting tile).
"""

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Callable, Optional

from src.core.shared_types import ACTIVE_PHASES, Phase
from src.survichess.board import Board
from src.survichess.events import EventDispatcher, Handler, WaveEvent
from src.survichess.pieces import Piece
from src.survichess.scheduler import Scheduler, TimerHandle
from src.survichess.tile import Tile

logger = logging.getLogger(__name__)

MIN_TARGETS = 2
MAX_TARGETS = 4
STARTING_LIVES = 3

# seconds per wave, by number of targets
TIME_FOR_TARGETS: dict[int, int] = {2: 25, 3: 35, 4: 45}
FALLBACK_TIME = 15
# one second less every 3 waves, but never below 60% of the base time
WAVES_PER_SECOND_DISCOUNT = 3
MIN_TIME_FRACTION = 0.6


def time_for_wave(target_count: int, wave_number: int) -> int:
    """Total seconds a wave gets"""
    base = TIME_FOR_TARGETS.get(target_count, FALLBACK_TIME)
    discount = wave_number // WAVES_PER_SECOND_DISCOUNT
    return max(base - discount, math.floor(base * MIN_TIME_FRACTION))


@dataclass(frozen=True)
class Target:
    """A piece picked for this wave and the tile it stood on when the wave began (frozen for the wave)."""

    origin: Tile
    piece: Piece


@dataclass(frozen=True)
class WaveSnapshot:
    wave_number: int
    targets: list[Target] = field(default_factory=list)
    time_remaining: int = 0
    total_time: int = 0
    lives_remaining: int = STARTING_LIVES


class WaveManager:
    def __init__(
        self,
        board: Board,
        scheduler: Scheduler,
        rng: Optional[random.Random] = None,
        starting_lives: int = STARTING_LIVES,
        tick_seconds: float = 1.0,
        transition_delay_seconds: float = 2.0,
    ) -> None:
        self._board = board
        self._scheduler = scheduler
        self._rng = rng if rng is not None else random.Random()
        self._starting_lives = starting_lives
        self._tick_seconds = tick_seconds
        self._transition_delay = transition_delay_seconds
        self.events = EventDispatcher()

        self.phase = Phase.INACTIVE
        self.wave_number = 0
        self.lives_remaining = starting_lives
        self.time_remaining = 0
        self.total_time = 0
        self._targets: list[Target] = []
        self._danger_tiles: frozenset[Tile] = frozenset()
        self._countdown: Optional[TimerHandle] = None
        self._transition: Optional[TimerHandle] = None
        # bumped by every start/stop, so a wave ending can tell its game is gone
        self._game_count = 0
        self._last_wave_cleared = False

    # --- CALLBACK REGISTRATION ---
    def on(self, event: WaveEvent, handler: Optional[Handler]) -> None:
        self.events.register(event, handler)

    def set_callbacks(
        self,
        on_wave_start: Optional[Callable[[WaveSnapshot], None]] = None,
        on_wave_end: Optional[Callable[[bool, WaveSnapshot], None]] = None,
        on_life_lost: Optional[Callable[[int], None]] = None,
        on_game_over: Optional[Callable[[int], None]] = None,
        on_timer_update: Optional[Callable[[int], None]] = None,
    ) -> None:
        """Register all handlers at once. Any handler not given is removed."""
        self.on(WaveEvent.WAVE_START, on_wave_start)
        self.on(WaveEvent.WAVE_END, on_wave_end)
        self.on(WaveEvent.LIFE_LOST, on_life_lost)
        self.on(WaveEvent.GAME_OVER, on_game_over)
        self.on(WaveEvent.TIMER_UPDATE, on_timer_update)

    # --- LIFECYCLE ---
    @property
    def is_active(self) -> bool:
        return self.phase in ACTIVE_PHASES

    def start_game(self) -> None:
        self._cancel_timers()
        self._game_count += 1
        self.wave_number = 0
        self.lives_remaining = self._starting_lives
        self._set_targets([])
        self.phase = Phase.COUNTING_DOWN
        logger.info("Game started with %d lives", self.lives_remaining)
        self.start_next_wave()

    def stop_game(self) -> None:
        """Callable at any time. Both the countdown and a pending wave transition are cancelled."""
        self._cancel_timers()
        self._game_count += 1
        if self.phase != Phase.INACTIVE:
            logger.info("Game stopped at wave %d", self.wave_number)
        self.phase = Phase.INACTIVE

    def start_next_wave(self) -> None:
        if not self.is_active:
            return

        self._transition = None
        self.wave_number += 1
        self._set_targets(self._select_targets())
        self.total_time = time_for_wave(len(self._targets), self.wave_number)
        self.time_remaining = self.total_time
        self.phase = Phase.COUNTING_DOWN

        logger.info(
            "Wave %d started: %d targets, %d seconds",
            self.wave_number,
            len(self._targets),
            self.total_time,
        )
        self.events.emit(WaveEvent.WAVE_START, self.snapshot())
        self._schedule_tick()

    def check_wave_completion(self) -> None:
        """Called after every applied move. Ends the wave successfully once no target stands on a danger tile."""
        if self.phase != Phase.COUNTING_DOWN or not self._targets:
            return

        if all(not self._is_in_danger(target) for target in self._targets):
            self._end_wave(success=True)

    def force_wave_failure(self) -> None:
        """End the current wave as if the time ran out.

        Also allowed during the pause after a failed wave (each call costs a life), but not after a
        cleared one: that wave already ended well.
        """
        if self.phase == Phase.COUNTING_DOWN:
            self._end_wave(success=False)
        elif self.phase == Phase.WAVE_ENDED and not self._last_wave_cleared:
            self._end_wave(success=False)

    # --- QUERIES ---
    def snapshot(self) -> WaveSnapshot:
        return WaveSnapshot(
            wave_number=self.wave_number,
            targets=list(self._targets),
            time_remaining=self.time_remaining,
            total_time=self.total_time,
            lives_remaining=self.lives_remaining,
        )

    @property
    def targets(self) -> list[Target]:
        return list(self._targets)

    @property
    def danger_tiles(self) -> frozenset[Tile]:
        return self._danger_tiles

    def is_danger_tile(self, tile: Tile) -> bool:
        return tile in self._danger_tiles

    def is_target(self, piece: Piece) -> bool:
        return any(target.piece is piece for target in self._targets)

    # --- PRIVATE HELPERS ---
    def _set_targets(self, targets: list[Target]) -> None:
        self._targets = targets
        self._danger_tiles = frozenset(target.origin for target in targets)

    def _select_targets(self) -> list[Target]:
        """Between 2 and 4 random pieces (fewer if the board does not have that many)."""
        candidates = [Target(tile, piece) for tile, piece in self._board.pieces()]
        available = len(candidates)
        min_targets = min(MIN_TARGETS, available)
        max_targets = min(MAX_TARGETS, available)
        target_count = self._rng.randint(min_targets, max_targets)
        self._rng.shuffle(candidates)
        return candidates[:target_count]

    def _is_in_danger(self, target: Target) -> bool:
        # a target that went missing from the board cannot be in danger
        current_tile = self._board.locate(target.piece)
        return current_tile is not None and self.is_danger_tile(current_tile)

    def _schedule_tick(self) -> None:
        self._countdown = self._scheduler.call_later(self._tick_seconds, self._tick)

    def _tick(self) -> None:
        self._countdown = None
        if self.phase != Phase.COUNTING_DOWN:
            return

        self.time_remaining -= 1
        self.events.emit(WaveEvent.TIMER_UPDATE, self.time_remaining)
        if self.time_remaining <= 0:
            self._end_wave(success=False)
        else:
            self._schedule_tick()

    def _end_wave(self, success: bool) -> None:
        self._cancel_countdown()
        self.phase = Phase.WAVE_ENDED
        self._last_wave_cleared = success
        game = self._game_count
        logger.info(
            "Wave %d %s", self.wave_number, "cleared" if success else "failed"
        )
        self.events.emit(WaveEvent.WAVE_END, success, self.snapshot())
        # a handler that stopped or restarted the game has the last word
        if not self._still_ending(game):
            return

        if not success:
            self.lives_remaining -= 1
            logger.info("Life lost, %d remaining", self.lives_remaining)
            self.events.emit(WaveEvent.LIFE_LOST, self.lives_remaining)
            if not self._still_ending(game):
                return

            if self.lives_remaining <= 0:
                self._cancel_timers()
                self.phase = Phase.GAME_OVER
                logger.info("Game over after wave %d", self.wave_number)
                self.events.emit(WaveEvent.GAME_OVER, self.wave_number)
                return

        self._schedule_transition()

    def _still_ending(self, game: int) -> bool:
        return self.phase == Phase.WAVE_ENDED and self._game_count == game

    def _schedule_transition(self) -> None:
        # only one pending transition at a time
        if self._transition is not None:
            self._transition.cancel()
        self._transition = self._scheduler.call_later(
            self._transition_delay, self._on_transition
        )

    def _on_transition(self) -> None:
        self._transition = None
        if self.phase == Phase.WAVE_ENDED:
            self.start_next_wave()

    def _cancel_countdown(self) -> None:
        if self._countdown is not None:
            self._countdown.cancel()
            self._countdown = None

    def _cancel_timers(self) -> None:
        self._cancel_countdown()
        if self._transition is not None:
            self._transition.cancel()
            self._transition = None
