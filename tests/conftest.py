"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

import random
from dataclasses import dataclass, field
from typing import Callable

import pytest

from src.core.config import Settings
from src.survichess.board import Board
from src.survichess.session import Session
from src.survichess.waves import WaveManager

# every tile but the centre holds a piece (same counts as a generated board)
FULL_BOARD = "TQRNB/SNBQR/RT1SQ/NBTNS/QSRBT"


@dataclass
class FakeHandle:
    when: float
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class FakeScheduler:
    """Manual clock: nothing fires until advance() is called."""

    now: float = 0.0
    handles: list[FakeHandle] = field(default_factory=list)

    def call_later(self, delay: float, callback: Callable[[], None]) -> FakeHandle:
        handle = FakeHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    def pending(self) -> list[FakeHandle]:
        return [handle for handle in self.handles if not handle.cancelled]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due callbacks in order (including ones scheduled along the way)."""
        end = self.now + seconds
        while True:
            due = [handle for handle in self.pending() if handle.when <= end]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.handles.remove(handle)
            self.now = handle.when
            handle.callback()
        self.now = end


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        starting_lives=3,
        tick_seconds=1.0,
        transition_delay_seconds=2.0,
        log_level="DEBUG",
        seed=None,
    )


@pytest.fixture
def full_board() -> Board:
    return Board.from_text(FULL_BOARD)


@pytest.fixture
def wave_manager(
    full_board: Board, scheduler: FakeScheduler, rng: random.Random
) -> WaveManager:
    return WaveManager(full_board, scheduler, rng=rng)


@pytest.fixture
def session(
    settings: Settings, scheduler: FakeScheduler, rng: random.Random
) -> Session:
    return Session.create(settings, scheduler=scheduler, rng=rng)
