"""Outbound events of the wave system. One handler per event kind, the last registration wins."""

from enum import Enum, auto
from typing import Any, Callable, Optional

Handler = Callable[..., None]


class WaveEvent(Enum):
    WAVE_START = auto()  # (wave snapshot)
    WAVE_END = auto()  # (success, wave snapshot)
    LIFE_LOST = auto()  # (lives remaining)
    GAME_OVER = auto()  # (final wave number)
    TIMER_UPDATE = auto()  # (seconds remaining)


class EventDispatcher:
    def __init__(self) -> None:
        self._handlers: dict[WaveEvent, Handler] = {}

    def register(self, event: WaveEvent, handler: Optional[Handler]) -> None:
        """Replace the handler for this event. Passing None removes it."""
        if handler is None:
            self._handlers.pop(event, None)
            return
        self._handlers[event] = handler

    def emit(self, event: WaveEvent, *args: Any) -> None:
        handler = self._handlers.get(event)
        if handler is not None:
            handler(*args)
