"""
Headless bootstrap: runs a session on the asyncio event loop and logs what happens.

A presentation layer would do the same wiring, then forward clicks to SurvivalService.click().
Without anyone moving pieces every wave times out, so this runs until the lives are gone.
"""

import asyncio
import logging

from src.core.config import Settings, get_settings
from src.core.logging_config import configure_logging
from src.services.survival_service import SurvivalService
from src.survichess.events import WaveEvent
from src.survichess.scheduler import AsyncioScheduler
from src.survichess.session import Session

logger = logging.getLogger(__name__)


async def run(settings: Settings) -> int:
    """Returns the final wave number."""
    game_over: asyncio.Future[int] = asyncio.get_running_loop().create_future()

    session = Session.create(settings, scheduler=AsyncioScheduler())
    service = SurvivalService(session)
    waves = session.waves
    waves.on(
        WaveEvent.WAVE_START,
        lambda wave: logger.info(
            "Targets: %s", ", ".join(repr(t.piece) for t in wave.targets)
        ),
    )
    waves.on(WaveEvent.GAME_OVER, game_over.set_result)

    state = service.start_game()
    logger.info("Board: %s", state.board)
    try:
        return await game_over
    finally:
        service.stop_game()


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    final_wave = asyncio.run(run(settings))
    logger.info("Survived until wave %d", final_wave)


if __name__ == "__main__":
    main()
