"""Session factory"""

import random
from typing import Optional

from trailsim.config import settings
from trailsim.core.engine import TrailEngine
from trailsim.core.logging import get_logger, setup_logging
from trailsim.core.signal_bus import SignalBus
from trailsim.core.theme import ThemeDescriptor

logger = get_logger(__name__)

_logging_configured = False


def new_session(
    theme: ThemeDescriptor,
    seed: Optional[int] = None,
    bus: Optional[SignalBus] = None,
) -> TrailEngine:
    """Ready-to-play engine for one theme.

    The PRNG is seeded from `seed`, else settings.RANDOM_SEED, else OS entropy.
    """
    global _logging_configured
    if not _logging_configured:
        setup_logging(settings.LOG_LEVEL)
        _logging_configured = True

    if seed is None:
        seed = settings.RANDOM_SEED
    engine = TrailEngine(theme, rng=random.Random(seed), bus=bus)
    logger.info("New session: theme=%s seed=%s", theme.name, seed)
    return engine
