"""Choice events: availability and risk resolution"""

import logging
import random
from dataclasses import dataclass, field

from trailsim.core.conditions import evaluate_condition
from trailsim.core.state import SimulationState
from trailsim.core.theme import EventChoice, TrailEvent

logger = logging.getLogger(__name__)

DEFAULT_CHOICE_MESSAGE = "Continued on..."


@dataclass
class ChoiceOutcome:
    """Result of a resolved choice. The engine applies `effects`."""

    failed: bool
    message: str
    effects: dict[str, int] = field(default_factory=dict)
    ends_game: bool = False


def available_choices(state: SimulationState, event: TrailEvent) -> list[EventChoice]:
    return [c for c in event.choices if evaluate_condition(c.condition, state)]


def resolve_choice(choice: EventChoice, rng: random.Random) -> ChoiceOutcome:
    """Risky choices fail when the roll lands under `risk`."""
    message = choice.message or DEFAULT_CHOICE_MESSAGE
    if choice.risk > 0 and rng.random() < choice.risk:
        logger.debug("Choice failed: %s (risk=%.2f)", choice.text, choice.risk)
        return ChoiceOutcome(
            failed=True,
            message=choice.fail_message or message,
            effects=dict(choice.fail_effects),
            ends_game=choice.fail_ends_game,
        )
    return ChoiceOutcome(
        failed=False,
        message=message,
        effects=dict(choice.effects),
        ends_game=choice.ends_game,
    )
