"""Resource ledger: effect maps applied to the state

Effect keys form a closed set: the five resource names plus "distance" and
"days". Anything else is ignored.
"""

import logging
from typing import Mapping

from trailsim.core.enums import ResourceName
from trailsim.core.resources import calendar
from trailsim.core.state import SimulationState
from trailsim.core.theme import ThemeDescriptor

logger = logging.getLogger(__name__)

DISTANCE_KEY = "distance"
DAYS_KEY = "days"
RESOURCE_KEYS: frozenset[str] = frozenset(r.value for r in ResourceName)
EFFECT_KEYS: frozenset[str] = RESOURCE_KEYS | {DISTANCE_KEY, DAYS_KEY}

FOOD = ResourceName.FOOD.value
CURRENCY = ResourceName.CURRENCY.value


def apply_effects(
    state: SimulationState,
    theme: ThemeDescriptor,
    effects: Mapping[str, int] | None,
) -> None:
    """Apply an effect map, then clamp every non-currency resource."""
    if not effects:
        return

    for key, value in effects.items():
        if key == DISTANCE_KEY:
            if value < 0:
                logger.warning("Negative distance effect ignored: %s", value)
                continue
            state.distance += value
        elif key == DAYS_KEY:
            if value < 0:
                logger.warning("Negative days effect ignored: %s", value)
                continue
            calendar.advance(state, value)
        elif key in RESOURCE_KEYS:
            _add(state, key, value)
        else:
            logger.debug("Unknown effect key ignored: %s", key)

    clamp_resources(state, theme)


def adjust(
    state: SimulationState,
    theme: ThemeDescriptor,
    resource: ResourceName | str,
    amount: int,
) -> None:
    """Single-resource change with clamping."""
    _add(state, ResourceName(resource).value, amount)
    clamp_resources(state, theme)


def set_value(
    state: SimulationState,
    theme: ThemeDescriptor,
    resource: ResourceName | str,
    value: int,
) -> None:
    state.resources[ResourceName(resource).value] = value
    clamp_resources(state, theme)


def clamp_resources(state: SimulationState, theme: ThemeDescriptor) -> None:
    """Clamp to [0, max]. Currency may go negative and is never capped."""
    for key in RESOURCE_KEYS:
        if key == CURRENCY:
            continue
        value = state.resources[key]
        if value < 0:
            # only food tracks unmet demand
            if key == FOOD and not theme.resources.food.accumulates:
                state.food_shortfall += -value
            value = 0
        cap = theme.resources.get(key).max
        if cap is not None:
            value = min(cap, value)
        state.resources[key] = value


def _add(state: SimulationState, key: str, value: int) -> None:
    if key == FOOD and value > 0 and state.food_shortfall > 0:
        paid = min(state.food_shortfall, value)
        state.food_shortfall -= paid
        value -= paid
    state.resources[key] += value
