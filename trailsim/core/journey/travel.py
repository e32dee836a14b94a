"""Daily travel: miles, consumption and weather"""

import logging
import random
from dataclasses import dataclass

from trailsim.core.enums import Pace, Rations, ResourceName, Weather
from trailsim.core.resources import ledger
from trailsim.core.state import SimulationState
from trailsim.core.theme import ThemeDescriptor

logger = logging.getLogger(__name__)

# === Pace ===
MILES_PER_DAY: dict[Pace, int] = {
    Pace.MELLOW: 30,
    Pace.STEADY: 50,
    Pace.RUSH: 70,
}
FUEL_PER_DAY: dict[Pace, int] = {
    Pace.MELLOW: 8,
    Pace.STEADY: 12,
    Pace.RUSH: 18,
}
PACE_MORALE: dict[Pace, int] = {
    Pace.MELLOW: -2,
    Pace.STEADY: 0,
    Pace.RUSH: 3,
}

# === Rations ===
FOOD_PER_DAY: dict[Rations, int] = {
    Rations.BARE: 4,
    Rations.NORMAL: 8,
    Rations.FEAST: 15,
}
RATIONS_MORALE: dict[Rations, int] = {
    Rations.BARE: 2,
    Rations.NORMAL: 0,
    Rations.FEAST: -2,
}

# === Weather ===
WEATHER_MORALE: dict[Weather, int] = {
    Weather.CLEAR: 0,
    Weather.RAIN: 3,
    Weather.HOT: 0,
    Weather.BAD: 8,
}
HOT_WEATHER_EXTRA_FOOD = 3
# cumulative upper bounds of a uniform [0, 1) draw
WEATHER_TABLE: tuple[tuple[float, Weather], ...] = (
    (0.70, Weather.CLEAR),
    (0.85, Weather.RAIN),
    (0.95, Weather.HOT),
)

DEFAULT_PHASE_DRAIN = 5
SPECIAL_ITEM_DAILY_USE = 2


@dataclass
class Consumption:
    fuel: int
    food: int
    profession_drain: int
    morale_modifiers: int

    @property
    def morale(self) -> int:
        return self.profession_drain + self.morale_modifiers


def miles_per_day(pace: Pace) -> int:
    return MILES_PER_DAY[pace]


def profession_drain(state: SimulationState, phase: str) -> int:
    return state.modifiers.morale_drain_by_phase.get(phase, DEFAULT_PHASE_DRAIN)


def consumption_rates(state: SimulationState, phase: str) -> Consumption:
    food = FOOD_PER_DAY[state.rations]
    if state.weather == Weather.HOT:
        food += HOT_WEATHER_EXTRA_FOOD
    return Consumption(
        fuel=FUEL_PER_DAY[state.pace],
        food=food,
        profession_drain=profession_drain(state, phase),
        morale_modifiers=(
            PACE_MORALE[state.pace]
            + RATIONS_MORALE[state.rations]
            + WEATHER_MORALE[state.weather]
        ),
    )


def deplete(
    state: SimulationState,
    theme: ThemeDescriptor,
    phase: str,
) -> Consumption:
    """Consume one day of fuel, food, special item and morale.

    A stocked (non-inverted) special item absorbs the drain the profession
    configures for this phase. The default drain for an unconfigured phase
    is never absorbed. Inverted special items simply decay.
    """
    rates = consumption_rates(state, phase)
    special_key = ResourceName.SPECIAL_ITEM.value
    special_spec = theme.resources.special_item

    effects: dict[str, int] = {ResourceName.FUEL.value: -rates.fuel}
    if not theme.resources.food.accumulates:
        effects[ResourceName.FOOD.value] = -rates.food

    morale_drain = rates.morale
    if state.resources[special_key] > 0:
        used = min(SPECIAL_ITEM_DAILY_USE, state.resources[special_key])
        effects[special_key] = -used
        if not special_spec.inverted:
            waived = state.modifiers.morale_drain_by_phase.get(phase, 0)
            morale_drain = max(0, rates.morale - waived)
    effects[ResourceName.MORALE.value] = -morale_drain

    ledger.apply_effects(state, theme, effects)
    logger.debug(
        "Depleted: fuel=%d food=%s morale=%d (phase=%s, weather=%s)",
        rates.fuel,
        effects.get(ResourceName.FOOD.value, 0),
        morale_drain,
        phase,
        state.weather.value,
    )
    return rates


def draw_weather(rng: random.Random) -> Weather:
    roll = rng.random()
    for bound, weather in WEATHER_TABLE:
        if roll < bound:
            return weather
    return Weather.BAD
