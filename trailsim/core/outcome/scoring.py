"""Final score"""

import math

from trailsim.core.enums import ResourceName
from trailsim.core.state import SimulationState
from trailsim.core.theme import ThemeDescriptor

FUEL_POINTS = 2
MORALE_POINTS = 3
CURRENCY_POINTS = 0.5
MEMBER_POINTS = 500
EVIDENCE_POINTS = 10
CALM_POINTS = 5


def days_remaining(state: SimulationState, theme: ThemeDescriptor) -> int:
    """Mystery mode only. Never negative."""
    if not theme.mystery_enabled:
        return 0
    return max(0, theme.mystery.time_limit - state.days_elapsed)


def calculate_score(state: SimulationState, theme: ThemeDescriptor) -> int:
    """distance + leftover resources + surviving members, times the
    profession multiplier. Mystery themes also score evidence, spare days
    and (for inverted special items) how calm the party stayed.
    """
    res = state.resources
    score: float = state.distance
    score += res[ResourceName.FUEL.value] * FUEL_POINTS
    score += res[ResourceName.MORALE.value] * MORALE_POINTS
    score += max(0, res[ResourceName.CURRENCY.value]) * CURRENCY_POINTS
    score += len(state.active_members()) * MEMBER_POINTS

    if theme.mystery_enabled:
        score += res[ResourceName.FOOD.value] * EVIDENCE_POINTS
        score += days_remaining(state, theme) * theme.mystery.bonus_points_per_day
        if theme.resources.special_item.inverted:
            score += max(0, 100 - res[ResourceName.SPECIAL_ITEM.value]) * CALM_POINTS

    return math.floor(score * state.score_multiplier)
